"""create_kv_store_table

Revision ID: 5d2a9c7e1f03
Revises:
Create Date: 2025-10-06 10:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d2a9c7e1f03'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'kv_store',
        sa.Column('key', sa.String(length=255), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('key'),
    )
    op.create_index(op.f('ix_kv_store_key'), 'kv_store', ['key'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_kv_store_key'), table_name='kv_store')
    op.drop_table('kv_store')
