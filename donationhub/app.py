# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from donationhub.api.v1.endpoints import auth, donations, locations, users
from donationhub.config import settings
from donationhub.db.database import Base, SessionLocal, engine
from donationhub.db.seed import initialize_store
from donationhub.db.storage import SqlKeyValueStore

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def initialize_database():
    """
    Creates the kv_store table if needed and seeds an empty store.
    """
    Base.metadata.create_all(bind=engine)
    if not settings.seed_sample_data:
        return
    db = SessionLocal()
    try:
        initialize_store(SqlKeyValueStore(db))
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("DonationHub application starting up.")
    initialize_database()
    yield
    logger.info("DonationHub application shutting down.")


app = FastAPI(
    title="DonationHub Backend API",
    description="API for matching donated items with volunteers who pick up and distribute them.",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
allowed_origins = settings.allowed_origins.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(donations.router, prefix="/api/v1")
app.include_router(locations.router, prefix="/api/v1")
