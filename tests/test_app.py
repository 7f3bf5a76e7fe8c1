# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
import os
import pytest
from unittest.mock import patch

from donationhub.app import app, initialize_database, lifespan


@pytest.mark.asyncio
async def test_app_startup_initializes_database(mocker, caplog):
    """Test that startup creates tables and seeds the store"""
    mock_initialize = mocker.patch('donationhub.app.initialize_database')

    with caplog.at_level(logging.INFO, logger="donationhub.app"):
        async with lifespan(app):
            pass

    mock_initialize.assert_called_once_with()
    assert "DonationHub application starting up." in caplog.text
    assert "DonationHub application shutting down." in caplog.text


def test_initialize_database_skips_seeding_when_disabled(mocker):
    mock_create_all = mocker.patch('donationhub.app.Base.metadata.create_all')
    mock_seed = mocker.patch('donationhub.app.initialize_store')
    mocker.patch('donationhub.app.settings.seed_sample_data', False)

    initialize_database()

    mock_create_all.assert_called_once()
    mock_seed.assert_not_called()


def test_initialize_database_seeds_when_enabled(mocker):
    mocker.patch('donationhub.app.Base.metadata.create_all')
    mock_seed = mocker.patch('donationhub.app.initialize_store')
    mocker.patch('donationhub.app.settings.seed_sample_data', True)

    initialize_database()

    mock_seed.assert_called_once()


def test_database_url_production_mode():
    """Test database URL selection outside of tests"""
    import importlib
    import donationhub.db.database

    try:
        with patch.dict(os.environ, {"TESTING": "0"}, clear=False):
            importlib.reload(donationhub.db.database)

            from donationhub.config import settings
            assert donationhub.db.database.SQLALCHEMY_DATABASE_URL == settings.database_url
    finally:
        importlib.reload(donationhub.db.database)


def test_health_and_root(client):
    from main import app as main_app

    assert main_app is app
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to DonationHub Backend API!"}

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
