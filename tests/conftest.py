"""
Shared fixtures.

MongoDB is replaced by ``mongomock_motor``'s in-memory client; every
test gets a fresh one, so no state leaks between tests.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from event_platform_api.app.core.config import Settings
from event_platform_api.app.main import create_app

PROD_ORIGIN = "https://hackillinois.org"
PREVIEW_ORIGIN = "https://site-git-main-hackillinois.vercel.app"
EVIL_ORIGIN = "https://evil.example.com"


@pytest.fixture
def settings():
    return Settings(
        mongodb_database="event_platform_test",
        prod_regex=r"https://(www\.)?hackillinois\.org",
        deploy_regex=r"https://[a-z0-9-]*hackillinois[a-z0-9-]*\.vercel\.app",
    )


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def database(mongo_client, settings):
    return mongo_client[settings.mongodb_database]


@pytest.fixture
def client(settings, mongo_client):
    app = create_app(settings, mongo_client)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def models(client):
    return client.app.state.models


@pytest.fixture
def run():
    """Run a coroutine to completion from a synchronous test."""
    return asyncio.run
