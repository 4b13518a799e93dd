import asyncio

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from event_platform_api.app.core.db import init_db
from event_platform_api.app.core.errors import RouterError
from event_platform_api.app.main import create_app
from event_platform_api.app.services.newsletter_service import NewsletterService

from .conftest import PROD_ORIGIN

SUBSCRIBE = "/newsletter/subscribe/"


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.asyncio
async def test_first_subscribe_creates_list_with_one_subscriber(database):
    models = await init_db(database)
    handle = models.newsletter_subscription

    await NewsletterService.subscribe(handle, "launch", "a@hackillinois.org")

    assert await handle.collection.count_documents({}) == 1
    assert await NewsletterService.get_subscribers(handle, "launch") == {"a@hackillinois.org"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_repeated_subscribe_is_a_no_op(database):
    models = await init_db(database)
    handle = models.newsletter_subscription

    await NewsletterService.subscribe(handle, "launch", "a@hackillinois.org")
    await NewsletterService.subscribe(handle, "launch", "a@hackillinois.org")

    document = await handle.collection.find_one({"listId": "launch"})
    assert document["subscribers"] == ["a@hackillinois.org"]
    assert await handle.collection.count_documents({}) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_concurrent_subscribes_keep_both_addresses(database):
    models = await init_db(database)
    handle = models.newsletter_subscription

    await asyncio.gather(
        NewsletterService.subscribe(handle, "launch", "a@hackillinois.org"),
        NewsletterService.subscribe(handle, "launch", "b@hackillinois.org"),
    )

    assert await NewsletterService.get_subscribers(handle, "launch") == {"a@hackillinois.org", "b@hackillinois.org"}
    assert await handle.collection.count_documents({"listId": "launch"}) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_lists_are_independent(database):
    models = await init_db(database)
    handle = models.newsletter_subscription

    await NewsletterService.subscribe(handle, "launch", "a@hackillinois.org")
    await NewsletterService.subscribe(handle, "sponsors", "b@hackillinois.org")

    assert await NewsletterService.get_subscribers(handle, "launch") == {"a@hackillinois.org"}
    assert await NewsletterService.get_subscribers(handle, "sponsors") == {"b@hackillinois.org"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_address_format_is_not_checked(database):
    models = await init_db(database)
    handle = models.newsletter_subscription

    await NewsletterService.subscribe(handle, "any list name", "not-an-email")
    assert await NewsletterService.get_subscribers(handle, "any list name") == {"not-an-email"}


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "list_name, email_address",
    [(None, "a@hackillinois.org"), ("launch", None), ("", "a@hackillinois.org"), ("launch", ""), (None, None)],
)
async def test_missing_values_raise_invalid_params(database, list_name, email_address):
    models = await init_db(database)
    handle = models.newsletter_subscription

    with pytest.raises(RouterError) as excinfo:
        await NewsletterService.subscribe(handle, list_name, email_address)

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "InvalidParams"
    assert await handle.collection.count_documents({}) == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unknown_list_has_no_subscribers(database):
    models = await init_db(database)
    assert await NewsletterService.get_subscribers(models.newsletter_subscription, "nope") is None


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


@pytest.mark.api
def test_subscribe_end_to_end(client, models, run):
    body = {"listName": "testingList", "emailAddress": "a@hackillinois.org"}

    first = client.post(SUBSCRIBE, json=body)
    second = client.post(SUBSCRIBE, json=body)

    assert first.status_code == 200
    assert first.json() == {"status": "Success"}
    assert second.status_code == 200
    assert second.json() == {"status": "Success"}
    subscribers = run(NewsletterService.get_subscribers(models.newsletter_subscription, "testingList"))
    assert subscribers == {"a@hackillinois.org"}


@pytest.mark.api
def test_subscribe_from_production_site(client, models, run):
    response = client.post(
        SUBSCRIBE,
        json={"listName": "testingList", "emailAddress": "b@hackillinois.org"},
        headers={"Origin": PROD_ORIGIN},
    )

    assert response.status_code == 200
    subscribers = run(NewsletterService.get_subscribers(models.newsletter_subscription, "testingList"))
    assert subscribers == {"b@hackillinois.org"}


@pytest.mark.api
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"listName": "testingList"},
        {"emailAddress": "a@hackillinois.org"},
        {"listName": "", "emailAddress": "a@hackillinois.org"},
        {"listName": "testingList", "emailAddress": ""},
        {"listName": 12, "emailAddress": "a@hackillinois.org"},
        ["testingList", "a@hackillinois.org"],
    ],
)
def test_subscribe_invalid_params(client, models, run, body):
    response = client.post(SUBSCRIBE, json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "InvalidParams"}
    assert run(models.newsletter_subscription.collection.count_documents({})) == 0


@pytest.mark.api
def test_subscribe_with_non_json_body(client):
    response = client.post(SUBSCRIBE, content=b"listName=x", headers={"Content-Type": "text/plain"})

    assert response.status_code == 400
    assert response.json() == {"error": "InvalidParams"}


@pytest.mark.api
def test_storage_failure_becomes_internal_error(settings, mongo_client, monkeypatch):
    async def failing_subscribe(cls, handle, list_name, email_address):
        raise PyMongoError("connection reset")

    monkeypatch.setattr(NewsletterService, "subscribe", classmethod(failing_subscribe))
    app = create_app(settings, mongo_client)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.post(SUBSCRIBE, json={"listName": "testingList", "emailAddress": "a@hackillinois.org"})

    assert response.status_code == 500
    assert response.json() == {"error": "InternalError"}
