"""
Newsletter endpoints.

``POST /newsletter/subscribe/`` is called directly from the public
website, so this router uses :class:`OriginGatedRoute`: requests from
origins outside the configured allow-list are refused before the
handler runs.  The endpoint requires no authentication and creates the
named list on first use.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from event_platform_api.app.core.cors import OriginGatedRoute
from event_platform_api.app.core.db import Models, get_models
from event_platform_api.app.core.errors import RouterError
from event_platform_api.app.schemas.newsletter import SubscribeRequest, SubscribeResponse
from event_platform_api.app.services.newsletter_service import NewsletterService

router = APIRouter(route_class=OriginGatedRoute)


@router.post("/subscribe/", response_model=SubscribeResponse)
async def subscribe(request: Request, models: Models = Depends(get_models)) -> SubscribeResponse:
    """Subscribe an email address to a newsletter list.

    Body: ``{"listName": "testingList", "emailAddress": "example@hackillinois.org"}``.
    Returns ``{"status": "Success"}``; a missing or empty field yields
    HTTP 400 ``{"error": "InvalidParams"}``.
    """
    try:
        payload = SubscribeRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        # Not JSON, not an object, or non-string fields.
        raise RouterError(status.HTTP_400_BAD_REQUEST, "InvalidParams") from None

    await NewsletterService.subscribe(models.newsletter_subscription, payload.list_name, payload.email_address)
    return SubscribeResponse()


@router.options("/subscribe/", include_in_schema=False)
async def subscribe_preflight() -> Response:
    """Answer CORS preflight requests; the route class adds the CORS headers."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
