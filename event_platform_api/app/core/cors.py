"""
Origin allow-list for browser-facing routes.

:class:`OriginGate` holds the configured origin patterns, compiled once
when the application is built.  Routers that serve browsers directly
opt in by using :class:`OriginGatedRoute` as their ``route_class``; every
request to such a route is checked before the endpoint runs.

A request without an ``Origin`` header is treated as same-origin and
passes.  A request whose origin matches no pattern is answered with a
bare 403: no body and no CORS headers, so the browser reports a CORS
failure and the endpoint (and therefore storage) is never reached.
"""

import logging
import re
from typing import Any, Callable, Coroutine, Iterable, Optional, Pattern, Tuple

from fastapi import Request, Response, status
from fastapi.routing import APIRoute

from .errors import RouterError, router_error_response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "POST, OPTIONS"
DEFAULT_ALLOWED_HEADERS = "Content-Type"
PREFLIGHT_MAX_AGE = "600"


class OriginGate:
    """An ordered set of origin patterns."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._rules: Tuple[Pattern[str], ...] = tuple(re.compile(p) for p in patterns)

    @property
    def rules(self) -> Tuple[Pattern[str], ...]:
        return self._rules

    def is_allowed(self, origin: Optional[str]) -> bool:
        """Return whether a request carrying ``origin`` may proceed."""
        if origin is None:
            return True
        return any(rule.fullmatch(origin) for rule in self._rules)


def get_origin_gate(request: Request) -> OriginGate:
    return request.app.state.origin_gate


class OriginGatedRoute(APIRoute):
    """API route that enforces the application's :class:`OriginGate`.

    Allowed cross-origin requests get ``Access-Control-Allow-Origin`` set
    to the caller's origin.  ``RouterError`` raised by the endpoint is
    rendered here so that error responses carry the same headers.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def gated_route_handler(request: Request) -> Response:
            origin = request.headers.get("origin")
            if not get_origin_gate(request).is_allowed(origin):
                logger.warning("Rejected %s %s from origin %s", request.method, request.url.path, origin)
                return Response(status_code=status.HTTP_403_FORBIDDEN)

            try:
                response = await original_route_handler(request)
            except RouterError as exc:
                response = router_error_response(exc)

            if origin is not None:
                response.headers["Access-Control-Allow-Origin"] = origin
                response.headers.append("Vary", "Origin")
                if request.method == "OPTIONS":
                    requested = request.headers.get("access-control-request-headers")
                    response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
                    response.headers["Access-Control-Allow-Headers"] = requested or DEFAULT_ALLOWED_HEADERS
                    response.headers["Access-Control-Max-Age"] = PREFLIGHT_MAX_AGE
            return response

        return gated_route_handler
