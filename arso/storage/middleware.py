"""Middleware serving API responses from the response cache."""
import logging
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from arso.storage.cache import ResponseCache

logger = logging.getLogger(__name__)

CACHEABLE_STATUSES = (200, 404)


def cache_key(request: Request) -> str:
    """Key a request by method, path and query string."""
    key = f"{request.method} {request.url.path}"
    if request.url.query:
        key += f"?{request.url.query}"
    return key


class ResponseCacheMiddleware(BaseHTTPMiddleware):
    """
    Replays stored responses for GET requests under the given path prefixes.

    On a miss the downstream response body is read in full, stored when its
    status is cacheable, and sent on unchanged.
    """

    def __init__(self, app: ASGIApp, cache: ResponseCache, prefixes: Iterable[str] = ("/",)):
        super().__init__(app)
        self.cache = cache
        self.prefixes = tuple(prefixes)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method != "GET" or not request.url.path.startswith(self.prefixes):
            return await call_next(request)

        key = cache_key(request)
        entry = self.cache.get(key)
        if entry is not None:
            logger.debug("Cache hit", extra={"key": key})
            return Response(content=entry.body, status_code=entry.status_code, headers=entry.headers)

        logger.debug("Cache miss", extra={"key": key})
        response = await call_next(request)
        if response.status_code not in CACHEABLE_STATUSES:
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        headers = dict(response.headers)
        self.cache.set(key, response.status_code, body, headers)
        return Response(content=body, status_code=response.status_code, headers=headers)
