import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from api.dependencies.logger import logger


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request, laid out like morgan's "short" format:

    <client> - <method> <path> HTTP/<version> <status> <content-length> - <ms> ms
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        client = request.client.host if request.client else "-"
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"

        logger.info(
            "%s - %s %s HTTP/%s %d %s - %.3f ms",
            client,
            request.method,
            url,
            request.scope.get("http_version", "1.1"),
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
        )
        return response
