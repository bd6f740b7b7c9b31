"""
Request Context Middleware

Binds a request id, the method and the path to the structlog context for
the duration of each request, so every log line written while handling it
carries them. The id is echoed back in the X-Request-ID header; a caller
may supply its own.
"""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from chatterbox.shared.core.logging import clear_log_context, log_context


REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_log_context()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
