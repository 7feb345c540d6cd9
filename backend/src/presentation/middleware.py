"""HTTP middleware: request logging, security headers and body size limit."""

import time
from fastapi import HTTPException, Request, status
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from infrastructure.config import get_logger
from presentation.api.error_handlers import error_response
from presentation.security_headers import SECURITY_HEADERS

logger = get_logger("http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log method, path, status and duration of every request.
    
    Unhandled errors are logged with their traceback by the 500 handler;
    here they only get the request line.
    """
    
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.url.path} 500 {elapsed_ms:.1f}ms")
            raise
        
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(elapsed_ms, 1),
            },
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add browser hardening headers to every response."""
    
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class BodySizeLimitMiddleware:
    """
    Reject request bodies larger than max_body_size.
    
    A declared Content-Length above the limit is refused before the app
    runs. Bodies without one (chunked uploads) are counted as they are
    received; crossing the limit raises a 413 HTTPException while the
    endpoint is reading its body.
    """
    
    def __init__(self, app: ASGIApp, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size
    
    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        
        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            if not content_length.isdigit():
                response = error_response(status.HTTP_400_BAD_REQUEST, "Invalid Content-Length header")
                await response(scope, receive, send)
                return
            if int(content_length) > self.max_body_size:
                logger.warning(f"Rejected {scope['method']} {scope['path']}: body of {content_length} bytes")
                await self._too_large()(scope, receive, send)
                return
        
        received = 0
        
        async def counting_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    logger.warning(f"Rejected {scope['method']} {scope['path']}: streamed body over limit")
                    raise HTTPException(413, self._too_large_message())
            return message
        
        await self.app(scope, counting_receive, send)
    
    def _too_large_message(self) -> str:
        return f"Request body exceeds {self.max_body_size} bytes"
    
    def _too_large(self) -> Response:
        return error_response(413, self._too_large_message())
