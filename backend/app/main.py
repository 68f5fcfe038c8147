"""Onboarding API application.

create_app() wires the v1 onboarding routes, the response headers, CORS for
the wizard front end, and the handlers that turn every failure into the
{"error": {...}} envelope.
"""

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.api.v1.router import router as v1_router
from app.core.config import settings
from app.core.errors import APIError, InternalError, ValidationError
from app.core.responses import ErrorDetail, ErrorResponse

logger = structlog.get_logger()

# The API only ever returns JSON
_STATIC_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}
_HSTS = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp hardening headers on every response.

    Responses under /api/ are marked no-store because the onboarding
    status changes whenever it is reconciled. HSTS is sent in production
    only, where TLS terminates at the proxy.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(_STATIC_HEADERS)
        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store, max-age=0"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = _HSTS
        return response


def _error_response(exc: APIError) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=exc.code, message=exc.message, details=exc.details)
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError; 5xx ones (QueryError) are logged first."""
    if exc.status_code >= 500:
        logger.warning(
            "API error",
            code=exc.code,
            status_code=exc.status_code,
            path=request.url.path,
        )
    return _error_response(exc)


def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report FastAPI parameter errors as a 400 with one detail per field."""
    details = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    return _error_response(ValidationError(details=details))


def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and answer with a generic 500."""
    logger.exception("Unhandled exception", exc_info=exc, path=request.url.path)
    return _error_response(InternalError())


def create_app() -> FastAPI:
    """Build the onboarding API."""
    app = FastAPI(
        title="Placement Onboarding API",
        version="1.0.0",
        description="Candidate onboarding progress for the placement platform",
    )

    app.add_middleware(SecurityHeadersMiddleware)
    # CORS is added last so it runs first and answers preflights itself
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health")
    def health_check() -> dict:
        """Liveness check; does not touch the database."""
        return {"status": "healthy"}

    return app


app = create_app()
