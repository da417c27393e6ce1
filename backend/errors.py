"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


class GatewayError(Exception):
    """Base exception with HTTP status code and optional diagnostic details."""

    def __init__(self, message: str, status_code: int = 500, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def to_body(self) -> dict:
        body = {"error": str(self)}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(GatewayError):
    """A required provider secret is not configured."""

    def __init__(self, setting: str):
        super().__init__(f"{setting} not configured", status_code=500)


class ClientInputError(GatewayError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class UpstreamProviderError(GatewayError):
    """Provider answered with a non-2xx status. The raw body goes back as details."""

    def __init__(self, provider: str, raw_body: str):
        super().__init__(f"{provider} error", status_code=502, details=raw_body)


class UpstreamTransportError(GatewayError):
    """Provider could not be reached. The cause is logged, never returned."""

    def __init__(self):
        super().__init__(INTERNAL_ERROR, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(GatewayError)
    async def handle_gateway_error(_request: Request, exc: GatewayError):
        return JSONResponse(exc.to_body(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_request: Request, exc: RequestValidationError):
        logger.info("Rejected request body: %s", exc.errors())
        return JSONResponse({"error": "Invalid request body"}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": INTERNAL_ERROR},
            status_code=500,
        )
