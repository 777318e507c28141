"""Domain errors and their HTTP translation."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("content_api")


class PortfolioError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = 500

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(PortfolioError):
    """Missing or out-of-range fields in a request body."""

    status_code = 400

    @classmethod
    def from_errors(cls, errors: list[dict]) -> "ValidationError":
        """Build from pydantic's ``errors()`` list."""
        details = []
        missing = []
        for err in errors:
            loc = [str(part) for part in err.get("loc", ()) if part != "body"]
            field = ".".join(loc) or "body"
            if err.get("type") == "missing":
                missing.append(field)
            details.append({"field": field, "message": err.get("msg", "Invalid value")})

        if missing:
            message = f"Missing required fields: {', '.join(missing)}"
        else:
            message = "Invalid fields: " + ", ".join(d["field"] for d in details)
        return cls(message, details=details)


class NotFound(PortfolioError):
    """Update target does not exist."""

    status_code = 404


class StoreUnavailable(PortfolioError):
    """The content store could not be reached or a query failed."""

    status_code = 500


class UpstreamDeliveryError(PortfolioError):
    """The email API rejected or failed to deliver a message."""

    status_code = 502


class RequestTimeout(PortfolioError):
    """A request or store call exceeded its time bound. Safe to retry."""

    status_code = 504

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["retryable"] = True
        return body


def register_error_handlers(app: FastAPI) -> None:
    """Attach JSON error handlers to the application."""

    @app.exception_handler(PortfolioError)
    async def portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
        headers = {"Retry-After": "1"} if isinstance(exc, RequestTimeout) else None
        return JSONResponse(exc.to_dict(), status_code=exc.status_code, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = ValidationError.from_errors(exc.errors())
        return JSONResponse(error.to_dict(), status_code=error.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse({"error": "Internal server error"}, status_code=500)
