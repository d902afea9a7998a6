"""Exception handlers translating errors into the JSON error envelope."""
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from src.accounts.config import Settings
from src.accounts.core.domain.errors import CustomerNotFound, EmailAlreadyExists, InvalidCustomer
from src.accounts.logging import get_logger

logger = get_logger(__name__)

GENERIC_DATABASE_MESSAGE = "An error occurred while processing your request"
GENERIC_INTERNAL_MESSAGE = "An unexpected error occurred"


def _error(status_code: int, error: str, **content) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **content})


def _validation_details(exc: RequestValidationError) -> list[dict[str, str]]:
    details = []
    for error in exc.errors():
        # Drop the "body"/"path" prefix so the field reads as the client sent it
        location = [str(part) for part in error.get("loc", ())[1:]]
        details.append({
            "field": ".".join(location),
            "message": error.get("msg", "Invalid value"),
        })
    return details


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register the handlers mapping domain, validation and storage errors to responses."""

    @app.exception_handler(CustomerNotFound)
    async def customer_not_found_handler(request: Request, exc: CustomerNotFound) -> JSONResponse:
        logger.warning(f"Customer not found: {exc}")
        return _error(status.HTTP_404_NOT_FOUND, "Customer not found", message=str(exc))

    @app.exception_handler(EmailAlreadyExists)
    async def email_already_exists_handler(request: Request, exc: EmailAlreadyExists) -> JSONResponse:
        logger.warning(f"Email conflict: {exc}")
        return _error(status.HTTP_409_CONFLICT, "Email already exists", message=str(exc))

    @app.exception_handler(InvalidCustomer)
    async def invalid_customer_handler(request: Request, exc: InvalidCustomer) -> JSONResponse:
        logger.warning(f"Customer validation failed: {exc}")
        return _error(status.HTTP_400_BAD_REQUEST, "Validation error", message=exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = _validation_details(exc)
        logger.warning(f"Request validation failed for {request.method} {request.url.path}: {details}")
        return _error(status.HTTP_400_BAD_REQUEST, "Validation error", details=details)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(f"Database error on {request.method} {request.url.path}")
        message = str(exc) if settings.is_development else GENERIC_DATABASE_MESSAGE
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error", message=message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        response = _error(exc.status_code, HTTPStatus(exc.status_code).phrase, message=str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    # Added before CORSMiddleware so 500 responses still carry CORS headers
    app.add_middleware(UnhandledErrorMiddleware, settings=settings)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn any exception no handler claimed into a 500 error envelope."""

    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            message = str(exc) if self.settings.is_development else GENERIC_INTERNAL_MESSAGE
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", message=message)
