from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from energy_harmony.utils.logger import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InvalidCredential(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class ValidationFailure(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation error"


class DataUnavailable(AppError):
    """The usage store could not answer a query."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Usage data unavailable"


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, **extra})


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.bind(path=request.url.path).error(
            "app_error",
            error=type(exc).__name__,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}

    # body model of the endpoint, to report every field when the body is missing
    route = request.scope.get("route")
    body_model = None

    if route is not None and hasattr(route, "dependant"):
        for dep in route.dependant.body_params:
            field_type = getattr(dep, "type_", None)
            if isinstance(field_type, type) and issubclass(field_type, BaseModel):
                body_model = field_type

    for err in exc.errors():
        loc = err["loc"]

        if tuple(loc) == ("body",) and body_model:
            for field in body_model.model_fields.keys():
                errors[field] = "Field required"
        else:
            field = loc[-1]
            errors[str(field)] = err["msg"]

    return error_response(status.HTTP_400_BAD_REQUEST, "Validation error", errors=errors)


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.bind(path=request.url.path).exception("database_error")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.bind(path=request.url.path).exception("unhandled_error")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
