from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _error_content(
    *,
    error_type: str,
    message: str,
    errors: list[str] | None = None,
    errors_validation: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        'errorType': error_type,
        'errorMessage': message,
        'errors': errors,
        'errorsValidation': errors_validation,
    }


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    if error.status_code >= 500:
        cause = error.__cause__
        Logger.base.error(
            f'{request.method} {request.url.path} -> {type(error).__name__}: {error.message}'
            + (f' (cause: {type(cause).__name__}: {cause})' if cause else '')
        )
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    errors_validation = []
    for item in error.errors():
        loc = [str(part) for part in item.get('loc', ()) if part not in ('body', 'query', 'path')]
        field = '.'.join(loc) or 'body'
        errors_validation.append({field: item.get('msg', 'Invalid value')})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_content(
            error_type='Validation',
            message='Request validation error',
            errors_validation=errors_validation,
        ),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, StarletteHTTPException) else StarletteHTTPException(500)
    return JSONResponse(
        status_code=error.status_code,
        content=_error_content(error_type='General', message=str(error.detail)),
        headers=getattr(error, 'headers', None),
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}'
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content(error_type='Raw', message='Internal server error'),
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
