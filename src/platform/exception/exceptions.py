from typing import Any, Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    error_type: str = 'Raw'

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        *,
        error_type: Optional[str] = None,
        errors: Optional[list[str]] = None,
        errors_validation: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        if error_type is not None:
            self.error_type = error_type
        self.errors = errors
        self.errors_validation = errors_validation
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        return {
            'errorType': self.error_type,
            'errorMessage': self.message,
            'errors': self.errors,
            'errorsValidation': self.errors_validation,
        }


class ValidationError(CustomBaseError):
    error_type = 'Validation'

    def __init__(
        self, message: str, errors_validation: Optional[list[dict[str, Any]]] = None
    ) -> None:
        super().__init__(message, 400, errors_validation=errors_validation)


class LoginError(CustomBaseError):
    error_type = 'General'

    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message, 400, errors=errors)


class AuthenticationError(CustomBaseError):
    error_type = 'Unauthenticated'

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class UnauthorizedError(CustomBaseError):
    error_type = 'Unauthorized'

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    error_type = 'NotFound'

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class InvalidStateError(CustomBaseError):
    error_type = 'InvalidState'

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidTargetError(CustomBaseError):
    error_type = 'InvalidTarget'

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class ConflictError(CustomBaseError):
    error_type = 'Conflict'

    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message, 409, errors=errors)


class LimitExceededError(CustomBaseError):
    error_type = 'LimitExceeded'

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class StorageError(CustomBaseError):
    """Wraps driver/ORM failures; the original exception is kept as __cause__"""

    error_type = 'Raw'

    def __init__(self, message: str = 'Storage operation failed') -> None:
        super().__init__(message, 500)


class AggregationError(CustomBaseError):
    error_type = 'Aggregation'

    def __init__(self, message: str = 'Error fetching ticket analytics') -> None:
        super().__init__(message, 500)
