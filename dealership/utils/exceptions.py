from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES: machine-readable constants for frontend switch/case
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    VALIDATION_ERROR        = "VALIDATION_ERROR"
    UNAUTHORIZED            = "UNAUTHORIZED"
    TOKEN_EXPIRED           = "TOKEN_EXPIRED"
    FORBIDDEN               = "FORBIDDEN"
    NOT_FOUND               = "NOT_FOUND"
    DUPLICATE_ENTRY         = "DUPLICATE_ENTRY"
    ACCOUNT_INACTIVE        = "ACCOUNT_INACTIVE"
    STORAGE_FAILURE         = "STORAGE_FAILURE"
    INTERNAL_SERVER_ERROR   = "INTERNAL_SERVER_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base exception for all application-level errors.
    Carries a machine-readable error_code for frontend handling.
    """
    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str,
        details: list | None = None,
        field: str | None = None,
        fields: dict[str, list[str]] | None = None,
    ):
        super().__init__(status_code=status_code, detail={
            "message": message,
            "error": {
                "code": error_code,
                "details": details,
                "field": field,
                "fields": fields,
            }
        })

    @property
    def error_code(self) -> str:
        return self.detail["error"]["code"]


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class UnauthorizedException(AppException):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, message, ErrorCode.UNAUTHORIZED)


class TokenExpiredException(AppException):
    def __init__(self):
        super().__init__(status.HTTP_401_UNAUTHORIZED, "Access token has expired", ErrorCode.TOKEN_EXPIRED)


class ForbiddenException(AppException):
    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(status.HTTP_403_FORBIDDEN, message, ErrorCode.FORBIDDEN)


class NotFoundException(AppException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found", ErrorCode.NOT_FOUND)


class DuplicateEntryException(AppException):
    def __init__(self, message: str = "Record already exists", field: str | None = None):
        super().__init__(status.HTTP_409_CONFLICT, message, ErrorCode.DUPLICATE_ENTRY, field=field)


class AccountInactiveException(AppException):
    def __init__(self):
        super().__init__(
            status.HTTP_403_FORBIDDEN,
            "Your account has been deactivated. Contact admin.",
            ErrorCode.ACCOUNT_INACTIVE,
        )


class ValidationException(AppException):
    """
    Field-level validation failure. `fields` maps every invalid field to its
    messages so the caller can point at each one.
    """
    def __init__(self, fields: dict[str, list[str]], message: str = "Validation error. Please check your input."):
        details = [
            {"field": name, "message": msg}
            for name, messages in fields.items()
            for msg in messages
        ]
        super().__init__(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            message,
            ErrorCode.VALIDATION_ERROR,
            details=details,
            fields=fields,
        )

    @property
    def fields(self) -> dict[str, list[str]]:
        return self.detail["error"]["fields"]


class StorageFailureException(AppException):
    """The vehicle store could not complete an operation. Safe to retry."""
    def __init__(self, message: str = "The storage backend could not complete the operation"):
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, message, ErrorCode.STORAGE_FAILURE)


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════
def field_errors(errors: list[dict], skip: tuple = ("body", "query")) -> dict[str, list[str]]:
    """
    Collapse pydantic-style errors into {field: [messages]}, keeping every field.
    `loc` prefixes such as ("body", "year") are reduced to "year".
    """
    fields: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in skip]
        name = ".".join(loc) if loc else "_form"
        message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        fields.setdefault(name, []).append(message)
    return fields
