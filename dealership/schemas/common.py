from pydantic import BaseModel
from typing import Any


# ─── Pagination Meta ───────────────────────────────────────────────────────────
class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int
    hasNext: bool
    hasPrev: bool

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        total_pages = (total + limit - 1) // limit if limit > 0 else 0
        return cls(
            page=page, limit=limit, total=total, totalPages=total_pages,
            hasNext=page < total_pages, hasPrev=page > 1,
        )


# ─── Error Envelope (documents what middleware/error_handler.py returns) ───────
class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorBody(BaseModel):
    code: str
    details: list[ErrorDetail] | None = None
    field: str | None = None
    fields: dict[str, list[str]] | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: ErrorBody


ERROR_RESPONSES: dict = {
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired session"},
    403: {"model": ErrorResponse, "description": "Not an admin, or account inactive"},
    404: {"model": ErrorResponse, "description": "Entity not found"},
    422: {"model": ErrorResponse, "description": "Field-level validation errors"},
    503: {"model": ErrorResponse, "description": "Storage failure, safe to retry"},
}


# ─── Helper Functions ─────────────────────────────────────────────────────────
def success_response(message: str, data: Any = None) -> dict:
    """Return a standardized success dict (used in route handlers)."""
    return {"success": True, "message": message, "data": data}


def paginated_response(message: str, data: list, total: int, page: int, limit: int, **extra: Any) -> dict:
    """Return a standardized paginated dict. `extra` keys sit next to `data`."""
    return {
        "success": True,
        "message": message,
        "data": data,
        **extra,
        "meta": PaginationMeta.build(total, page, limit).model_dump(),
    }
