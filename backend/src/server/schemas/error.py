"""Error response schemas.

All error responses use the same envelope:

    {"success": false, "error": {"trace_id": "...", "timestamp": "...",
     "code": "NotFound", "status": 404, "message": "...",
     "description": "...", "details": "..."}}

``description`` and ``details`` are omitted when the error provides none.
The response builder in errors/builder.py constructs these from errors
implementing ResponseError.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from server.errors.codes import ErrorCode


class ApiError(BaseModel):
    """One failed operation, as reported to the client."""

    model_config = ConfigDict(frozen=True)

    trace_id: str
    timestamp: datetime
    code: ErrorCode
    status: int
    # Shown to end users
    message: str
    # Technical context for developers and operators
    description: str | None = None
    # Full diagnostic content for debugging tooling
    details: str | None = None


class ApiErrorResponse(BaseModel):
    """Top-level error envelope returned by all error responses."""

    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    error: ApiError

    def to_body(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, dropping absent fields."""
        return self.model_dump(mode="json", exclude_none=True)
