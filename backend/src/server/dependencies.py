"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from server.db.session import get_db
from server.middleware import get_trace_id

DB = Annotated[AsyncSession, Depends(get_db)]


def trace_id(request: Request) -> str:
    """Trace ID assigned to the current request by TraceIDMiddleware."""
    return get_trace_id(request)


TraceID = Annotated[str, Depends(trace_id)]
