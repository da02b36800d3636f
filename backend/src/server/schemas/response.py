"""Success envelope, the counterpart of ApiErrorResponse.

Every successful endpoint returns ``{"success": true, "data": ...}``, so
clients branch on ``success`` the same way for both outcomes. ``[T]`` is a
Python 3.12 type parameter, so one class serves every payload::

    @router.get("/{template_id}", response_model=SuccessResponse[TemplateResponse])
"""

from typing import Literal

from pydantic import BaseModel


class SuccessResponse[T](BaseModel):
    success: Literal[True] = True
    data: T
