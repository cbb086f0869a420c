from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ApiError(BaseModel):
    code: str
    message: str
    request_id: str


def fail(*, code: str, message: str, request_id: str) -> dict[str, Any]:
    return {
        "ok": False,
        "data": None,
        "error": ApiError(code=code, message=message, request_id=request_id).model_dump(),
    }
