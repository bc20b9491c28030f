# backend/app/utils/responses.py

"""
JSON error envelope shared by the routers.
"""

from typing import Optional

from fastapi.responses import JSONResponse

from app.notion.schemas import ErrorResponse


def error_response(
    status_code: int,
    message: Optional[str] = None,
    exc: Optional[BaseException] = None,
) -> JSONResponse:
    """
    ``{success: false, message, error}`` with the raw exception text as ``error``.
    """
    body = ErrorResponse(
        message=message,
        error=str(exc) if exc is not None else None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )
