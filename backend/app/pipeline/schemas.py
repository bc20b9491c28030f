# backend/app/pipeline/schemas.py

"""
Request and response bodies of the report routes.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.notion.schemas import VeilleItem


class ReportRequest(BaseModel):
    """
    Body of POST /api/gemini-*/{id}.

    ``recipientEmail`` is optional at the schema level so that a missing
    value is answered with 400 by the router rather than 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    recipient_email: Optional[str] = Field(None, alias="recipientEmail")


class WriteFailure(BaseModel):
    """A record whose Notion update failed."""

    id: str
    title: Optional[str] = None
    error: str


class ReportResponse(BaseModel):
    """
    Success envelope of the report routes.

    - suggestions: generated narrative (families that synthesize)
    - results: items sent in the email
    - failures: records whose write-back failed (tolerant policy)
    """

    success: bool = True
    message: str
    suggestions: Optional[str] = None
    results: Optional[List[VeilleItem]] = None
    failures: Optional[List[WriteFailure]] = None
