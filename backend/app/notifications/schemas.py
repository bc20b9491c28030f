# backend/app/notifications/schemas.py

"""
Mail message schemas.

Credentials never travel inside a MailMessage; transports hold them.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

REPORT_SUBJECT = "Rapport de Veille Technologique"


class MailMessage(BaseModel):
    """
    One outgoing email with an HTML body.
    """

    sender: str = Field(..., description="From address.")
    recipient: str = Field(..., description="To address.")
    subject: str = Field(REPORT_SUBJECT, description="Subject line.")
    html: str = Field(..., description="HTML body.")


class DeliveryReceipt(BaseModel):
    """
    What a transport reports back after a successful send.
    """

    response: str = Field(..., description="Transport response, for logging.")
    sent_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Send time (UTC).",
    )
