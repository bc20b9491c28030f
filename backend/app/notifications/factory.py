# backend/app/notifications/factory.py

"""
Builds the mail transport selected by MAIL_BACKEND.
"""

from __future__ import annotations

from typing import Optional

from .config import MAIL_BACKEND_LOG, MailConfig, get_mail_config
from .service import LoggingMailTransport, MailTransport, SmtpMailTransport


def build_mail_transport(config: Optional[MailConfig] = None) -> MailTransport:
    """
    Return the transport for ``config`` (read from the environment when None).

    Unknown backends fall back to SMTP.
    """
    config = config or get_mail_config()
    if config.backend == MAIL_BACKEND_LOG:
        return LoggingMailTransport()
    return SmtpMailTransport(config)


__all__ = [
    "MailConfig",
    "MailTransport",
    "SmtpMailTransport",
    "LoggingMailTransport",
    "build_mail_transport",
]
