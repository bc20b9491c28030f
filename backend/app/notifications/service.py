# backend/app/notifications/service.py

"""
Mail transports.

- MailTransport: send() interface used by the report pipeline
- SmtpMailTransport: real delivery over SMTP with implicit TLS
- LoggingMailTransport: writes the message to the logger, for local runs
"""

from __future__ import annotations

import logging
import smtplib
import ssl
from email.mime.text import MIMEText
from typing import Protocol

from .config import MailConfig
from .schemas import DeliveryReceipt, MailMessage

logger = logging.getLogger(__name__)


class MailDeliveryError(RuntimeError):
    """The transport could not deliver the message."""


class MailTransport(Protocol):
    """
    Minimal mail interface.

    send() returns a receipt on success and raises MailDeliveryError on
    failure.
    """

    def send(self, message: MailMessage) -> DeliveryReceipt:  # pragma: no cover - Protocol
        ...


class SmtpMailTransport:
    """
    Sends HTML messages through an SMTP_SSL server (Gmail by default).
    """

    def __init__(self, config: MailConfig) -> None:
        self._config = config

    def _build_mime(self, message: MailMessage) -> MIMEText:
        mime = MIMEText(message.html, "html", "utf-8")
        mime["Subject"] = message.subject
        mime["From"] = message.sender
        mime["To"] = message.recipient
        return mime

    def send(self, message: MailMessage) -> DeliveryReceipt:
        mime = self._build_mime(message)
        context = ssl.create_default_context()
        try:
            with smtplib.SMTP_SSL(self._config.host, self._config.port, context=context) as server:
                server.login(self._config.user, self._config.password)
                refused = server.send_message(mime)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(str(exc)) from exc

        if refused:
            raise MailDeliveryError(f"Recipients refused: {', '.join(refused)}")

        return DeliveryReceipt(response=f"250 accepted for {message.recipient}")


class LoggingMailTransport:
    """
    Records the message with the logger instead of sending it.
    """

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self._logger = logger_ or logger

    def send(self, message: MailMessage) -> DeliveryReceipt:
        self._logger.info(
            "[mail][log] to=%s subject=%s size=%d",
            message.recipient,
            message.subject,
            len(message.html),
        )
        self._logger.debug("[mail][log] body=%s", message.html)
        return DeliveryReceipt(response="logged")
