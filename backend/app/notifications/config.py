# backend/app/notifications/config.py

"""
Mail transport settings.
"""

from dataclasses import dataclass

from app.utils.config import get_env, get_env_int

MAIL_BACKEND_SMTP = "smtp"
MAIL_BACKEND_LOG = "log"


@dataclass(frozen=True)
class MailConfig:
    """SMTP settings container."""

    user: str
    password: str
    sender: str
    host: str = "smtp.gmail.com"
    port: int = 465
    backend: str = MAIL_BACKEND_SMTP


def get_mail_config() -> MailConfig:
    """
    Load the mail settings from the environment.

    Secrets (not validated here, SMTP login fails instead):
      - EMAIL_USER
      - EMAIL_PASS

    Optional:
      - EMAIL_FROM    (default: EMAIL_USER)
      - SMTP_HOST     (default: smtp.gmail.com)
      - SMTP_PORT     (default: 465, implicit TLS)
      - MAIL_BACKEND  (smtp | log, default: smtp)
    """
    user = get_env("EMAIL_USER", default="", required=False)
    backend = get_env("MAIL_BACKEND", default=MAIL_BACKEND_SMTP, required=False).lower()

    return MailConfig(
        user=user,
        password=get_env("EMAIL_PASS", default="", required=False),
        sender=get_env("EMAIL_FROM", default=user, required=False),
        host=get_env("SMTP_HOST", default="smtp.gmail.com", required=False),
        port=get_env_int("SMTP_PORT", default=465),
        backend=backend,
    )
