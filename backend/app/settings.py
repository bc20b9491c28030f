# backend/app/settings.py

"""
Process configuration, loaded once at startup.

Values come from the environment, optionally seeded from a .env file.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from app.ai.config import GeminiConfig, get_gemini_config
from app.notifications.config import MailConfig, get_mail_config
from app.notion.config import NotionConfig, get_notion_config
from app.pipeline.config import PipelineConfig, get_pipeline_config
from app.utils.config import get_env

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """All configuration the application needs."""

    notion: NotionConfig
    gemini: GeminiConfig
    mail: MailConfig
    pipeline: PipelineConfig
    log_level: str = "INFO"


def _get_log_level() -> str:
    raw = get_env("LOG_LEVEL", default="INFO", required=False)
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning("Unknown LOG_LEVEL=%r; using INFO", raw)
        return "INFO"
    return level


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Variables already set in the environment win over the .env file.
    Secrets are not validated here.
    """
    load_dotenv(env_file, override=False)

    return Settings(
        notion=get_notion_config(),
        gemini=get_gemini_config(),
        mail=get_mail_config(),
        pipeline=get_pipeline_config(),
        log_level=_get_log_level(),
    )
