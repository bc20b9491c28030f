# backend/app/notion/config.py

"""
Settings required to talk to the Notion API.
"""

from dataclasses import dataclass

from app.utils.config import get_env, get_env_int


@dataclass(frozen=True)
class NotionConfig:
    """Notion API settings container."""

    api_key: str
    api_base_url: str
    api_version: str
    timeout_seconds: int = 10


def get_notion_config() -> NotionConfig:
    """
    Load the Notion settings from the environment.

    Secrets (not validated here, a missing token surfaces as a 401):
      - NOTION_TOKEN
      - NOTION_VERSION       (default: 2022-06-28)

    Optional:
      - NOTION_API_BASE_URL  (default: https://api.notion.com/v1)
      - NOTION_TIMEOUT_SECONDS (default: 10)
    """
    api_key = get_env("NOTION_TOKEN", default="", required=False)
    api_version = get_env(
        "NOTION_VERSION",
        default="2022-06-28",
        required=False,
    )
    api_base_url = get_env(
        "NOTION_API_BASE_URL",
        default="https://api.notion.com/v1",
        required=False,
    )

    return NotionConfig(
        api_key=api_key,
        api_base_url=api_base_url.rstrip("/"),
        api_version=api_version,
        timeout_seconds=get_env_int("NOTION_TIMEOUT_SECONDS", default=10),
    )
