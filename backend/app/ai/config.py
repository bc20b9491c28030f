# backend/app/ai/config.py

"""
Gemini settings.
"""

from dataclasses import dataclass

from app.utils.config import get_env


@dataclass(frozen=True)
class GeminiConfig:
    """Generative AI settings container."""

    api_key: str
    model_name: str = "gemini-1.5-flash"


def get_gemini_config() -> GeminiConfig:
    """
    Load the Gemini settings from the environment.

      - GEMINI_API_KEY (not validated here)
      - GEMINI_MODEL   (default: gemini-1.5-flash)
    """
    return GeminiConfig(
        api_key=get_env("GEMINI_API_KEY", default="", required=False),
        model_name=get_env("GEMINI_MODEL", default="gemini-1.5-flash", required=False),
    )
