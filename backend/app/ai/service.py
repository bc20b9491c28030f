# backend/app/ai/service.py
"""
AI service layer.

Responsibilities:
- per-article summary and category (failures fall back to fixed values)
- one holistic report for a whole list of articles (failures propagate)
- keep the text generator injectable so tests can pass a fake
"""

import json
import logging
from typing import Iterable, Optional

from app.notion.schemas import VeilleItem

from .client import GeminiClient, TextGenerator
from .prompts import (
    CLASSIFICATION_PROMPT,
    SUMMARY_FALLBACK_CONTENT,
    SUMMARY_LINK_SUFFIX,
    SUMMARY_PROMPT,
)
from .schemas import SUMMARY_UNAVAILABLE, ArticleCategory

logger = logging.getLogger(__name__)

# Projection defaults meaning "this page has no description".
MISSING_DESCRIPTIONS = frozenset(
    {
        "Aucun résumé disponible",
        "Pas de description",
        "Non défini",
    }
)


class AIService:
    """
    Summarize, classify and synthesize articles with a TextGenerator.
    """

    def __init__(self, *, generator: Optional[TextGenerator] = None) -> None:
        self._generator = generator or GeminiClient()

    def generate_summary(self, title: str, description: str, url: str) -> str:
        """
        Summary of one article followed by a link to the full article.

        Never raises: any generation failure returns SUMMARY_UNAVAILABLE.
        """
        content = description
        if not content or content in MISSING_DESCRIPTIONS:
            content = SUMMARY_FALLBACK_CONTENT.format(title=title, url=url)

        prompt = SUMMARY_PROMPT.format(title=title, url=url, content=content)
        try:
            text = self._generator.generate(prompt)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Summary generation failed. title=%s error=%s", title, exc)
            return SUMMARY_UNAVAILABLE

        return text + SUMMARY_LINK_SUFFIX.format(url=url)

    def classify_category(self, title: str, description: str, url: str) -> str:
        """
        Category label chosen by the model, trimmed.

        Never raises: failures and empty answers return "Autre".
        """
        categories = "\n".join(f"- {category.value}" for category in ArticleCategory)
        prompt = CLASSIFICATION_PROMPT.format(
            title=title,
            content=description,
            categories=categories,
        )
        try:
            text = self._generator.generate(prompt)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Classification failed. title=%s url=%s error=%s", title, url, exc)
            return ArticleCategory.OTHER.value

        return text.strip() or ArticleCategory.OTHER.value

    def synthesize_report(self, items: Iterable[VeilleItem], prompt_template: str) -> str:
        """
        One narrative for the whole item list.

        Generation errors propagate to the caller.
        """
        payload = [item.model_dump(exclude_none=True) for item in items]
        data = json.dumps(payload, ensure_ascii=False)
        return self._generator.generate(prompt_template.format(data=data))
