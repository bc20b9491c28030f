# backend/app/ai/client.py

"""
Single-shot text generation with Google Gemini.
"""

from typing import Any, Optional, Protocol

import google.generativeai as genai

from .config import GeminiConfig, get_gemini_config


class AIClientError(RuntimeError):
    """Any failure of the generative text API."""


class TextGenerator(Protocol):
    """
    Minimal interface used by AIService: prompt in, text out.
    """

    def generate(self, prompt: str) -> str:  # pragma: no cover - Protocol
        ...


class GeminiClient:
    """
    Wrapper around ``genai.GenerativeModel``.

    The model handle is created on first use so the application can start
    without a key; a missing key fails on the first call instead.
    """

    def __init__(self, config: Optional[GeminiConfig] = None) -> None:
        self.config = config or get_gemini_config()
        self._model: Any = None

    def _get_model(self) -> Any:
        if self._model is None:
            genai.configure(api_key=self.config.api_key)
            self._model = genai.GenerativeModel(self.config.model_name)
        return self._model

    def generate(self, prompt: str) -> str:
        """
        Request one completion for ``prompt`` and return its text.
        """
        try:
            response = self._get_model().generate_content(prompt)
            text = response.text
        except Exception as exc:  # noqa: BLE001 - SDK raises many unrelated types
            raise AIClientError(f"Gemini generation failed: {exc}") from exc

        if not isinstance(text, str):
            raise AIClientError("Gemini returned a non-text response.")
        return text
