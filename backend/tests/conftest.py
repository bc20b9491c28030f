# backend/tests/conftest.py
"""
Pytest configuration for the veille report backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import app.*` works correctly in tests.
- Ensures environment variables read at import time are set
  with safe dummy values.
- Provides in-memory fakes for Notion, Gemini and the mail transport.
"""

import os
import sys
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    These values are only for local testing and do NOT contain real secrets.
    """
    os.environ.setdefault("NOTION_TOKEN", "dummy-notion-token-for-tests")
    os.environ.setdefault("NOTION_VERSION", "2022-06-28")
    os.environ.setdefault("GEMINI_API_KEY", "dummy-gemini-key-for-tests")
    os.environ.setdefault("EMAIL_USER", "veille@example.com")
    os.environ.setdefault("EMAIL_PASS", "dummy-password")
    os.environ.setdefault("MAIL_BACKEND", "log")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


class FakeNotionClient:
    """
    In-memory stand-in for NotionClient.

    ``fail_pages`` lists page ids whose update raises.
    """

    def __init__(
        self,
        pages: Optional[List[Dict[str, Any]]] = None,
        databases: Optional[List[Dict[str, Any]]] = None,
        fail_pages: Optional[set] = None,
    ) -> None:
        self.pages = pages or []
        self.databases = databases or []
        self.fail_pages = fail_pages or set()
        self.queries: List[str] = []
        self.updates: List[tuple] = []
        self._lock = threading.Lock()

    def search_databases(self) -> List[Dict[str, Any]]:
        return self.databases

    def query_database(self, database_id: str, filter_=None) -> List[Dict[str, Any]]:
        self.queries.append(database_id)
        return self.pages

    def update_page_properties(self, page_id: str, properties: Dict[str, Any]) -> None:
        with self._lock:
            self.updates.append((page_id, properties))
        if page_id in self.fail_pages:
            raise RuntimeError(f"patch failed for {page_id}")


class FakeGenerator:
    """
    TextGenerator returning canned answers.

    Prompts containing "catégorie" get ``category``; prompts containing
    "Analyse" get ``report``; anything else gets ``summary``.
    """

    def __init__(
        self,
        *,
        summary: str = "Résumé généré",
        category: str = "Cybersécurité",
        report: str = "Rapport global",
        fail: bool = False,
        fail_report: bool = False,
    ) -> None:
        self.summary = summary
        self.category = category
        self.report = report
        self.fail = fail
        self.fail_report = fail_report
        self.prompts: List[str] = []
        self._lock = threading.Lock()

    def generate(self, prompt: str) -> str:
        with self._lock:
            self.prompts.append(prompt)
        if "Analyse" in prompt:
            if self.fail_report:
                raise RuntimeError("gemini quota exceeded")
            return self.report
        if self.fail:
            raise RuntimeError("gemini unavailable")
        if "catégorie" in prompt:
            return f"  {self.category}\n"
        return self.summary


class FakeMailer:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.messages: List[Any] = []

    def send(self, message):
        from app.notifications.schemas import DeliveryReceipt
        from app.notifications.service import MailDeliveryError

        if self.fail:
            raise MailDeliveryError("SMTP connection refused")
        self.messages.append(message)
        return DeliveryReceipt(response="250 OK")


def make_page(page_id: str, properties: Dict[str, Any], url: Optional[str] = None) -> Dict[str, Any]:
    page: Dict[str, Any] = {"id": page_id, "properties": properties}
    if url is not None:
        page["url"] = url
    return page


def title(text: str) -> Dict[str, Any]:
    return {"title": [{"text": {"content": text}, "plain_text": text}]}


def rich_text(*texts: str) -> Dict[str, Any]:
    return {"rich_text": [{"text": {"content": t}, "plain_text": t} for t in texts]}


def status(name: str) -> Dict[str, Any]:
    return {"status": {"name": name}}


def select(name: str) -> Dict[str, Any]:
    return {"select": {"name": name}}


@pytest.fixture
def make_services():
    """
    Factory building AppServices around the fakes.
    """
    from app.ai.service import AIService
    from app.dependencies import AppServices
    from app.notion.service import NotionService
    from app.pipeline.config import PipelineConfig, WritePolicy
    from app.pipeline.service import ReportPipeline

    def _make(
        notion_client: Optional[FakeNotionClient] = None,
        generator: Optional[FakeGenerator] = None,
        mailer: Optional[FakeMailer] = None,
        policy: WritePolicy = WritePolicy.TOLERANT,
    ):
        notion = NotionService(notion_client or FakeNotionClient())
        ai = AIService(generator=generator or FakeGenerator())
        mailer = mailer or FakeMailer()
        pipeline = ReportPipeline(
            notion,
            ai,
            mailer,
            sender="veille@example.com",
            config=PipelineConfig(write_policy=policy, max_workers=4),
        )
        return AppServices(notion=notion, ai=ai, mailer=mailer, pipeline=pipeline)

    return _make
