# backend/app/dependencies.py

"""
Application-wide service container.

Built once by create_app() and stored on ``app.state``; routers receive
it through ``Depends(get_services)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from app.ai.client import GeminiClient
from app.ai.service import AIService
from app.notifications.factory import build_mail_transport
from app.notifications.service import MailTransport
from app.notion.client import NotionClient
from app.notion.service import NotionService
from app.pipeline.service import ReportPipeline
from app.settings import Settings


@dataclass
class AppServices:
    notion: NotionService
    ai: AIService
    mailer: MailTransport
    pipeline: ReportPipeline


def build_services(settings: Settings) -> AppServices:
    """
    Wire the real clients from ``settings``.
    """
    notion = NotionService(NotionClient(settings.notion))
    ai = AIService(generator=GeminiClient(settings.gemini))
    mailer = build_mail_transport(settings.mail)
    pipeline = ReportPipeline(
        notion,
        ai,
        mailer,
        sender=settings.mail.sender,
        config=settings.pipeline,
    )
    return AppServices(notion=notion, ai=ai, mailer=mailer, pipeline=pipeline)


def get_services(request: Request) -> AppServices:
    return request.app.state.services
