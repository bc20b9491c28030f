# backend/app/main.py

"""
Backend entry point.

Exposes:
- /api/databases*        Notion database listing and projections
- /api/gemini-*/{id}     AI report routes (techno / tech / radar)
- /health
"""

import logging
from typing import Optional

from fastapi import FastAPI

from app.dependencies import AppServices, build_services
from app.notion.router import router as notion_router
from app.pipeline.router import router as report_router
from app.settings import Settings, load_settings


def create_app(
    services: Optional[AppServices] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    FastAPI application factory.

    Tests pass an AppServices built from fakes; otherwise the real clients
    are wired from the environment.
    """
    settings = settings or load_settings()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("app").setLevel(settings.log_level)

    app = FastAPI(title="Veille Report Backend")
    app.state.services = services or build_services(settings)

    # Router registration
    app.include_router(notion_router)
    app.include_router(report_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        Lightweight health check for monitoring.
        """
        return {"status": "ok"}

    return app


# uvicorn entry point
app = create_app()
