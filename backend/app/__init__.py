# backend/app/__init__.py
"""
Veille report backend application package.

This package contains:
- main: FastAPI application entrypoint
- notion: Notion integration modules
- ai: Gemini summary / classification / synthesis
- notifications: email rendering and transports
- pipeline: report routes and orchestration
"""
