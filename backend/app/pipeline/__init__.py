# backend/app/pipeline/__init__.py
"""
Report pipeline: status filter, AI enrichment or synthesis, email,
Notion write-back.
"""
