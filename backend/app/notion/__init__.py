# backend/app/notion/__init__.py

"""
Notion integration modules.

Responsibilities:
- read databases through the Notion API
- project pages into flat items, one projection per route family
- write categories, comments and statuses back to pages
"""
