# backend/app/notion/service.py

"""
Service layer between NotionClient and the rest of the application.

- database listing
- raw database queries
- projection of pages into VeilleItem for a route family
"""

from typing import Any, Dict, List, Optional

from . import properties as props
from .client import NotionClient
from .schemas import DatabaseSummary, VeilleItem
from .variants import VariantSchema


class NotionService:
    """
    Uses NotionClient and returns models the routers and the report
    pipeline can work with.
    """

    def __init__(self, client: Optional[NotionClient] = None) -> None:
        self.client = client or NotionClient()

    def list_databases(self) -> List[DatabaseSummary]:
        """
        Every database visible to the integration, as name/id pairs.
        """
        databases: List[DatabaseSummary] = []
        for raw in self.client.search_databases():
            name = props.extract_title(raw) if isinstance(raw, dict) else None
            db_id = raw.get("id", "") if isinstance(raw, dict) else ""
            databases.append(DatabaseSummary(name=name or "Sans titre", id=db_id))
        return databases

    def query_raw(self, database_id: str) -> List[Dict[str, Any]]:
        """
        Unprojected page objects of a database.
        """
        return self.client.query_database(database_id)

    def fetch_items(self, database_id: str, variant: VariantSchema) -> List[VeilleItem]:
        """
        Query ``database_id`` without a filter and project every page with
        the family's projection. Page order is preserved.
        """
        return [variant.project(page) for page in self.client.query_database(database_id)]

    def update_page(self, page_id: str, properties: Dict[str, Any]) -> None:
        self.client.update_page_properties(page_id, properties)
