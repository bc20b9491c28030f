# backend/app/notion/client.py

"""
HTTP client for the Notion API.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import NotionConfig, get_notion_config

logger = logging.getLogger(__name__)


class NotionClientError(RuntimeError):
    """Base exception for the Notion client."""


class NotionAuthError(NotionClientError):
    """Authentication or permission error."""


class NotionAPIError(NotionClientError):
    """Any other error returned by the Notion API."""


class NotionEmptyResponseError(NotionAPIError):
    """The response does not carry a 'results' list."""


class NotionClient:
    """
    Thin wrapper around the Notion REST API.

    - search for databases
    - query a database
    - patch page properties
    """

    def __init__(self, config: Optional[NotionConfig] = None) -> None:
        self.config = config or get_notion_config()
        self._timeout = self.config.timeout_seconds

    def _build_headers(self) -> Dict[str, str]:
        """
        Headers required by every Notion API call.
        """
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Notion-Version": self.config.api_version,
            "Content-Type": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        Map HTTP error codes to client exceptions.
        """
        if response.status_code == 401:
            raise NotionAuthError("Unauthorized. Check NOTION_TOKEN.")
        if response.status_code == 403:
            raise NotionAuthError("Forbidden. Check Notion integration permissions.")
        if response.status_code >= 400:
            raise NotionAPIError(
                f"Notion API error: {response.status_code} {response.text}"
            )

    def _post_for_results(self, url: str, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            response = httpx.post(
                url,
                headers=self._build_headers(),
                json=payload,
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

        self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise NotionEmptyResponseError("Réponse de Notion vide ou mal formée.") from exc

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise NotionEmptyResponseError("Réponse de Notion vide ou mal formée.")

        return results

    def search_databases(self) -> List[Dict[str, Any]]:
        """
        Return every database object the integration can access.
        """
        url = f"{self.config.api_base_url}/search"
        payload: Dict[str, Any] = {
            "filter": {
                "property": "object",
                "value": "database",
            }
        }
        return self._post_for_results(url, payload)

    def query_database(
        self,
        database_id: str,
        filter_: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Query a database and return the raw page objects.

        Without ``filter_`` the whole first page of results is returned;
        status filtering happens on our side.
        """
        url = f"{self.config.api_base_url}/databases/{database_id}/query"
        payload: Dict[str, Any] = {}
        if filter_ is not None:
            payload["filter"] = filter_

        logger.info("Querying Notion database %s", database_id)
        return self._post_for_results(url, payload)

    def update_page_properties(self, page_id: str, properties: Dict[str, Any]) -> None:
        """
        Patch the properties of a page.
        """
        url = f"{self.config.api_base_url}/pages/{page_id}"

        body = {"properties": properties}

        try:
            response = httpx.patch(
                url,
                headers=self._build_headers(),
                json=body,
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise NotionClientError(f"Failed to update Notion page: {exc}") from exc

        self._raise_for_status(response)
