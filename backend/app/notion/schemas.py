# backend/app/notion/schemas.py

"""
Schemas for data read from Notion.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class VeilleItem(BaseModel):
    """
    Flat projection of one Notion page.

    Which fields are filled depends on the route family; fields a family
    does not read stay None and are left out of JSON responses.
    """

    id: str = Field(..., description="Notion page ID")
    title: str = Field(..., description="Article title")
    url: str = Field(..., description="Source URL of the article")
    publication_date: str = Field(..., description="Publication date (raw or formatted)")
    description: str = Field(..., description="Description or summary stored in Notion")
    status: str = Field(..., description="Workflow status (status or select value)")
    category: Optional[str] = Field(None, description="Catégorie (select)")
    created_by: Optional[str] = Field(None, description="Page author")
    comments: Optional[str] = Field(None, description="Commentaires (rich text)")
    priority: Optional[str] = Field(None, description="Priorité (formula string)")
    assignee: Optional[str] = Field(None, description="First assigned person")
    identifier: Optional[int] = Field(None, description="Unique ID number")
    notion_url: Optional[str] = Field(None, description="URL of the Notion page itself")


class DatabaseSummary(BaseModel):
    """One entry of GET /api/databases."""

    name: str
    id: str


class DatabaseListResponse(BaseModel):
    success: bool = True
    databases: List[DatabaseSummary]


class RawQueryResponse(BaseModel):
    success: bool = True
    results: List[Dict[str, Any]]


class ItemListingResponse(BaseModel):
    """
    Body of GET /api/databases-{family}/{id}.

    The techno family lists its items under ``veilleData``, the others
    under ``results``; the unused key is None and left out.
    """

    success: bool = True
    results: Optional[List[VeilleItem]] = None
    veille_data: Optional[List[VeilleItem]] = Field(None, alias="veilleData")


class ErrorResponse(BaseModel):
    """
    Error envelope shared by every route.

    ``error`` carries the raw exception text.
    """

    success: bool = False
    message: Optional[str] = None
    error: Optional[str] = None
