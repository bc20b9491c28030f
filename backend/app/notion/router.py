# backend/app/notion/router.py

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies import AppServices, get_services
from app.utils.responses import error_response

from .schemas import DatabaseListResponse, ItemListingResponse, RawQueryResponse
from .variants import VARIANTS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["notion"])


@router.get(
    "/databases",
    response_model=DatabaseListResponse,
    summary="List Notion databases",
    description="Every database the integration can access, as name/id pairs.",
)
def list_databases(services: AppServices = Depends(get_services)):
    try:
        databases = services.notion.list_databases()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to list Notion databases")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Erreur lors de la récupération des bases de données",
            exc,
        )

    return DatabaseListResponse(databases=databases)


@router.get(
    "/databases/{database_id}",
    response_model=RawQueryResponse,
    summary="Raw database query",
    description="Query results exactly as returned by Notion.",
)
def query_database(database_id: str, services: AppServices = Depends(get_services)):
    try:
        results = services.notion.query_raw(database_id)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to query Notion database %s", database_id)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Erreur lors de la récupération des données",
            exc,
        )

    return RawQueryResponse(results=results)


@router.get(
    "/databases-{variant_name}/{database_id}",
    response_model=ItemListingResponse,
    response_model_exclude_none=True,
    summary="Projected database items",
    description="Pages of a techno / tech / radar database projected into flat items.",
)
def list_variant_items(
    variant_name: str,
    database_id: str,
    services: AppServices = Depends(get_services),
):
    variant = VARIANTS.get(variant_name)
    if variant is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "error": f"Unknown route family '{variant_name}'."},
        )

    try:
        items = services.notion.fetch_items(database_id, variant)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to fetch %s items from %s", variant.name, database_id)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Erreur lors de la récupération des données",
            exc,
        )

    return ItemListingResponse(**{variant.listing_key: items})
