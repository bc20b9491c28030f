# backend/app/pipeline/router.py
"""
Report routes.

- POST /api/gemini-techno/{database_id}
- POST /api/gemini-tech/{database_id}
- POST /api/gemini-radar/{database_id}
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies import AppServices, get_services
from app.notifications.service import MailDeliveryError
from app.notion.variants import VARIANTS
from app.utils.responses import error_response

from .schemas import ReportRequest, ReportResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["report"])


@router.post(
    "/gemini-{variant_name}/{database_id}",
    response_model=ReportResponse,
    response_model_exclude_none=True,
    summary="Build and email a report",
    description=(
        "Reads the database, keeps the records in the family's trigger status, "
        "runs the AI steps, emails the report to recipientEmail and writes "
        "the results back to Notion."
    ),
)
def send_report(
    variant_name: str,
    database_id: str,
    body: Optional[ReportRequest] = None,
    services: AppServices = Depends(get_services),
):
    variant = VARIANTS.get(variant_name)
    if variant is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "error": f"Unknown route family '{variant_name}'."},
        )

    recipient = body.recipient_email if body is not None else None
    if not recipient:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "error": "L'email du destinataire est requis."},
        )

    try:
        response = services.pipeline.run(variant, database_id, recipient)
    except MailDeliveryError as exc:
        logger.error("Erreur lors de l'envoi de l'email : %s", exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Erreur lors de l'envoi de l'email.",
            exc,
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s report failed for database %s", variant.name, database_id)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Erreur lors de la récupération des données ou du traitement",
            exc,
        )

    return response
