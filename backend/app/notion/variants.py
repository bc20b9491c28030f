# backend/app/notion/variants.py

"""
Route family definitions (techno / tech / radar).

Each family reads a differently shaped Notion database. A VariantSchema
bundles what differs between them: the page -> VeilleItem projection,
the trigger status, the status property to write back and which
processing steps the report pipeline runs.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from app.ai.prompts import TECH_SYNTHESIS_PROMPT, TECHNO_SYNTHESIS_PROMPT

from . import properties as props
from .schemas import VeilleItem

DONE_STATUS = "Terminé"

STATUS_KIND_STATUS = "status"
STATUS_KIND_SELECT = "select"

CATEGORY_PROPERTY = "Catégorie"
COMMENTS_PROPERTY = "Commentaires"

Projection = Callable[[Dict[str, Any]], VeilleItem]


@dataclass(frozen=True)
class VariantSchema:
    """Everything that differs between two route families."""

    name: str
    trigger_status: str
    status_property: str
    status_kind: str
    project: Projection
    listing_key: str = "results"
    enrich_items: bool = False
    synthesize_report: bool = False
    write_status_after_send: bool = False
    synthesis_prompt: Optional[str] = None
    success_message: str = "Rapport envoyé par email avec succès."

    def status_patch(self, value: str = DONE_STATUS) -> Dict[str, Any]:
        """Property payload setting this family's status column to ``value``."""
        if self.status_kind == STATUS_KIND_SELECT:
            return {self.status_property: props.select_value(value)}
        return {self.status_property: props.status_value(value)}

    def enrichment_patch(self, category: str, comment: str) -> Dict[str, Any]:
        """Property payload written back after per-item enrichment."""
        payload = {
            CATEGORY_PROPERTY: props.select_value(category),
            COMMENTS_PROPERTY: props.rich_text_value(comment),
        }
        payload.update(self.status_patch())
        return payload


def _page_properties(page: Dict[str, Any]) -> Dict[str, Any]:
    value = page.get("properties") if isinstance(page, dict) else None
    return value if isinstance(value, dict) else {}


def _page_id(page: Dict[str, Any]) -> str:
    value = page.get("id") if isinstance(page, dict) else None
    return value if isinstance(value, str) else ""


def project_techno(page: Dict[str, Any]) -> VeilleItem:
    properties = _page_properties(page)
    return VeilleItem(
        id=_page_id(page),
        title=props.extract_title(props.get_property(properties, "Nom_Veille")) or "Sans titre",
        url=props.extract_url(props.get_property(properties, "Source URL")) or "Pas d'URL",
        publication_date=(
            props.extract_date_start(props.get_property(properties, "Publication Date"))
            or "Pas de date"
        ),
        description=(
            props.extract_rich_text(props.get_property(properties, "Description"))
            or "Pas de description"
        ),
        status=props.extract_status_name(props.get_property(properties, "Status")) or "Non défini",
    )


def project_tech(page: Dict[str, Any]) -> VeilleItem:
    properties = _page_properties(page)
    raw_date = props.extract_date_start(props.get_property(properties, "Publication Date"))
    notion_url = page.get("url") if isinstance(page, dict) else None
    return VeilleItem(
        id=_page_id(page),
        title=props.extract_rich_text(props.get_property(properties, "titre")) or "Titre non défini",
        url=props.extract_url(props.get_property(properties, "Website")) or "Non défini",
        publication_date=props.format_publication_date(raw_date) or "Non défini",
        description=(
            props.extract_rich_text_joined(props.get_property(properties, "Description"))
            or "Non défini"
        ),
        status=props.extract_status_name(props.get_property(properties, "Status")) or "Non défini",
        created_by=(
            props.extract_created_by_name(props.get_property(properties, "Créée par"))
            or "Non défini"
        ),
        notion_url=notion_url if isinstance(notion_url, str) and notion_url else "Non défini",
    )


def project_radar(page: Dict[str, Any]) -> VeilleItem:
    properties = _page_properties(page)
    return VeilleItem(
        id=_page_id(page),
        identifier=props.extract_unique_id_number(props.get_property(properties, "Identifiant")),
        title=props.extract_title(props.get_property(properties, "Titre")) or "Sans titre",
        url=props.extract_url(props.get_property(properties, "Lien_Url")) or "Pas d'URL",
        description=(
            props.extract_rich_text(props.get_property(properties, "Résumé"))
            or "Aucun résumé disponible"
        ),
        status=props.extract_select_name(props.get_property(properties, "Statut")) or "Non défini",
        category=(
            props.extract_select_name(props.get_property(properties, CATEGORY_PROPERTY))
            or "Non définie"
        ),
        priority=(
            props.extract_formula_string(props.get_property(properties, "Priorité"))
            or "Non définie"
        ),
        publication_date=(
            props.extract_date_start(props.get_property(properties, "Date de publication"))
            or "Non définie"
        ),
        comments=(
            props.extract_rich_text(props.get_property(properties, COMMENTS_PROPERTY))
            or "Aucun commentaire"
        ),
        assignee=(
            props.extract_first_person_name(props.get_property(properties, "Assigné à"))
            or "Non assigné"
        ),
    )


TECHNO = VariantSchema(
    name="techno",
    trigger_status="Pas commencé",
    status_property="Status",
    status_kind=STATUS_KIND_STATUS,
    project=project_techno,
    listing_key="veilleData",
    enrich_items=True,
    synthesize_report=True,
    synthesis_prompt=TECHNO_SYNTHESIS_PROMPT,
)

TECH = VariantSchema(
    name="tech",
    trigger_status="Pas commencé",
    status_property="Status",
    status_kind=STATUS_KIND_STATUS,
    project=project_tech,
    synthesize_report=True,
    write_status_after_send=True,
    synthesis_prompt=TECH_SYNTHESIS_PROMPT,
    success_message="Rapport envoyé par email et statut mis à jour avec succès.",
)

RADAR = VariantSchema(
    name="radar",
    trigger_status="Début",
    status_property="Statut",
    status_kind=STATUS_KIND_SELECT,
    project=project_radar,
    enrich_items=True,
    success_message="Rapport envoyé et Notion mis à jour avec succès.",
)

VARIANTS: Dict[str, VariantSchema] = {
    variant.name: variant for variant in (TECHNO, TECH, RADAR)
}


def filter_by_status(items: Sequence[VeilleItem], trigger_status: str) -> List[VeilleItem]:
    """
    Keep items whose status is exactly ``trigger_status``.

    No case folding or whitespace trimming.
    """
    return [item for item in items if item.status == trigger_status]
