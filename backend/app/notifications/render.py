# backend/app/notifications/render.py

"""
HTML bodies of the report emails, one layout per route family.

Every interpolated value is HTML-escaped.
"""

from __future__ import annotations

from html import escape
from typing import Callable, Dict, Optional, Sequence, Tuple

from app.notion.schemas import VeilleItem

_GREETING = (
    "<p><strong>Bonjour,</strong></p>"
    "<p>Voici le rapport de veille technologique généré pour vous :</p>"
)
_CLOSING = "<p><strong>Bonne lecture et à bientôt !</strong></p>"


def _e(value: Optional[str]) -> str:
    return escape(value or "")


def _link(url: str) -> str:
    return f'<a href="{_e(url)}" target="_blank">{_e(url)}</a>'


def _narrative(text: Optional[str]) -> str:
    return _e(text).replace("\n", "<br>")


def _techno_item(item: VeilleItem) -> str:
    return (
        "<li>"
        f'<h3 style="color:#2980B9;"><strong>{_e(item.title)}</strong></h3>'
        f"<p><strong>Catégorie :</strong> {_e(item.category)}</p>"
        f"<p><strong>Publication Date :</strong> {_e(item.publication_date)}</p>"
        f"<p><strong>Description :</strong> {_e(item.description)}</p>"
        f"<p><strong>Source :</strong> {_link(item.url)}</p>"
        f"<p><strong>Résumé :</strong> {_narrative(item.comments)}</p>"
        "</li>"
    )


def _tech_item(item: VeilleItem) -> str:
    return (
        "<li>"
        f'<h3 style="color:#2980B9;"><strong>{_e(item.title)}</strong></h3>'
        f"<p><strong>Statut :</strong> {_e(item.status)}</p>"
        f"<p><strong>Date de publication :</strong> {_e(item.publication_date)}</p>"
        f"<p><strong>Description :</strong> {_e(item.description)}</p>"
        f"<p><strong>Source :</strong> {_link(item.url)}</p>"
        f"<p><strong>Créé par :</strong> {_e(item.created_by)}</p>"
        f"<p><strong>URL Notion :</strong> {_link(item.notion_url or '')}</p>"
        "</li>"
    )


def _radar_item(item: VeilleItem) -> str:
    return (
        "<li>"
        f"<h3>{_e(item.title)}</h3>"
        f"<p><strong>Catégorie :</strong> {_e(item.category)}</p>"
        f"<p><strong>Résumé :</strong> {_e(item.description)}</p>"
        f"<p><strong>Source :</strong> {_link(item.url)}</p>"
        "</li>"
    )


ItemRenderer = Callable[[VeilleItem], str]

# variant name -> (item renderer, narrative heading, styled greeting)
_LAYOUTS: Dict[str, Tuple[ItemRenderer, Optional[str], bool]] = {
    "techno": (_techno_item, "Résumé global :", True),
    "tech": (_tech_item, "Résumé et analyse de Gemini :", True),
    "radar": (_radar_item, None, False),
}


def render_report_html(
    variant_name: str,
    items: Sequence[VeilleItem],
    narrative: Optional[str] = None,
) -> str:
    """
    Build the email body for ``items``: one ``<li>`` per item, followed by
    the narrative block when the family produces one.
    """
    render_item, heading, styled = _LAYOUTS.get(variant_name, _LAYOUTS["radar"])

    parts = ["<html><body>"]
    if styled:
        parts.append('<h2 style="color:#2C3E50;">Rapport de Veille Technologique</h2>')
        parts.append(_GREETING)
    else:
        parts.append("<h2>Rapport de Veille Technologique</h2>")

    parts.append("<ul>")
    parts.extend(render_item(item) for item in items)
    parts.append("</ul>")

    if heading and narrative is not None:
        parts.append(f"<h3>{heading}</h3>")
        parts.append(f"<p>{_narrative(narrative)}</p>")

    if styled:
        parts.append(_CLOSING)
    parts.append("</body></html>")
    return "".join(parts)
