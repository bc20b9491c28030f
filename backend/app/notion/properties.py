# backend/app/notion/properties.py

"""
Helpers to read and build Notion property values.

Readers never raise: a missing or malformed property yields None and the
caller substitutes its own default string.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

# Notion rejects rich text fragments longer than this, counted in UTF-16
# code units.
RICH_TEXT_MAX_LENGTH = 2000

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def get_property(properties: Any, name: str) -> Dict[str, Any]:
    """
    Return the property ``name`` from a page property bag, or an empty dict.
    """
    return _as_dict(_as_dict(properties).get(name))


def _fragment_text(fragment: Any) -> Optional[str]:
    """
    Plain text of one rich text fragment (``text.content`` or ``plain_text``).
    """
    if not isinstance(fragment, dict):
        return None

    content = _as_dict(fragment.get("text")).get("content")
    if isinstance(content, str) and content:
        return content

    plain = fragment.get("plain_text")
    if isinstance(plain, str) and plain:
        return plain

    return None


def _fragments(prop: Dict[str, Any], key: str) -> List[Any]:
    value = prop.get(key)
    return value if isinstance(value, list) else []


def extract_title(prop: Dict[str, Any]) -> Optional[str]:
    """
    Text of the first fragment of a title property.
    """
    fragments = _fragments(prop, "title")
    return _fragment_text(fragments[0]) if fragments else None


def extract_rich_text(prop: Dict[str, Any]) -> Optional[str]:
    """
    Text of the first fragment of a rich_text property.
    """
    fragments = _fragments(prop, "rich_text")
    return _fragment_text(fragments[0]) if fragments else None


def extract_rich_text_joined(prop: Dict[str, Any], separator: str = " ") -> Optional[str]:
    """
    All fragments of a rich_text property joined with ``separator``.
    """
    parts = [
        text
        for text in (_fragment_text(fragment) for fragment in _fragments(prop, "rich_text"))
        if text
    ]
    return separator.join(parts) if parts else None


def extract_url(prop: Dict[str, Any]) -> Optional[str]:
    url = prop.get("url")
    if isinstance(url, str) and url:
        return url
    return None


def extract_select_name(prop: Dict[str, Any]) -> Optional[str]:
    """
    ``name`` of a select property.
    """
    name = _as_dict(prop.get("select")).get("name")
    return name if isinstance(name, str) else None


def extract_status_name(prop: Dict[str, Any]) -> Optional[str]:
    """
    ``name`` of a status property.

    Workspaces sometimes model the workflow column as a select instead,
    so the select value is accepted as well.
    """
    name = _as_dict(prop.get("status")).get("name")
    if isinstance(name, str):
        return name
    return extract_select_name(prop)


def extract_date_start(prop: Dict[str, Any]) -> Optional[str]:
    start = _as_dict(prop.get("date")).get("start")
    if isinstance(start, str) and start:
        return start
    return None


def extract_formula_string(prop: Dict[str, Any]) -> Optional[str]:
    value = _as_dict(prop.get("formula")).get("string")
    if isinstance(value, str) and value:
        return value
    return None


def extract_first_person_name(prop: Dict[str, Any]) -> Optional[str]:
    people = prop.get("people")
    if isinstance(people, list) and people:
        name = _as_dict(people[0]).get("name")
        if isinstance(name, str) and name:
            return name
    return None


def extract_created_by_name(prop: Dict[str, Any]) -> Optional[str]:
    name = _as_dict(prop.get("created_by")).get("name")
    if isinstance(name, str) and name:
        return name
    return None


def extract_unique_id_number(prop: Dict[str, Any]) -> Optional[int]:
    number = _as_dict(prop.get("unique_id")).get("number")
    if isinstance(number, int) and not isinstance(number, bool):
        return number
    return None


def format_publication_date(value: Optional[str]) -> Optional[str]:
    """
    Format an ISO 8601 date as ``D MMMM YYYY à HH:mm``.

    Date-only values are treated as midnight. Unparsable values yield None.
    """
    if not value:
        return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    month = _MONTHS[parsed.month - 1]
    return f"{parsed.day} {month} {parsed.year} à {parsed:%H:%M}"


def select_value(name: str) -> Dict[str, Any]:
    return {"select": {"name": name}}


def status_value(name: str) -> Dict[str, Any]:
    return {"status": {"name": name}}


def truncate_utf16(content: str, limit: int = RICH_TEXT_MAX_LENGTH) -> str:
    """
    Cut ``content`` to at most ``limit`` UTF-16 code units.

    Characters outside the BMP (emojis) take two units; a surrogate pair is
    never split.
    """
    encoded = content.encode("utf-16-le")
    if len(encoded) <= limit * 2:
        return content

    cut = limit * 2
    # A high surrogate as the last unit would orphan its pair.
    if 0xD8 <= encoded[cut - 1] <= 0xDB:
        cut -= 2
    return encoded[:cut].decode("utf-16-le")


def rich_text_value(content: str) -> Dict[str, Any]:
    """
    Single-fragment rich_text value, truncated to Notion's limit.
    """
    return {
        "rich_text": [
            {"text": {"content": truncate_utf16(content)}},
        ]
    }
