# ra_strapi/query.py
"""
Query string building for the Strapi REST API.

Strapi parses nested query parameters with bracket notation
(``filters[title][$eq]=foo``, ``sort[0]=title:ASC``). ``stringify`` produces
that format: keys are written raw, values are percent-encoded.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from .filters import translate_filter

POPULATE_ALL = "populate=*"


def _encode_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        value = value.isoformat()
    elif isinstance(value, float) and value.is_integer():
        value = int(value)
    return quote(str(value), safe="")


def _flatten(prefix: str, value: Any) -> List[Tuple[str, str]]:
    if isinstance(value, dict):
        pairs = []
        for key, item in value.items():
            pairs.extend(_flatten(f"{prefix}[{key}]", item))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for index, item in enumerate(value):
            pairs.extend(_flatten(f"{prefix}[{index}]", item))
        return pairs
    return [(prefix, _encode_value(value))]


def stringify(query: Dict[str, Any]) -> str:
    """
    Serialize a query object with bracket notation.
    Empty lists and mappings are omitted, None becomes an empty value.
    """
    pairs = []
    for key, value in query.items():
        pairs.extend(_flatten(key, value))
    return "&".join(f"{key}={value}" for key, value in pairs)


def reference_filter_key(target: str) -> str:
    """Dotted target path -> key nesting through the bracket notation ("a.b" -> "a][b")"""
    return "][".join(target.split("."))


def build_list_query(
    pagination: Optional[Dict] = None,
    sort: Optional[Dict] = None,
    ra_filter: Optional[Dict] = None,
) -> Dict[str, Any]:
    """
    Sort, pagination and filters for list-like requests.
    Absent page/perPage are left out so no empty pagination values are sent.
    """
    pagination = pagination or {}
    sort = sort or {}
    page_params = {"page": pagination.get("page"), "pageSize": pagination.get("perPage")}
    return {
        "sort": [f"{sort.get('field')}:{sort.get('order')}"],
        "pagination": {key: value for key, value in page_params.items() if value is not None},
        "filters": translate_filter(ra_filter),
    }
