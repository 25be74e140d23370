# ra_strapi/curator.py
from typing import Any, Dict

# Framework-only or server-managed fields, never sent on writes
RESERVED_FIELDS = ("id", "ref", "createdAt", "publishedAt", "updatedAt", "documentId")


def curate_data(data: Dict) -> Dict:
    """Copy of data without the reserved fields"""
    return {key: value for key, value in data.items() if key not in RESERVED_FIELDS}


def _relation_id(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("id")
    return value


def to_strapi_payload(data: Dict) -> Dict:
    """
    Turn framework record data into a Strapi write body.
    Relations (single or lists) are reduced to their identifiers, one level deep.
    """
    curated = curate_data(data)
    for key, value in curated.items():
        if isinstance(value, dict) and (value.get("documentId") or value.get("id")):
            curated[key] = value.get("id")
        elif isinstance(value, list):
            curated[key] = [_relation_id(item) for item in value]
    return curated
