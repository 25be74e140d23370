# ra_strapi/normalizer.py
"""
Turn Strapi records into the flat records the admin framework expects.

A Strapi record carries two identifiers: the public ``documentId`` and the
internal numeric ``id``. The framework only knows ``id``, so the public one
takes its place and the numeric one is kept under ``ref``. Relations are
detected by the presence of ``documentId`` on a value, one level at a time.
"""
from typing import Any, Dict, List


def _is_strapi_object(value: Any) -> bool:
    return isinstance(value, dict) and bool(value.get("documentId"))


def normalize_record(record: Dict) -> Dict:
    """
    Turn a Strapi object into a framework object.
    Returns: {"id": documentId, "ref": id, **attributes}
    """
    attributes = dict(record)
    document_id = attributes.pop("documentId", None)
    ref = attributes.pop("id", None)
    attributes.pop("blocks", None)
    return {
        "id": document_id,
        "ref": ref,
        **normalize_attributes(attributes),
    }


def normalize_attributes(attributes: Dict) -> Dict:
    """
    Check each attribute and normalize the ones holding Strapi objects.
    The mapping is updated in place and returned.
    """
    for key in list(attributes.keys()):
        data = attributes[key]
        if not data:
            continue
        # a single related object
        if _is_strapi_object(data):
            attributes[key] = normalize_record(data)
        # a list of related objects
        elif isinstance(data, list) and _is_strapi_object(data[0]):
            attributes[key] = [normalize_record(item) for item in data]
    return attributes


def normalize_sequence(records: List[Dict]) -> List[Dict]:
    """Turn a list of Strapi resources / components into framework objects"""
    return [
        normalize_record(item) if _is_strapi_object(item) else normalize_attributes(item)
        for item in records
    ]
