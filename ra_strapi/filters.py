# ra_strapi/filters.py
from types import MappingProxyType
from typing import Any, Dict, Optional

# Suffix (last four characters of a filter key) -> Strapi operator
OPERATORS = MappingProxyType({
    "_gte": "$gte",
    "_lte": "$lte",
    "_neq": "$ne",
    "_q": "$contains",
})


def translate_filter(ra_filter: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Turn framework filters into the equivalent Strapi query object.

    Examples:
        {"views_gte": 100} -> {"views": {"$gte": 100}}
        {"title_q": "foo"} -> {"title": {"$containsi": "foo"}}
        {"id": ["a", "b"]} -> {"componentId": {"$in": ["a", "b"]}}
        {"author": {"name": "x"}} -> {"author": {"name": {"$eq": "x"}}}
    """
    if ra_filter is None:
        return None

    filters: Dict[str, Any] = {}
    for key, value in ra_filter.items():
        # relation sub-filter
        if isinstance(value, dict):
            filters[key] = translate_filter(value)
            continue

        # _q must win over the generic suffix table
        operator = OPERATORS.get(key[-4:])
        if key.endswith("_q"):
            filters[key[:-2]] = {"$containsi": value}
        elif key == "id":
            filters["componentId"] = {"$in": value}
        elif operator:
            filters[key[:-4]] = {operator: value}
        else:
            filters[key] = {"$eq": value}

    return filters
