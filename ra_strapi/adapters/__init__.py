# ra_strapi/adapters/__init__.py
from .rest_adapter import RESTAdapter, Response

__all__ = [
    "RESTAdapter",
    "Response",
]
