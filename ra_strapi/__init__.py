# ra_strapi/__init__.py
from .provider import StrapiRestProvider, make_provider
from .exceptions import ProviderError, HttpError

__version__ = "0.1.0"
__all__ = ["StrapiRestProvider", "make_provider", "ProviderError", "HttpError"]
