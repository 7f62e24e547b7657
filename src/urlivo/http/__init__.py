"""src/urlivo/http/__init__.py

HTTP URL layer for Urlivo.

Provides the Url value, the generic Uri and its RFC 3986 resolver, the
UriBuilder, and the request/response collaborators built on them.
"""

from .headers import Headers
from .message import Response, ServerRequest
from .middleware import BaseUrlMiddleware
from .request import Request, language_from_host, url_from_request
from .resolver import relativize, remove_dot_segments, resolve
from .uri import Uri
from .uri_builder import UriBuilder
from .url import Url

__all__ = [
    "Url",
    "Uri",
    "UriBuilder",
    "resolve",
    "relativize",
    "remove_dot_segments",
    "Headers",
    "ServerRequest",
    "Response",
    "Request",
    "url_from_request",
    "language_from_host",
    "BaseUrlMiddleware",
]
