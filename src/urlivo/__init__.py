"""src/urlivo/__init__.py

Urlivo - Structured URL building and RFC 3986 resolution for Python.

Urlivo keeps the parts of an application URL (scheme, authority, base
directory, path, format, query parameters and fragment) apart, so handlers
can read and change them individually and render the result as an absolute
or relative URL.

Key Features:
    - Chainable Url value with format detection (``page.json``)
    - Absolute or relative output below a configurable base directory
    - Immutable Uri with RFC 3986 resolve and relativize
    - Base URL middleware for applications mounted below a prefix
    - Full type hints (PEP 561)

Example:
    Building URLs::

        from urlivo import Url

        url = Url("example.com", "/app/").set_scheme("https")
        url.set_path("reports/2024.json").set_parameter("page", 2)
        url.build()                # '/app/reports/2024.json?page=2'
        url.build(absolute=True)   # 'https://example.com/app/reports/2024.json?page=2'

    Resolving URIs::

        from urlivo import UriBuilder

        builder = UriBuilder("https://example.com/app/")
        str(builder.build("../login"))                  # '/login'
        str(builder.build("../login", absolute=True))   # 'https://example.com/login'

Logging:
    Urlivo logs through loguru and is disabled by default. Enable it with
    ``logger.enable("urlivo")``.
"""

from loguru import logger

from urlivo.config import Settings
from urlivo.exceptions import (
    ComponentIndexError,
    MissingParameterError,
    UriSyntaxError,
    UrlError,
    UrlivoError,
)
from urlivo.http.middleware import BaseUrlMiddleware
from urlivo.http.request import Request, url_from_request
from urlivo.http.uri import Uri
from urlivo.http.uri_builder import UriBuilder
from urlivo.http.url import Url
from urlivo.version import __version__

logger.disable("urlivo")

__all__ = [
    "Url",
    "Uri",
    "UriBuilder",
    "Request",
    "url_from_request",
    "BaseUrlMiddleware",
    "Settings",
    "UrlivoError",
    "UrlError",
    "ComponentIndexError",
    "MissingParameterError",
    "UriSyntaxError",
    "__version__",
]
