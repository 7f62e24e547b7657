"""src/urlivo/http/middleware.py

Middleware for applications mounted below a base URL.

Inbound request paths have the base URL removed before the handler sees
them, and relative ``Location`` headers of responses get it prepended.
"""

from typing import Callable

from loguru import logger

from urlivo.config import Settings
from urlivo.exceptions import UriSyntaxError
from urlivo.http.message import Response, ServerRequest
from urlivo.http.uri import Uri

__all__ = ["BaseUrlMiddleware", "Handler"]

Handler = Callable[[ServerRequest], Response]


class BaseUrlMiddleware:
    """
    Strip and restore a base URL around a request handler.

    Attributes:
        base_url: The base URL, e.g. ``"/app/"``. ``"/"`` disables the
            middleware.
    """

    __slots__ = ("base_url",)

    def __init__(self, base_url: str = "/") -> None:
        self.base_url = base_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "BaseUrlMiddleware":
        return cls(settings.base_directory)

    def __call__(self, request: ServerRequest, handler: Handler) -> Response:
        return self.process(request, handler)

    def process(self, request: ServerRequest, handler: Handler) -> Response:
        """
        Handle a request below the base URL.

        Args:
            request: The inbound request.
            handler: Called with the request without base URL.

        Returns:
            The handler's response, with the base URL added to a relative
            ``Location`` header.

        Raises:
            UriSyntaxError: If the ``Location`` header is not a valid URI.
        """
        request = self.without_base_url(request)
        response = handler(request)
        return self.redirect_with_base_url(response)

    def without_base_url(self, request: ServerRequest) -> ServerRequest:
        """Remove the base URL from the request path."""
        if self.base_url == "/":
            return request
        path = request.get_path()
        stripped = "/" + path[len(self.base_url) :]
        logger.debug("Stripped base url {} from {} to {}", self.base_url, path, stripped)
        return request.with_path(stripped)

    def redirect_with_base_url(self, response: Response) -> Response:
        """Prefix a relative-path ``Location`` header with the base URL."""
        location = response.get_header_line("Location")
        if location == "":
            return response

        try:
            relative = Uri(location).is_relative_path_reference()
        except UriSyntaxError:
            logger.warning("Response has malformed Location header {!r}", location)
            raise

        if not relative:
            return response
        logger.debug("Prefixing Location {} with {}", location, self.base_url)
        return response.with_header("Location", self.base_url + location)
