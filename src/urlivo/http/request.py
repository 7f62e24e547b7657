"""src/urlivo/http/request.py

Request wrapper around the URL of the current request.

``url_from_request`` turns an inbound :class:`ServerRequest` into a
:class:`Url`, and :class:`Request` exposes that Url together with the
language derived from the host (``fr.example.com`` -> ``"fr"``).
"""

from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from urlivo.config import Settings
from urlivo.http.headers import Headers
from urlivo.http.message import ServerRequest
from urlivo.http.url import Url

__all__ = ["Request", "url_from_request", "language_from_host"]


def url_from_request(request: ServerRequest, base_directory: str = "/") -> Url:
    """
    Create a Url from an inbound request.

    Args:
        request: The request snapshot.
        base_directory: Directory the application is mounted under. That many
            leading characters are removed from the request path.

    Returns:
        A Url with host, path, query parameters and scheme of the request.
    """
    url = Url(request.host, base_directory)
    url.set_path(request.get_path()[len(base_directory) :])
    url.set_parameters(request.get_query_params())
    url.set_scheme("https" if request.is_secure else "http")
    logger.debug("Built url {!r} from request {}", url, request.uri)
    return url


def language_from_host(host: str) -> Optional[str]:
    """
    Two-letter first label of a host with more than two labels.

    ``en.example.com`` gives ``"en"``; ``example.com`` and
    ``www.example.com`` give None.
    """
    labels = host.split(".")
    if len(labels) > 2 and len(labels[0]) == 2:
        return labels[0]
    return None


class Request:
    """
    The URL and headers of the request being handled.

    Attributes:
        url: The request Url.
        language: Language code, from the host or the default.
        headers: Request headers.
    """

    __slots__ = ("url", "language", "headers")

    def __init__(
        self,
        url: Url,
        default_language: str = "en",
        headers: Optional[Headers] = None,
    ) -> None:
        self.language = default_language
        self.headers = headers if headers is not None else Headers()
        self.url = url
        self.set_url(url)

    @classmethod
    def from_server_request(
        cls, request: ServerRequest, settings: Optional[Settings] = None
    ) -> "Request":
        """Wrap an inbound request using the given (or default) settings."""
        settings = settings or Settings()
        url = url_from_request(request, settings.base_directory)
        if settings.absolute:
            url.set_absolute(True)
        return cls(url, settings.default_language, request.headers.copy())

    def set_url(self, url: Url) -> "Request":
        """Replace the Url, picking up a language from its host."""
        self.url = url
        language = language_from_host(url.host)
        if language is not None:
            logger.debug("Language {} taken from host {}", language, url.host)
            self.set_language(language)
        return self

    def set_language(self, language: str) -> "Request":
        self.language = language
        return self

    @property
    def path(self) -> str:
        return self.url.path

    def set_path(self, path: str) -> "Request":
        self.url.set_path(path)
        return self

    @property
    def format(self) -> Optional[str]:
        return self.url.format

    @property
    def components(self) -> List[str]:
        return self.url.components

    def get_component(self, index: int = 0) -> str:
        return self.url.get_component(index)

    @property
    def parameters(self) -> Dict[str, Any]:
        return self.url.parameters

    def set_parameter(self, name: str, value: Any) -> "Request":
        self.url.set_parameter(name, value)
        return self

    def set_parameters(self, parameters: Mapping[str, Any]) -> "Request":
        self.url.set_parameters(parameters)
        return self

    def has_parameter(self, name: str) -> bool:
        return self.url.has_parameter(name)

    def get_parameter(self, name: str) -> Any:
        return self.url.get_parameter(name)

    def set_header(self, name: str, value: str) -> "Request":
        self.headers.set(name, value)
        return self

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    def has_header(self, name: str) -> bool:
        return self.headers.has(name)
