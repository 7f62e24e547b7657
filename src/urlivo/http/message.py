"""src/urlivo/http/message.py

Immutable server request and response messages.

These carry just enough of an HTTP exchange for URL handling: the request
target of an inbound request and the headers of an outbound response.
"""

import dataclasses
import urllib.parse
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from urlivo.http.headers import Headers
from urlivo.http.uri import Uri

__all__ = ["ServerRequest", "Response"]


@dataclass(frozen=True)
class ServerRequest:
    """
    Inbound request snapshot.

    Attributes:
        uri: The full request URI (scheme and host included when known).
        method: HTTP method.
        headers: Request headers.
    """

    uri: Uri
    method: str = "GET"
    headers: Headers = field(default_factory=Headers)

    @classmethod
    def from_target(
        cls,
        target: Union[str, Uri],
        method: str = "GET",
        headers: Optional[Headers] = None,
    ) -> "ServerRequest":
        """Create a request from a URI string or Uri."""
        uri = Uri(target) if isinstance(target, str) else target
        return cls(uri=uri, method=method, headers=headers or Headers())

    @property
    def host(self) -> str:
        return self.uri.host

    @property
    def is_secure(self) -> bool:
        """True when the request arrived over TLS."""
        return self.uri.scheme in ("https", "wss")

    def get_path(self) -> str:
        return self.uri.path

    def get_query_params(self) -> Dict[str, str]:
        """Query parameters in order of appearance; later duplicates win."""
        return dict(urllib.parse.parse_qsl(self.uri.query, keep_blank_values=True))

    def with_uri(self, uri: Uri) -> "ServerRequest":
        return dataclasses.replace(self, uri=uri)

    def with_path(self, path: str) -> "ServerRequest":
        return self.with_uri(self.uri.with_path(path))


@dataclass(frozen=True)
class Response:
    """
    Outbound response.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers.
        body: Response body.
    """

    status_code: int = 200
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    @classmethod
    def redirect(cls, location: str, status_code: int = 302) -> "Response":
        return cls(status_code=status_code, headers=Headers({"Location": location}))

    def get_header_line(self, name: str) -> str:
        """Comma-joined header values, or an empty string."""
        return self.headers.get(name, "")

    def with_header(self, name: str, value: str) -> "Response":
        headers = self.headers.copy()
        headers.set(name, value)
        return dataclasses.replace(self, headers=headers)

    def without_header(self, name: str) -> "Response":
        headers = self.headers.copy()
        headers.pop(name, None)
        return dataclasses.replace(self, headers=headers)
