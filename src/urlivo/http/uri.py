"""src/urlivo/http/uri.py

Generic RFC 3986 URI value for Urlivo.

A Uri is immutable: every ``with_*`` method returns a new instance. Absent
components are represented by the empty string (the port by ``None``), so a
URI with an empty query and one without a query are the same value.

Characters that may not appear in a path, query or fragment (spaces,
non-ASCII text) are percent-encoded; existing escapes are kept.
"""

import urllib.parse
from typing import Any, Dict, Optional, Tuple

from urlivo.exceptions import UriSyntaxError
from urlivo.utils.validators import (
    has_control_characters,
    has_forbidden_characters,
    validate_port,
    validate_scheme,
)

__all__ = ["Uri"]

_DEFAULT_PORTS: Dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# sub-delims, ":" and "@" (RFC 3986 pchar) plus "%" for existing escapes
_PATH_SAFE = "/:@!$&'()*+,;=%"
_QUERY_SAFE = _PATH_SAFE + "?"

_Parts = Tuple[str, str, str, Optional[int], str, str, str]


def _parse(uri: str) -> _Parts:
    if has_control_characters(uri):
        raise UriSyntaxError(f"URI contains control characters: {uri!r}")

    try:
        parts = urllib.parse.urlsplit(uri)
        port = parts.port
    except ValueError as exc:
        raise UriSyntaxError(f"Unable to parse URI {uri!r}: {exc}") from exc

    user_info, _, host_port = parts.netloc.rpartition("@")
    host = parts.hostname or ""
    if host_port.startswith("["):
        if host_port.partition("]")[2][:1] not in ("", ":"):
            raise UriSyntaxError(f"Unexpected data after IP literal: {uri!r}")
        host = f"[{host}]"

    return (
        parts.scheme,
        user_info,
        host,
        port,
        parts.path,
        parts.query,
        parts.fragment,
    )


class Uri:
    """
    Immutable URI reference.

    Attributes:
        scheme: Lower-cased scheme, empty for relative references.
        user_info: ``user[:password]`` part of the authority.
        host: Lower-cased host, empty when there is no authority.
        port: Port number, ``None`` when absent or the scheme default.
        path: Path, possibly empty.
        query: Query string without the leading ``?``.
        fragment: Fragment without the leading ``#``.
    """

    __slots__ = (
        "_scheme",
        "_user_info",
        "_host",
        "_port",
        "_path",
        "_query",
        "_fragment",
    )

    def __init__(self, uri: str = ""):
        """
        Parse a URI reference.

        Args:
            uri: The URI string. The empty string is a valid (empty) reference.

        Raises:
            UriSyntaxError: If the string is not a valid URI reference.
        """
        self._assign(*_parse(uri))

    @classmethod
    def parse(cls, uri: str) -> "Uri":
        """Alias of the constructor, reads better at call sites."""
        return cls(uri)

    @classmethod
    def from_parts(
        cls,
        scheme: str = "",
        user_info: str = "",
        host: str = "",
        port: Optional[int] = None,
        path: str = "",
        query: str = "",
        fragment: str = "",
    ) -> "Uri":
        """Build a Uri from already separated components."""
        uri = cls.__new__(cls)
        uri._assign(scheme, user_info, host, port, path, query, fragment)
        return uri

    def _assign(
        self,
        scheme: str,
        user_info: str,
        host: str,
        port: Optional[int],
        path: str,
        query: str,
        fragment: str,
    ) -> None:
        if scheme and not validate_scheme(scheme):
            raise UriSyntaxError(f"Invalid scheme: {scheme!r}")
        if not validate_port(port):
            raise UriSyntaxError(f"Invalid port: {port!r}")
        if has_forbidden_characters(user_info + host):
            raise UriSyntaxError(f"Invalid authority: {user_info}@{host}")

        scheme = scheme.lower()
        path = urllib.parse.quote(path, safe=_PATH_SAFE)
        query = urllib.parse.quote(query, safe=_QUERY_SAFE)
        fragment = urllib.parse.quote(fragment, safe=_QUERY_SAFE)
        if port is not None and _DEFAULT_PORTS.get(scheme) == port:
            port = None

        object.__setattr__(self, "_scheme", scheme)
        object.__setattr__(self, "_user_info", user_info)
        object.__setattr__(self, "_host", host.lower())
        object.__setattr__(self, "_port", port)
        object.__setattr__(self, "_path", path)
        object.__setattr__(self, "_query", query)
        object.__setattr__(self, "_fragment", fragment)
        self._validate()

    def _validate(self) -> None:
        if self.authority == "":
            if self._path.startswith("//"):
                raise UriSyntaxError(
                    'The path of a URI without an authority must not start with "//"'
                )
            if self._scheme == "" and ":" in self._path.split("/", 1)[0]:
                raise UriSyntaxError(
                    "A relative URI must not have a path beginning with a segment "
                    "containing a colon"
                )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def user_info(self) -> str:
        return self._user_info

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def path(self) -> str:
        return self._path

    @property
    def query(self) -> str:
        return self._query

    @property
    def fragment(self) -> str:
        return self._fragment

    @property
    def authority(self) -> str:
        """``[user_info@]host[:port]``, empty when the host is empty."""
        if self._host == "":
            return ""
        authority = self._host
        if self._user_info:
            authority = f"{self._user_info}@{authority}"
        if self._port is not None:
            authority += f":{self._port}"
        return authority

    def _replace(self, **changes: Any) -> "Uri":
        parts: Dict[str, Any] = {
            "scheme": self._scheme,
            "user_info": self._user_info,
            "host": self._host,
            "port": self._port,
            "path": self._path,
            "query": self._query,
            "fragment": self._fragment,
        }
        parts.update(changes)
        return self.from_parts(**parts)

    def with_scheme(self, scheme: str) -> "Uri":
        return self._replace(scheme=scheme)

    def with_user_info(self, user: str, password: Optional[str] = None) -> "Uri":
        info = user
        if user and password:
            info += f":{password}"
        return self._replace(user_info=info)

    def with_host(self, host: str) -> "Uri":
        return self._replace(host=host)

    def with_port(self, port: Optional[int]) -> "Uri":
        return self._replace(port=port)

    def with_path(self, path: str) -> "Uri":
        return self._replace(path=path)

    def with_query(self, query: str) -> "Uri":
        return self._replace(query=query)

    def with_fragment(self, fragment: str) -> "Uri":
        return self._replace(fragment=fragment)

    def is_absolute(self) -> bool:
        """True if the URI has a scheme."""
        return self._scheme != ""

    def is_network_path_reference(self) -> bool:
        """A reference starting with ``//``."""
        return self._scheme == "" and self.authority != ""

    def is_absolute_path_reference(self) -> bool:
        """A reference starting with a single ``/``."""
        return (
            self._scheme == ""
            and self.authority == ""
            and self._path.startswith("/")
        )

    def is_relative_path_reference(self) -> bool:
        """A reference that does not start with ``/``, e.g. ``page?q=1``."""
        return (
            self._scheme == ""
            and self.authority == ""
            and not self._path.startswith("/")
        )

    def is_same_document_reference(self, base: Optional["Uri"] = None) -> bool:
        """
        Check whether this reference points to the same document.

        Args:
            base: Optional base to resolve against. Without one, only an
                empty or fragment-only reference qualifies.
        """
        if base is not None:
            # pylint: disable=import-outside-toplevel
            from urlivo.http.resolver import resolve

            target = resolve(base, self)
            return (
                target.scheme == base.scheme
                and target.authority == base.authority
                and target.path == base.path
                and target.query == base.query
            )

        return (
            self._scheme == ""
            and self.authority == ""
            and self._path == ""
            and self._query == ""
        )

    def __str__(self) -> str:
        uri = ""
        if self._scheme:
            uri += f"{self._scheme}:"

        authority = self.authority
        if authority or self._scheme == "file":
            uri += f"//{authority}"

        path = self._path
        if authority and path and not path.startswith("/"):
            path = f"/{path}"
        uri += path

        if self._query:
            uri += f"?{self._query}"
        if self._fragment:
            uri += f"#{self._fragment}"
        return uri

    def __repr__(self) -> str:
        return f"Uri({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Uri):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))
