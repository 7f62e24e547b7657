"""src/urlivo/http/uri_builder.py

Build output URIs relative to a base URI.
"""

from typing import Optional, Union

from loguru import logger

from urlivo.http import resolver
from urlivo.http.uri import Uri

__all__ = ["UriBuilder"]

UriLike = Union[Uri, str]


def _to_uri(uri: UriLike) -> Uri:
    if isinstance(uri, str):
        return Uri(uri)
    return uri


class UriBuilder:
    """
    Resolve and relativize URIs against a base URI.

    By default built URIs are scheme- and host-relative (``/dir/page``).
    Call ``set_absolute(True)`` or pass ``absolute=True`` to ``build`` to keep
    the scheme and authority of the base.

    Attributes:
        base_uri: The URI that built URIs are relative to.
        absolute: Build absolute URIs by default.
    """

    __slots__ = ("_base_uri", "absolute")

    def __init__(self, base_uri: Optional[UriLike] = None) -> None:
        """
        Args:
            base_uri: The base URI, as a Uri or a string. Defaults to the
                empty reference.

        Raises:
            UriSyntaxError: If a string base cannot be parsed.
        """
        self._base_uri = Uri() if base_uri is None else _to_uri(base_uri)
        self.absolute = False

    @property
    def base_uri(self) -> Uri:
        return self._base_uri

    def set_base_uri(self, uri: UriLike) -> "UriBuilder":
        """Replace the base URI."""
        self._base_uri = _to_uri(uri)
        return self

    def get_base_uri(self) -> Uri:
        return self._base_uri

    def set_absolute(self, absolute: bool) -> "UriBuilder":
        """Set whether built URIs keep the scheme and host of the base."""
        self.absolute = absolute
        return self

    def build(self, uri: UriLike = "", absolute: bool = False) -> Uri:
        """
        Resolve a URI against the base.

        Args:
            uri: The target, as a Uri or a string. The empty string yields
                the base.
            absolute: True to keep scheme and host for this call, regardless
                of the instance default.

        Returns:
            The resolved URI.

        Raises:
            UriSyntaxError: If a string target cannot be parsed.
        """
        base = self._base_uri
        target = _to_uri(uri)
        if not (absolute or self.absolute):
            base = base.with_scheme("").with_host("")
            target = target.with_scheme("").with_host("")

        resolved = resolver.resolve(base, target)
        logger.debug("Resolved {} against {} to {}", target, base, resolved)
        return resolved

    def relativize(self, uri: UriLike = "") -> Uri:
        """
        Express a URI relative to the base.

        Args:
            uri: The target, as a Uri or a string.

        Returns:
            The shortest reference that resolves to the target.

        Raises:
            UriSyntaxError: If a string target cannot be parsed.
        """
        return resolver.relativize(self._base_uri, _to_uri(uri))
