"""src/urlivo/http/url.py

Structured URL value for Urlivo.

A Url holds the parts of an application URL separately (scheme, authority,
base directory, path, format, query parameters and fragment) and renders
them back with ``build()``::

    >>> url = Url("example.com", "/directory/").set_scheme("http").set_path("path")
    >>> url.set_parameter("key", "value").build(absolute=True)
    'http://example.com/directory/path?key=value'
"""

import urllib.parse
from typing import Any, Dict, List, Mapping, Optional, Union

from urlivo.exceptions import ComponentIndexError, MissingParameterError

__all__ = ["Url"]


def _is_empty(value: Any) -> bool:
    # "0" counts as empty, as query values usually arrive as strings
    return not value or value == "0"


def _query_value(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


class Url:
    """
    Mutable URL value with chainable setters.

    Setting a port, user or password makes the URL absolute, so ``build()``
    includes the authority even without ``absolute=True``.

    Attributes:
        scheme: Scheme name such as ``"https"``, or None.
        host: Host name. Empty means there is no authority to render.
        port: Port number, or None.
        user: User name, or None.
        password: Password, or None. Only rendered together with a user.
        directory: Base directory prefixed onto every built URL.
        path: Path below the directory, without leading slash or format.
        format: Format suffix such as ``"json"``, or None.
        fragment: Fragment, or None.
        absolute: Build absolute URLs by default.
    """

    # pylint: disable=too-many-instance-attributes
    __slots__ = (
        "_scheme",
        "_host",
        "_port",
        "_user",
        "_password",
        "_directory",
        "_path",
        "_components",
        "_format",
        "_parameters",
        "_fragment",
        "_absolute",
    )

    def __init__(self, host: str = "", base_directory: str = "/") -> None:
        """
        Initialize a Url.

        Args:
            host: The host, needed for absolute URLs.
            base_directory: Base directory, with leading and trailing slash.
        """
        self._scheme: Optional[str] = None
        self._host: str = host
        self._port: Optional[int] = None
        self._user: Optional[str] = None
        self._password: Optional[str] = None
        self._directory: str = base_directory
        self._path: str = ""
        self._components: List[str] = [""]
        self._format: Optional[str] = None
        self._parameters: Dict[str, Any] = {}
        self._fragment: Optional[str] = None
        self._absolute: bool = False

    @property
    def scheme(self) -> Optional[str]:
        return self._scheme

    def set_scheme(self, scheme: str) -> "Url":
        self._scheme = scheme
        return self

    @property
    def host(self) -> str:
        return self._host

    def set_host(self, host: str) -> "Url":
        self._host = host
        return self

    @property
    def port(self) -> Optional[int]:
        return self._port

    def set_port(self, port: int) -> "Url":
        """Set the port. The URL becomes absolute."""
        self._port = port
        self._absolute = True
        return self

    @property
    def user(self) -> Optional[str]:
        return self._user

    def set_user(self, user: str) -> "Url":
        """Set the user name. The URL becomes absolute."""
        self._user = user
        self._absolute = True
        return self

    @property
    def password(self) -> Optional[str]:
        return self._password

    def set_password(self, password: str) -> "Url":
        """Set the password. The URL becomes absolute."""
        self._password = password
        self._absolute = True
        return self

    @property
    def directory(self) -> str:
        return self._directory

    def set_directory(self, directory: str) -> "Url":
        """Set the base directory, with leading and trailing slashes."""
        self._directory = directory
        return self

    @property
    def path(self) -> str:
        return self._path

    def set_path(self, path: str) -> "Url":
        """
        Set the path, without base directory or leading slash.

        A query string is discarded. If the last segment contains a dot, the
        text after the last dot becomes the format and is removed from the
        path, e.g. ``"a/b.json"`` stores path ``"a/b"`` and format ``"json"``.

        Args:
            path: The path.

        Returns:
            This instance.
        """
        path = path.split("?", 1)[0]

        basename = path.rsplit("/", 1)[-1]
        if "." in basename:
            self._format = basename.rsplit(".", 1)[1]
            path = path[: -(len(self._format) + 1)]

        self._path = path
        self._components = path.split("/")
        return self

    @property
    def components(self) -> List[str]:
        """The slash separated segments of the path."""
        return list(self._components)

    def get_component(self, index: int = 0) -> str:
        """
        Get a path segment by position.

        Raises:
            ComponentIndexError: If there is no segment at ``index``.
        """
        if not 0 <= index < len(self._components):
            raise ComponentIndexError(index, len(self._components))
        return self._components[index]

    @property
    def format(self) -> Optional[str]:
        return self._format

    def set_format(self, format: str) -> "Url":  # pylint: disable=redefined-builtin
        self._format = format
        return self

    @property
    def parameters(self) -> Dict[str, Any]:
        """Query parameters in insertion order."""
        return dict(self._parameters)

    def set_parameter(self, name: str, value: Any) -> "Url":
        self._parameters[name] = value
        return self

    def set_parameters(self, parameters: Mapping[str, Any]) -> "Url":
        """Set several query parameters, keeping the mapping's order."""
        for name, value in parameters.items():
            self.set_parameter(name, value)
        return self

    def has_parameter(self, name: str) -> bool:
        """
        Check whether a parameter is set to a non-empty value.

        Empty values (``""``, ``"0"``, ``0``, ``None``, ``False``, empty
        containers) count as not set.
        """
        return name in self._parameters and not _is_empty(self._parameters[name])

    def get_parameter(self, name: str) -> Any:
        """
        Get a parameter value.

        Raises:
            MissingParameterError: If the parameter was never set.
        """
        try:
            return self._parameters[name]
        except KeyError:
            raise MissingParameterError(name) from None

    def remove_parameter(self, name: str) -> "Url":
        self._parameters.pop(name, None)
        return self

    def clear_parameters(self) -> "Url":
        self._parameters = {}
        return self

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    def set_fragment(self, fragment: str) -> "Url":
        self._fragment = fragment
        return self

    @property
    def absolute(self) -> bool:
        return self._absolute

    def set_absolute(self, absolute: bool) -> "Url":
        self._absolute = absolute
        return self

    def _authority(self) -> str:
        url = ""
        if self._scheme is not None:
            url += f"{self._scheme}:"
        url += "//"
        if self._user is not None:
            url += self._user
            if self._password is not None:
                url += f":{self._password}"
            url += "@"
        url += self._host
        if self._port is not None:
            url += f":{self._port}"
        return url

    def build(
        self, path: Union[str, bool, None] = None, absolute: bool = False
    ) -> str:
        """
        Build an output URL.

        Args:
            path: A specific path to output instead of the stored one. Format,
                query parameters and fragment only apply to the stored path
                and are left out when this is given. ``None`` or ``False``
                use the stored path.
            absolute: True to include scheme and authority for this call.

        Returns:
            The URL string.
        """
        if path is False:
            path = None
        url = ""
        if (absolute or self._absolute) and self._host:
            url += self._authority()

        url += self._directory + (self._path if path is None else path)
        if path is not None:
            return url

        if self._format is not None:
            url += f".{self._format}"
        if self._parameters:
            url += "?" + urllib.parse.urlencode(
                [(name, _query_value(value)) for name, value in self._parameters.items()]
            )
        if self._fragment is not None:
            url += f"#{self._fragment}"
        return url

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"Url({self.build(absolute=True)!r})"
