"""src/urlivo/http/headers.py

Case-insensitive HTTP header store for Urlivo messages.
"""

from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Union,
    cast,
)

HeaderValues = Union[str, List[str]]


class Headers(MutableMapping[str, str]):
    """
    Case-insensitive dictionary for HTTP headers with support for multiple values.

    Behaves like a dictionary where values are strings; multiple values of
    one header are joined by commas. Access raw lists via get_all().
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[Mapping[str, HeaderValues]] = None):
        self._headers: Dict[str, List[str]] = {}
        if headers:
            for name, value in headers.items():
                self.set(name, value)

    def __getitem__(self, key: str) -> str:
        """Get header value (comma-joined if multiple)."""
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return cast(str, value)

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self._headers[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._headers

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get header value.

        Args:
            key: Header name (case-insensitive).
            default: Default value if header not found.

        Returns:
            Comma-joined string for multiple values, or default if not found.
        """
        values = self._headers.get(key.lower())
        if not values:
            return default
        return ", ".join(values)

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a header.

        Args:
            key: Header name (case-insensitive).

        Returns:
            List of all values for the header, empty list if not found.
        """
        return list(self._headers.get(key.lower(), []))

    def set(self, key: str, value: HeaderValues) -> None:
        """Replace all values of a header."""
        if isinstance(value, list):
            self._headers[key.lower()] = list(value)
        else:
            self._headers[key.lower()] = [value]

    def add(self, key: str, value: str) -> None:
        """Append a value to a header, keeping existing ones."""
        self._headers.setdefault(key.lower(), []).append(value)

    def has(self, key: str) -> bool:
        return key in self

    def copy(self) -> "Headers":
        headers = Headers()
        headers._headers = {name: list(values) for name, values in self._headers.items()}
        return headers
