"""src/urlivo/exceptions.py

Urlivo Exceptions hierarchy.
"""


class UrlivoError(Exception):
    """Base exception for all Urlivo errors."""


class UrlError(UrlivoError):
    """General exception for Url value errors."""


class ComponentIndexError(UrlError, IndexError):
    """
    A path component was requested at an index outside the path segments.
    """

    def __init__(self, index: int, count: int):
        super().__init__(
            f"Path component index {index} out of range (path has {count} components)"
        )
        self.index = index
        self.count = count


class MissingParameterError(UrlError, KeyError):
    """A query parameter was requested that has never been set."""

    def __init__(self, name: str):
        super().__init__(f"Query parameter not set: {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class UriSyntaxError(UrlivoError, ValueError):
    """
    Malformed URI string.
    Raised when a string cannot be parsed as an RFC 3986 URI reference.
    """
