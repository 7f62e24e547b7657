"""tests/unit/test_exceptions.py"""

import pytest

from urlivo.exceptions import (
    ComponentIndexError,
    MissingParameterError,
    UriSyntaxError,
    UrlError,
    UrlivoError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of Urlivo exceptions."""
    assert issubclass(UrlError, UrlivoError)
    assert issubclass(ComponentIndexError, UrlError)
    assert issubclass(MissingParameterError, UrlError)
    assert issubclass(UriSyntaxError, UrlivoError)


def test_builtin_bases():
    """Verify errors can be caught with the matching builtin exception."""
    assert issubclass(ComponentIndexError, IndexError)
    assert issubclass(MissingParameterError, KeyError)
    assert issubclass(UriSyntaxError, ValueError)


def test_component_index_error_message():
    """Verify ComponentIndexError describes the index and segment count."""
    error = ComponentIndexError(4, 2)
    assert error.index == 4
    assert error.count == 2
    assert "4" in str(error) and "2 components" in str(error)


def test_missing_parameter_error_message():
    """Verify MissingParameterError keeps a readable message."""
    error = MissingParameterError("page")
    assert error.name == "page"
    assert str(error) == "Query parameter not set: 'page'"


@pytest.mark.parametrize("exception_class", [UrlivoError, UrlError, UriSyntaxError])
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)
