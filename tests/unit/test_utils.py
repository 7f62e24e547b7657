"""tests/unit/test_utils.py"""

import pytest

from urlivo.utils.validators import (
    has_control_characters,
    has_forbidden_characters,
    validate_port,
    validate_scheme,
)


@pytest.mark.parametrize(
    "scheme, expected",
    [
        ("http", True),
        ("https", True),
        ("svn+ssh", True),
        ("coap.tcp", True),
        ("x-custom", True),
        ("1http", False),
        ("ht tp", False),
        ("", False),
    ],
)
def test_validate_scheme(scheme, expected):
    """Test scheme validation utility."""
    assert validate_scheme(scheme) is expected


@pytest.mark.parametrize(
    "port, expected",
    [(None, True), (0, True), (8080, True), (65535, True), (65536, False), (-1, False), (True, False)],
)
def test_validate_port(port, expected):
    """Test port validation utility."""
    assert validate_port(port) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("/path", False), ("a b", True), ("tab\there", True), ("bell\x07", True), ("del\x7f", True)],
)
def test_has_forbidden_characters(value, expected):
    """Test detection of whitespace and control characters."""
    assert has_forbidden_characters(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("/path", False), ("a b", False), ("tab\there", True), ("line\nbreak", True), ("del\x7f", True)],
)
def test_has_control_characters(value, expected):
    """Test detection of control characters, space allowed."""
    assert has_control_characters(value) is expected
