"""utils/validators.py

Validation utilities for URI components.
"""

import re
from typing import Optional

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_FORBIDDEN_RE = re.compile(r"[\x00-\x20\x7f]")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")

MAX_PORT = 65535


def validate_scheme(scheme: str) -> bool:
    """Check a scheme against ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )."""
    return bool(_SCHEME_RE.match(scheme))


def validate_port(port: Optional[int]) -> bool:
    """A port is either absent or an integer within 0..65535."""
    if port is None:
        return True
    return not isinstance(port, bool) and 0 <= port <= MAX_PORT


def has_forbidden_characters(value: str) -> bool:
    """True if the value contains whitespace or ASCII control characters."""
    return bool(_FORBIDDEN_RE.search(value))


def has_control_characters(value: str) -> bool:
    """True if the value contains ASCII control characters, space excluded."""
    return bool(_CONTROL_RE.search(value))
