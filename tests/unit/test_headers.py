"""tests/unit/test_headers.py"""

import pytest

from urlivo.http.headers import Headers


class TestHeaders:
    """Tests for Headers class."""

    def test_init_empty(self):
        """Test Headers initialization with no arguments."""
        headers = Headers()
        assert headers._headers == {}
        assert len(headers) == 0

    def test_init_with_dict(self):
        """Test Headers initialization with string dictionary."""
        headers = Headers({"Location": "/next", "Accept": "text/html"})
        assert headers._headers == {
            "location": ["/next"],
            "accept": ["text/html"],
        }

    def test_init_with_lists(self):
        """Test Headers initialization with list dictionary."""
        headers = Headers({"Accept": ["text/html", "application/json"]})
        assert headers._headers == {"accept": ["text/html", "application/json"]}

    def test_case_insensitive_lookup(self):
        """Test that lookups ignore case."""
        headers = Headers({"Location": "/next"})
        assert headers["LOCATION"] == "/next"
        assert headers.get("location") == "/next"
        assert "LoCaTiOn" in headers
        assert headers.has("location")

    def test_get_duplicate_headers_joined(self):
        """Test that get() joins duplicates with commas."""
        headers = Headers({"Accept": ["text/html", "application/json"]})
        assert headers.get("Accept") == "text/html, application/json"

    def test_get_default(self):
        """Test get() returns the default for a missing header."""
        assert Headers().get("Location", "") == ""
        assert Headers().get("Location") is None

    def test_get_all(self):
        """Test get_all() returns all values."""
        headers = Headers({"Accept": ["a", "b"]})
        assert headers.get_all("accept") == ["a", "b"]
        assert headers.get_all("Non-Existent") == []

    def test_getitem_raises_keyerror(self):
        """Test __getitem__ raises KeyError for missing header."""
        headers = Headers()
        with pytest.raises(KeyError):
            _ = headers["Missing"]

    def test_set_replaces(self):
        """Test set() and item assignment replace all values."""
        headers = Headers({"Accept": ["a", "b"]})
        headers.set("ACCEPT", "c")
        assert headers.get_all("accept") == ["c"]
        headers["Accept"] = "d"
        assert headers["accept"] == "d"

    def test_add_appends(self):
        """Test add() keeps existing values."""
        headers = Headers({"Vary": "Accept"})
        headers.add("vary", "Cookie")
        assert headers["Vary"] == "Accept, Cookie"

    def test_delete(self):
        """Test deleting a header ignores case."""
        headers = Headers({"Location": "/next"})
        del headers["LOCATION"]
        assert "Location" not in headers

    def test_contains_non_string(self):
        """Test membership of non-string keys."""
        assert 1 not in Headers({"A": "1"})

    def test_copy_is_independent(self):
        """Test copy() does not share value lists."""
        headers = Headers({"Vary": "Accept"})
        copied = headers.copy()
        copied.add("Vary", "Cookie")
        assert headers.get_all("Vary") == ["Accept"]
        assert copied.get_all("Vary") == ["Accept", "Cookie"]

    def test_iteration(self):
        """Test iteration over headers."""
        headers = Headers({"A": "1", "B": "2"})
        assert list(headers) == ["a", "b"]
        assert len(headers) == 2

    def test_repr(self):
        """Test repr() shows stored values."""
        assert repr(Headers({"A": "1"})) == "Headers({'a': ['1']})"
