"""tests/unit/test_version.py"""

import urlivo


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(urlivo.__version__, str)
    assert len(urlivo.__version__) > 0
    # Basic semver-ish check
    assert urlivo.__version__.count(".") >= 1


def test_public_api():
    """Verify the top-level package exports the main types."""
    url = urlivo.Url("example.com").set_port(8000)
    assert url.build("path") == "//example.com:8000/path"
    assert str(urlivo.UriBuilder("http://example.com/a/").build("b")) == "/a/b"
