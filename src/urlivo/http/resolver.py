"""src/urlivo/http/resolver.py

RFC 3986 reference resolution for Urlivo.

``resolve`` applies section 5.2 (Transform References) and ``relativize``
is its inverse: the shortest reference that resolves back to the target.
Both are pure functions over :class:`~urlivo.http.uri.Uri` values.
"""

import urllib.parse
from typing import List

from urlivo.http.uri import Uri

__all__ = ["remove_dot_segments", "resolve", "relativize"]


def remove_dot_segments(path: str) -> str:
    """
    Remove ``.`` and ``..`` segments from a path (RFC 3986 section 5.2.4).

    Args:
        path: The path to normalize.

    Returns:
        The path without dot segments. A leading slash is preserved and a
        trailing dot segment leaves a trailing slash behind.
    """
    if path in ("", "/"):
        return path

    segments = path.split("/")
    results: List[str] = []
    for segment in segments:
        if segment == "..":
            if results:
                results.pop()
        elif segment != ".":
            results.append(segment)

    new_path = "/".join(results)
    if path.startswith("/") and not new_path.startswith("/"):
        new_path = f"/{new_path}"
    elif new_path and segments[-1] in (".", ".."):
        new_path += "/"
    return new_path


def resolve(base: Uri, rel: Uri) -> Uri:
    """
    Resolve a reference against a base URI.

    Merging is done by :func:`urllib.parse.urljoin`. A reference with its
    own scheme is taken as the target, only its dot segments are removed.

    Args:
        base: The base URI.
        rel: The reference to resolve.

    Returns:
        The target URI. An empty reference yields the base itself.
    """
    if str(rel) == "":
        return base

    if rel.scheme != "":
        return rel.with_path(remove_dot_segments(rel.path))

    return Uri(urllib.parse.urljoin(str(base), str(rel)))


def _relative_path(base: Uri, target: Uri) -> str:
    source_segments = base.path.split("/")
    target_segments = target.path.split("/")
    source_segments.pop()
    target_last = target_segments.pop()

    common = 0
    for source, other in zip(source_segments, target_segments):
        if source != other:
            break
        common += 1

    remaining = target_segments[common:] + [target_last]
    relative_path = "../" * (len(source_segments) - common) + "/".join(remaining)

    # A colon in the first segment would be read as a scheme, and an
    # empty path would mean "the base itself".
    if relative_path == "" or ":" in relative_path.split("/", 1)[0]:
        relative_path = f"./{relative_path}"
    elif relative_path.startswith("/"):
        if base.authority != "" and base.path == "":
            relative_path = f".{relative_path}"
        else:
            relative_path = f"./{relative_path}"
    return relative_path


def relativize(base: Uri, target: Uri) -> Uri:
    """
    Compute the shortest reference that resolves to ``target`` against ``base``.

    Args:
        base: The base URI.
        target: The URI to express relative to the base.

    Returns:
        A reference ``r`` such that ``resolve(base, r) == target``. The target
        is returned unchanged when no shorter reference exists.
    """
    if target.scheme != "" and (
        base.scheme != target.scheme
        or (target.authority == "" and base.authority != "")
    ):
        return target

    if target.is_relative_path_reference():
        # already relative; resolving it again would not round-trip
        return target

    if target.authority != "" and base.authority != target.authority:
        return target.with_scheme("")

    # Same scheme and authority, so only path, query and fragment remain.
    empty_path_uri = Uri.from_parts(query=target.query, fragment=target.fragment)

    if base.path != target.path:
        return empty_path_uri.with_path(_relative_path(base, target))

    if base.query == target.query:
        return empty_path_uri.with_query("")

    if target.query == "":
        last_segment = target.path.split("/")[-1]
        if last_segment == "" or ":" in last_segment:
            last_segment = f"./{last_segment}"
        return empty_path_uri.with_path(last_segment)

    return empty_path_uri
