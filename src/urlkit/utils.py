"""Slash, base, join and comparison helpers for URLs and paths."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, List, Mapping

from urlkit.encoding import decode, decode_path, encode_hash, encode_host, encode_path
from urlkit.parse import parse_url, stringify_parsed_url
from urlkit.protocol import has_protocol
from urlkit.query import ParsedQuery, parse_query, stringify_query

TRAILING_SLASH_RE = re.compile(r"/$|/\?|/#")
JOIN_LEADING_SLASH_RE = re.compile(r"^\.?/")
JOIN_SEGMENT_SPLIT_RE = re.compile(r"/(?!/)")
DOUBLE_SLASHES_RE = re.compile(r"/{2,}")


def is_relative(input_string: str) -> bool:
    return input_string.startswith(("./", "../"))


def has_trailing_slash(input_string: str = "", respect_query_and_fragment: bool = False) -> bool:
    if not respect_query_and_fragment:
        return input_string.endswith("/")
    return bool(TRAILING_SLASH_RE.search(input_string))


def _split_fragment(input_string: str) -> tuple[str, str]:
    index = input_string.find("#")
    if index < 0:
        return input_string, ""
    return input_string[:index], input_string[index:]


def without_trailing_slash(input_string: str = "", respect_query_and_fragment: bool = False) -> str:
    """Remove a trailing slash, keeping at least ``/``.

    With ``respect_query_and_fragment`` the slash is looked for at the end of
    the path, before any ``?query`` or ``#fragment``.
    """
    if not respect_query_and_fragment:
        return (input_string[:-1] if has_trailing_slash(input_string) else input_string) or "/"
    if not has_trailing_slash(input_string, True):
        return input_string or "/"
    path, fragment = _split_fragment(input_string)
    head, *rest = path.split("?")
    clean_path = head[:-1] if head.endswith("/") else head
    return (clean_path or "/") + (f"?{'?'.join(rest)}" if rest else "") + fragment


def with_trailing_slash(input_string: str = "", respect_query_and_fragment: bool = False) -> str:
    if not respect_query_and_fragment:
        return input_string if input_string.endswith("/") else input_string + "/"
    if has_trailing_slash(input_string, True):
        return input_string or "/"
    path, fragment = _split_fragment(input_string)
    if fragment and not path:
        return fragment
    head, *rest = path.split("?")
    return head + "/" + (f"?{'?'.join(rest)}" if rest else "") + fragment


def has_leading_slash(input_string: str = "") -> bool:
    return input_string.startswith("/")


def without_leading_slash(input_string: str = "") -> str:
    return (input_string[1:] if has_leading_slash(input_string) else input_string) or "/"


def with_leading_slash(input_string: str = "") -> str:
    return input_string if has_leading_slash(input_string) else "/" + input_string


def clean_double_slashes(input_string: str = "") -> str:
    """Collapse repeated slashes everywhere except in ``://``."""
    return "://".join(DOUBLE_SLASHES_RE.sub("/", part) for part in input_string.split("://"))


def is_empty_url(url: str) -> bool:
    return not url or url == "/"


def is_non_empty_url(url: str) -> bool:
    return bool(url) and url != "/"


def with_base(input_string: str, base: str) -> str:
    if is_empty_url(base) or has_protocol(input_string):
        return input_string
    base = without_trailing_slash(base)
    if input_string.startswith(base):
        return input_string
    return join_url(base, input_string)


def without_base(input_string: str, base: str) -> str:
    if is_empty_url(base):
        return input_string
    base = without_trailing_slash(base)
    if not input_string.startswith(base):
        return input_string
    trimmed = input_string[len(base):]
    return trimmed if trimmed.startswith("/") else "/" + trimmed


def with_query(input_string: str, query: Mapping[str, Any]) -> str:
    """Merge ``query`` into the query string of ``input_string``."""
    parsed = parse_url(input_string)
    merged = {**parse_query(parsed.search), **query}
    parsed.search = stringify_query(merged)
    return stringify_parsed_url(parsed)


def get_query(input_string: str) -> ParsedQuery:
    return parse_query(parse_url(input_string).search)


def join_url(base: str, *segments: str) -> str:
    url = base or ""
    for segment in segments:
        if not is_non_empty_url(segment):
            continue
        if url:
            url = with_trailing_slash(url) + JOIN_LEADING_SLASH_RE.sub("", segment, count=1)
        else:
            url = segment
    return url


def join_relative_url(*inputs: str) -> str:
    """Join segments, resolving ``./`` and ``../`` along the way.

    A leading ``/`` or ``./`` on the first input and a trailing ``/`` on the
    last one are preserved; unresolved ``..`` segments become a ``../``
    prefix.
    """
    inputs = tuple(item for item in inputs if item)
    segments: List[str] = []
    depth = 0

    for item in inputs:
        if item == "/":
            continue
        for index, segment in enumerate(JOIN_SEGMENT_SPLIT_RE.split(item)):
            if not segment or segment == ".":
                continue
            if segment == "..":
                if len(segments) == 1 and has_protocol(segments[0]):
                    continue
                if segments:
                    segments.pop()
                depth -= 1
                continue
            if index == 1 and segments and segments[-1].endswith(":/"):
                segments[-1] += "/" + segment
                continue
            segments.append(segment)
            depth += 1

    url = "/".join(segments)

    if depth >= 0:
        if inputs and inputs[0].startswith("/") and not url.startswith("/"):
            url = "/" + url
        elif inputs and inputs[0].startswith("./") and not url.startswith("./"):
            url = "./" + url
    else:
        url = "../" * -depth + url

    if inputs and inputs[-1].endswith("/") and not url.endswith("/"):
        url += "/"

    return url


def normalize_url(input_string: str) -> str:
    """Re-encode every part of a URL consistently.

    The path, hash and query are decoded and encoded again, and the host is
    converted to its ASCII form so that IDN hosts come out as ``xn--`` labels.
    """
    parsed = parse_url(input_string)
    parsed.pathname = encode_path(decode_path(parsed.pathname))
    parsed.hash = encode_hash(decode(parsed.hash))
    parsed.host = encode_host(decode(parsed.host))
    parsed.search = stringify_query(parse_query(parsed.search))
    return stringify_parsed_url(parsed)


def resolve_url(base: str = "", *inputs: str) -> str:
    """Append path segments to ``base``, merging queries and replacing the hash."""
    if not isinstance(base, str):
        raise TypeError(f"URL input should be string received {type(base).__name__} ({base})")

    filtered = [item for item in inputs if is_non_empty_url(item)]
    if not filtered:
        return base

    url = parse_url(base)
    for item in filtered:
        segment = parse_url(item)
        if segment.pathname:
            url.pathname = with_trailing_slash(url.pathname) + without_leading_slash(segment.pathname)
        if segment.hash and segment.hash != "#":
            url.hash = segment.hash
        if segment.search and segment.search != "?":
            if url.search and url.search != "?":
                query_string = stringify_query({**parse_query(url.search), **parse_query(segment.search)})
                url.search = "?" + query_string if query_string else ""
            else:
                url.search = segment.search

    return stringify_parsed_url(url)


def is_same_path(first: str, second: str) -> bool:
    return decode(without_trailing_slash(first)) == decode(without_trailing_slash(second))


def is_equal(
    first: str,
    second: str,
    *,
    trailing_slash: bool = False,
    leading_slash: bool = False,
    encoding: bool = False,
) -> bool:
    """Compare two URLs, ignoring slash and encoding differences unless asked not to."""
    if not trailing_slash:
        first = with_trailing_slash(first)
        second = with_trailing_slash(second)
    if not leading_slash:
        first = with_leading_slash(first)
        second = with_leading_slash(second)
    if not encoding:
        first = decode(first)
        second = decode(second)
    return first == second


def with_fragment(input_string: str, hash_: str) -> str:
    if not hash_ or hash_ == "#":
        return input_string
    parsed = parse_url(input_string)
    parsed.hash = "#" + encode_hash(hash_)
    return stringify_parsed_url(parsed)


def without_fragment(input_string: str) -> str:
    return stringify_parsed_url(replace(parse_url(input_string), hash=""))


def without_host(input_string: str) -> str:
    parsed = parse_url(input_string)
    return (parsed.pathname or "/") + parsed.search + parsed.hash


__all__ = [
    "clean_double_slashes",
    "get_query",
    "has_leading_slash",
    "has_trailing_slash",
    "is_empty_url",
    "is_equal",
    "is_non_empty_url",
    "is_relative",
    "is_same_path",
    "join_relative_url",
    "join_url",
    "normalize_url",
    "resolve_url",
    "with_base",
    "with_fragment",
    "with_leading_slash",
    "with_query",
    "with_trailing_slash",
    "without_base",
    "without_fragment",
    "without_host",
    "without_leading_slash",
    "without_trailing_slash",
]
