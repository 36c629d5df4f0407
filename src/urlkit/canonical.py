"""URL canonicalization for deduplicating absolute http(s) URLs."""

from __future__ import annotations

import posixpath
import re
from typing import Iterable, List, Tuple

from urlkit.encoding import decode_path, encode_host, encode_path
from urlkit.parse import parse_host, parse_url
from urlkit.query import encode_query_item, parse_query

DEFAULT_ALLOWED_SCHEMES: Tuple[str, ...] = ("http", "https")
DEFAULT_PORTS = {"http": "80", "https": "443"}
IPV6_PORT_RE = re.compile(r":[0-9]*")


def canonicalize_url(url: str, *, allowed_schemes: Iterable[str] = DEFAULT_ALLOWED_SCHEMES) -> str:
    """Return a canonical form of ``url`` suitable as a dedupe key.

    Scheme and host are lower-cased, IDN hosts are converted to ``xn--``
    labels, default ports and the fragment are dropped, dot segments are
    removed and query pairs are sorted.
    """
    if not url:
        raise ValueError("URL must be non-empty")

    parsed = parse_url(url.strip())
    if not parsed.protocol:
        raise ValueError("URL must include a scheme")

    scheme = parsed.protocol[:-1].lower()
    allowed = tuple(s.lower() for s in allowed_schemes)
    if allowed and scheme not in allowed:
        raise ValueError(f"Scheme '{scheme}' not allowed")

    if not parsed.host:
        raise ValueError("URL must include a network location")

    netloc = _normalize_netloc(parsed.host, parsed.auth, scheme)
    path = _normalize_path(encode_path(decode_path(parsed.pathname)))
    query = _normalize_query(parsed.search)

    return f"{scheme}://{netloc}{path}" + (f"?{query}" if query else "")


def _split_ipv6(host_port: str) -> Tuple[str, str]:
    end = host_port.find("]")
    if end < 0:
        raise ValueError(f"Unterminated IPv6 address in '{host_port}'")
    rest = host_port[end + 1:]
    if rest and not IPV6_PORT_RE.fullmatch(rest):
        raise ValueError(f"Invalid port in '{host_port}'")
    return host_port[: end + 1].lower(), rest[1:]


def _normalize_netloc(host_port: str, userinfo: str, scheme: str) -> str:
    if host_port.startswith("["):
        host, port = _split_ipv6(host_port)
    else:
        parsed_host = parse_host(host_port)
        host = encode_host(parsed_host.hostname.lower().strip("."))
        port = parsed_host.port or ""

    if DEFAULT_PORTS.get(scheme) == port:
        port = ""

    host_port = host if not port else f"{host}:{port}"
    if userinfo:
        return f"{userinfo}@{host_port}"
    return host_port


def _normalize_path(path: str) -> str:
    if not path:
        return "/"

    has_trailing_slash = path.endswith("/")

    normalized = posixpath.normpath(path)
    if not normalized.startswith("/"):
        normalized = "/" + normalized

    if has_trailing_slash and not normalized.endswith("/"):
        normalized = normalized + "/"

    # normpath keeps exactly two leading slashes
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")

    return normalized


def _normalize_query(search: str) -> str:
    pairs: List[Tuple[str, str]] = []
    for key, value in parse_query(search).items():
        if isinstance(value, list):
            pairs.extend((key, item) for item in value)
        else:
            pairs.append((key, value))
    pairs.sort()
    return "&".join(encode_query_item(key, value) for key, value in pairs)


__all__ = ["canonicalize_url", "DEFAULT_ALLOWED_SCHEMES"]
