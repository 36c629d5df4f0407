"""Mutable URL object built on top of the functional helpers."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple
from urllib.parse import quote

from urlkit.encoding import decode, decode_path, encode_hash, encode_host, encode_path
from urlkit.parse import parse_auth, parse_host, parse_url
from urlkit.query import parse_query, stringify_query
from urlkit.utils import with_trailing_slash, without_leading_slash

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~".
_COMPONENT_SAFE_CHARS = "!*'()"


class URL:
    """A parsed URL whose parts can be read and modified individually.

    The stored parts are decoded; ``href`` re-encodes them, turning IDN hosts
    into their ``xn--`` form.
    """

    def __init__(self, input_string: str = "") -> None:
        if not isinstance(input_string, str):
            raise TypeError(
                f"URL input should be string received {type(input_string).__name__} ({input_string})"
            )
        parsed = parse_url(input_string)
        self.protocol = decode(parsed.protocol)
        self.host = decode(parsed.host)
        self.auth = decode(parsed.auth)
        self.pathname = decode_path(parsed.pathname)
        self.query: Dict[str, Any] = parse_query(parsed.search)
        self.hash = decode(parsed.hash)

    @property
    def hostname(self) -> str:
        return parse_host(self.host).hostname

    @property
    def port(self) -> str:
        return parse_host(self.host).port or ""

    @property
    def username(self) -> str:
        return parse_auth(self.auth).username

    @property
    def password(self) -> str:
        return parse_auth(self.auth).password

    @property
    def has_protocol(self) -> bool:
        return bool(self.protocol)

    @property
    def is_absolute(self) -> bool:
        return self.has_protocol or self.pathname.startswith("/")

    @property
    def search(self) -> str:
        query_string = stringify_query(self.query)
        return "?" + query_string if query_string else ""

    @property
    def search_params(self) -> List[Tuple[str, str]]:
        """Query pairs in order, with repeated keys expanded."""
        pairs: List[Tuple[str, str]] = []
        for name, value in self.query.items():
            if isinstance(value, list):
                pairs.extend((name, item if isinstance(item, str) else json.dumps(item)) for item in value)
            else:
                pairs.append((name, value if isinstance(value, str) else json.dumps(value)))
        return pairs

    @property
    def origin(self) -> str:
        return (self.protocol + "//" if self.protocol else "") + encode_host(self.host)

    @property
    def fullpath(self) -> str:
        return encode_path(self.pathname) + self.search + encode_hash(self.hash)

    @property
    def encoded_auth(self) -> str:
        if not self.auth:
            return ""
        auth = parse_auth(self.auth)
        encoded = quote(auth.username, safe=_COMPONENT_SAFE_CHARS)
        if auth.password:
            encoded += ":" + quote(auth.password, safe=_COMPONENT_SAFE_CHARS)
        return encoded

    @property
    def href(self) -> str:
        auth = self.encoded_auth
        origin_with_auth = (
            (self.protocol + "//" if self.protocol else "")
            + (auth + "@" if auth else "")
            + encode_host(self.host)
        )
        if self.has_protocol and self.is_absolute:
            return origin_with_auth + self.fullpath
        return self.fullpath

    def append(self, url: "URL") -> None:
        """Append the path, query and hash of a protocol-less ``url``."""
        if url.has_protocol:
            raise ValueError("Cannot append a URL with protocol")
        self.query.update(url.query)
        if url.pathname:
            self.pathname = with_trailing_slash(self.pathname) + without_leading_slash(url.pathname)
        if url.hash:
            self.hash = url.hash

    def to_json(self) -> str:
        return self.href

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"URL({self.href!r})"


def create_url(input_string: str) -> URL:
    return URL(input_string)


__all__ = ["URL", "create_url"]
