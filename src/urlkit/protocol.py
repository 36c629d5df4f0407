"""Protocol detection and rewriting."""

from __future__ import annotations

import re
from typing import Optional

# A protocol followed by one or two slashes.
PROTOCOL_STRICT_RE = re.compile(r"^[\sA-Za-z0-9_\x00+.-]{2,}:([/\\]{1,2})")
PROTOCOL_RE = re.compile(r"^[\sA-Za-z0-9_\x00+.-]{2,}:([/\\]{2})?")
PROTOCOL_RELATIVE_RE = re.compile(r"^([/\\]\s*){2,}[^/\\]")
PROTOCOL_SCRIPT_RE = re.compile(r"^[\s\x00]*(blob|data|javascript|vbscript):$", re.IGNORECASE)
LEADING_SLASHES_RE = re.compile(r"^/{2,}")


def has_protocol(input_string: str, *, accept_relative: bool = False, strict: bool = False) -> bool:
    """Return whether ``input_string`` starts with a protocol.

    ``strict`` requires slashes after the colon. ``accept_relative`` also
    accepts protocol-relative input such as ``//example.com``.
    """
    if strict:
        return bool(PROTOCOL_STRICT_RE.match(input_string))
    if PROTOCOL_RE.match(input_string):
        return True
    return bool(accept_relative and PROTOCOL_RELATIVE_RE.match(input_string))


def is_script_protocol(protocol: Optional[str] = None) -> bool:
    """Return whether ``protocol`` is one of ``blob:``, ``data:``, ``javascript:`` or ``vbscript:``."""
    return bool(protocol) and bool(PROTOCOL_SCRIPT_RE.match(protocol))


def with_protocol(input_string: str, protocol: str) -> str:
    match = PROTOCOL_RE.match(input_string) or LEADING_SLASHES_RE.match(input_string)
    if not match:
        return protocol + input_string
    return protocol + input_string[match.end():]


def with_http(input_string: str) -> str:
    return with_protocol(input_string, "http://")


def with_https(input_string: str) -> str:
    return with_protocol(input_string, "https://")


def without_protocol(input_string: str) -> str:
    return with_protocol(input_string, "")


__all__ = [
    "has_protocol",
    "is_script_protocol",
    "with_http",
    "with_https",
    "with_protocol",
    "without_protocol",
]
