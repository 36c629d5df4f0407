"""Percent-encoding helpers for the individual parts of a URL.

Each helper starts from ``encodeURI``-style escaping and then adjusts the
handful of characters that carry meaning inside that specific part: ``#``
and ``?`` inside a path, ``&`` and ``=`` inside a query, and so on. Hosts go
through the IDN encoder instead of percent-encoding.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional, Union
from urllib.parse import quote, unquote

from urlkit.config import HostLimits
from urlkit.punycode import to_ascii

# Characters left alone by encodeURI besides ASCII alphanumerics and "-_.~".
URI_SAFE_CHARS = ";,/?:@&=+$!*'()#"

HASH_RE = re.compile(r"#")
AMPERSAND_RE = re.compile(r"&")
SLASH_RE = re.compile(r"/")
EQUAL_RE = re.compile(r"=")
QUESTION_RE = re.compile(r"\?")
PLUS_RE = re.compile(r"\+")

ENC_CARET_RE = re.compile(r"%5e", re.IGNORECASE)
ENC_BACKTICK_RE = re.compile(r"%60", re.IGNORECASE)
ENC_CURLY_OPEN_RE = re.compile(r"%7b", re.IGNORECASE)
ENC_PIPE_RE = re.compile(r"%7c", re.IGNORECASE)
ENC_CURLY_CLOSE_RE = re.compile(r"%7d", re.IGNORECASE)
ENC_SPACE_RE = re.compile(r"%20", re.IGNORECASE)
ENC_SLASH_RE = re.compile(r"%2f", re.IGNORECASE)
ENC_ENC_SLASH_RE = re.compile(r"%252f", re.IGNORECASE)

_MALFORMED_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PORT_SUFFIX_RE = re.compile(r":[0-9]*$")


class HostnameLengthError(ValueError):
    """Raised when an encoded host exceeds the configured DNS limits."""


def encode(text: Union[str, int]) -> str:
    """Escape ``text`` the way ``encodeURI`` does, keeping ``|`` literal."""
    return ENC_PIPE_RE.sub("|", quote(str(text), safe=URI_SAFE_CHARS))


def encode_hash(text: str) -> str:
    encoded = encode(text)
    encoded = ENC_CURLY_OPEN_RE.sub("{", encoded)
    encoded = ENC_CURLY_CLOSE_RE.sub("}", encoded)
    return ENC_CARET_RE.sub("^", encoded)


def encode_query_value(value: Any) -> str:
    """Encode a query value; non-strings are serialized as compact JSON first."""
    if isinstance(value, float) and value.is_integer():
        value = str(int(value))
    text = value if isinstance(value, str) else json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    encoded = encode(text)
    encoded = PLUS_RE.sub("%2B", encoded)
    encoded = ENC_SPACE_RE.sub("+", encoded)
    encoded = HASH_RE.sub("%23", encoded)
    encoded = AMPERSAND_RE.sub("%26", encoded)
    encoded = ENC_BACKTICK_RE.sub("`", encoded)
    encoded = ENC_CARET_RE.sub("^", encoded)
    return SLASH_RE.sub("%2F", encoded)


def encode_query_key(text: Union[str, int]) -> str:
    return EQUAL_RE.sub("%3D", encode_query_value(text))


def encode_path(text: Union[str, int]) -> str:
    encoded = encode(text)
    encoded = HASH_RE.sub("%23", encoded)
    encoded = QUESTION_RE.sub("%3F", encoded)
    encoded = ENC_ENC_SLASH_RE.sub("%2F", encoded)
    encoded = AMPERSAND_RE.sub("%26", encoded)
    return PLUS_RE.sub("%2B", encoded)


def encode_param(text: Union[str, int]) -> str:
    """Encode a single path segment, escaping ``/`` as well."""
    return SLASH_RE.sub("%2F", encode_path(text))


def decode(text: Union[str, int] = "") -> str:
    """Percent-decode ``text``; malformed input is returned unchanged."""
    text = str(text)
    if _MALFORMED_ESCAPE_RE.search(text):
        return text
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        return text


def decode_path(text: str) -> str:
    # An escaped slash stays escaped so it is not confused with a separator.
    return decode(ENC_SLASH_RE.sub("%252F", text))


def decode_query_key(text: str) -> str:
    return decode(PLUS_RE.sub(" ", text))


def decode_query_value(text: str) -> str:
    return decode(PLUS_RE.sub(" ", text))


def check_host_limits(host: str, limits: HostLimits) -> str:
    """Validate an ASCII host against DNS label and name length ceilings."""
    hostname = _PORT_SUFFIX_RE.sub("", host.rpartition("@")[2])
    if hostname.endswith("."):
        hostname = hostname[:-1]
    if len(hostname) > limits.max_domain_length:
        raise HostnameLengthError(
            f"Host length {len(hostname)} exceeds maximum of {limits.max_domain_length} characters"
        )
    for label in hostname.split("."):
        if len(label) > limits.max_label_length:
            raise HostnameLengthError(
                f"Label '{label}' exceeds maximum of {limits.max_label_length} characters"
            )
    return host


def encode_host(name: str = "", *, limits: Optional[HostLimits] = None) -> str:
    """Encode a host for use in a URL, converting IDN labels to ``xn--`` form.

    >>> encode_host("例子.测试")
    'xn--fsqu00a.xn--0zwm56d'
    """
    host = to_ascii(name)
    if limits is not None and limits.enforce:
        check_host_limits(host, limits)
    return host


__all__ = [
    "HostnameLengthError",
    "check_host_limits",
    "decode",
    "decode_path",
    "decode_query_key",
    "decode_query_value",
    "encode",
    "encode_hash",
    "encode_host",
    "encode_param",
    "encode_path",
    "encode_query_key",
    "encode_query_value",
]
