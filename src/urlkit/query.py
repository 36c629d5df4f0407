"""Query string parsing and serialization."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Mapping, Union

from urlkit.encoding import decode_query_key, decode_query_value, encode_query_key, encode_query_value

ParsedQuery = Dict[str, Union[str, List[str]]]

_PARAMETER_RE = re.compile(r"([^=]+)=?(.*)")


def parse_query(parameters: str = "") -> ParsedQuery:
    """Parse a query string into a mapping.

    A leading ``?`` is ignored. Keys seen more than once collect their values
    in a list; keys without ``=`` map to an empty string.
    """
    result: ParsedQuery = {}
    if parameters.startswith("?"):
        parameters = parameters[1:]

    for parameter in parameters.split("&"):
        match = _PARAMETER_RE.search(parameter)
        if not match:
            continue
        key = decode_query_key(match.group(1))
        value = decode_query_value(match.group(2) or "")

        existing = result.get(key)
        if existing is None:
            result[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            result[key] = [existing, value]

    return result


def encode_query_item(key: str, value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        # 1.0 -> "1"
        value = str(int(value))
    elif isinstance(value, (bool, int, float)):
        value = json.dumps(value)

    if value is None or value == "":
        return encode_query_key(key)

    if isinstance(value, (list, tuple)):
        return "&".join(f"{encode_query_key(key)}={encode_query_value(item)}" for item in value)

    return f"{encode_query_key(key)}={encode_query_value(value)}"


def stringify_query(query: Mapping[str, Any]) -> str:
    """Serialize a mapping into a query string without the leading ``?``."""
    items = (encode_query_item(key, value) for key, value in query.items())
    return "&".join(item for item in items if item)


__all__ = ["ParsedQuery", "encode_query_item", "parse_query", "stringify_query"]
