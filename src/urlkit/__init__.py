"""urlkit: URL parsing, encoding and IDN host conversion."""

from .canonical import canonicalize_url
from .config import HostLimits, UrlkitConfig, load_app_config
from .encoding import (
    HostnameLengthError,
    check_host_limits,
    decode,
    decode_path,
    decode_query_key,
    decode_query_value,
    encode,
    encode_hash,
    encode_host,
    encode_param,
    encode_path,
    encode_query_key,
    encode_query_value,
)
from .parse import (
    ParsedAuth,
    ParsedHost,
    ParsedURL,
    parse_auth,
    parse_filename,
    parse_host,
    parse_path,
    parse_url,
    stringify_parsed_url,
)
from .protocol import has_protocol, is_script_protocol, with_http, with_https, with_protocol, without_protocol
from .punycode import PunycodeOverflowError, encode_label, join_labels, split_domain, to_ascii
from .query import encode_query_item, parse_query, stringify_query
from .url import URL, create_url
from .utils import (
    clean_double_slashes,
    get_query,
    has_leading_slash,
    has_trailing_slash,
    is_empty_url,
    is_equal,
    is_non_empty_url,
    is_relative,
    is_same_path,
    join_relative_url,
    join_url,
    normalize_url,
    resolve_url,
    with_base,
    with_fragment,
    with_leading_slash,
    with_query,
    with_trailing_slash,
    without_base,
    without_fragment,
    without_host,
    without_leading_slash,
    without_trailing_slash,
)

__version__ = "0.1.0"

__all__ = [
    "URL",
    "HostLimits",
    "HostnameLengthError",
    "ParsedAuth",
    "ParsedHost",
    "ParsedURL",
    "PunycodeOverflowError",
    "UrlkitConfig",
    "canonicalize_url",
    "check_host_limits",
    "clean_double_slashes",
    "create_url",
    "decode",
    "decode_path",
    "decode_query_key",
    "decode_query_value",
    "encode",
    "encode_hash",
    "encode_host",
    "encode_label",
    "encode_param",
    "encode_path",
    "encode_query_item",
    "encode_query_key",
    "encode_query_value",
    "get_query",
    "has_leading_slash",
    "has_protocol",
    "has_trailing_slash",
    "is_empty_url",
    "is_equal",
    "is_non_empty_url",
    "is_relative",
    "is_same_path",
    "is_script_protocol",
    "join_labels",
    "join_relative_url",
    "join_url",
    "load_app_config",
    "normalize_url",
    "parse_auth",
    "parse_filename",
    "parse_host",
    "parse_path",
    "parse_query",
    "parse_url",
    "resolve_url",
    "split_domain",
    "stringify_parsed_url",
    "stringify_query",
    "to_ascii",
    "with_base",
    "with_fragment",
    "with_http",
    "with_https",
    "with_leading_slash",
    "with_protocol",
    "with_query",
    "with_trailing_slash",
    "without_base",
    "without_fragment",
    "without_host",
    "without_leading_slash",
    "without_protocol",
    "without_trailing_slash",
]
