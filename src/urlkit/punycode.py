"""Punycode (RFC 3492) encoding of internationalized domain labels.

Only the Unicode -> ASCII direction is provided. A host or email address is
split into labels, every label holding a non-ASCII code point is encoded and
prefixed with ``xn--``, and the labels are joined back together.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Sequence, Tuple

_logger = logging.getLogger(__name__)

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 128
DELIMITER = "-"
ACE_PREFIX = "xn--"
MAX_INT = 2147483647

# Full stop, ideographic full stop, fullwidth full stop, halfwidth ideographic full stop.
LABEL_SEPARATORS: Tuple[str, ...] = (".", "。", "．", "｡")
_SEPARATOR_RE = re.compile("[" + "".join(LABEL_SEPARATORS) + "]")


class PunycodeOverflowError(OverflowError):
    """Raised when the delta accumulator would exceed 2**31 - 1."""


def _digit(value: int) -> str:
    # 0..25 -> a..z, 26..35 -> 0..9
    return chr(value + 22 + 75 * (value < 26))


def _threshold(k: int, bias: int) -> int:
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt(delta: int, numpoints: int, firsttime: bool) -> int:
    """Return the bias to use for the next variable-length integer."""
    delta = delta // DAMP if firsttime else delta >> 1
    delta += delta // numpoints
    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE
    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)


def encode_integer(q: int, bias: int) -> str:
    """Encode ``q`` as a generalized variable-length integer."""
    digits: List[str] = []
    k = BASE
    while True:
        t = _threshold(k, bias)
        if q < t:
            break
        digits.append(_digit(t + (q - t) % (BASE - t)))
        q = (q - t) // (BASE - t)
        k += BASE
    digits.append(_digit(q))
    return "".join(digits)


def _overflow(length: int) -> PunycodeOverflowError:
    _logger.debug("Punycode delta overflow while encoding a %d code point label", length)
    return PunycodeOverflowError("Overflow Error")


def punycode_encode(code_points: Sequence[int]) -> str:
    """Encode a sequence of code points, without the ``xn--`` prefix.

    Basic code points are copied first, followed by the delimiter when there
    are any, followed by one variable-length integer per non-basic code point.
    Raises :class:`PunycodeOverflowError` when the input is large enough to
    push the delta past the 32-bit signed ceiling.
    """
    total = len(code_points)
    output: List[str] = [chr(cp) for cp in code_points if cp < INITIAL_N]
    basic_count = len(output)
    handled = basic_count
    if basic_count:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    while handled < total:
        m = min(cp for cp in code_points if cp >= n)
        if m - n > (MAX_INT - delta) // (handled + 1):
            raise _overflow(total)
        delta += (m - n) * (handled + 1)
        n = m

        for cp in code_points:
            if cp < n:
                delta += 1
                if delta > MAX_INT:
                    raise _overflow(total)
            elif cp == n:
                output.append(encode_integer(delta, bias))
                bias = adapt(delta, handled + 1, handled == basic_count)
                delta = 0
                handled += 1

        delta += 1
        n += 1

    return "".join(output)


def encode_label(label: str) -> str:
    """Return the ACE form of ``label``, or ``label`` itself when it is ASCII."""
    code_points = [ord(char) for char in label]
    if all(cp < INITIAL_N for cp in code_points):
        return label
    return ACE_PREFIX + punycode_encode(code_points)


def split_domain(value: str) -> Tuple[str, List[str]]:
    """Split ``value`` into ``(local_part, labels)``.

    The local part keeps its trailing ``@`` and is empty when ``value`` has no
    ``@``. Any of the four dot variants separates labels.
    """
    local_part = ""
    domain = value
    parts = value.split("@")
    if len(parts) > 1:
        local_part = parts[0] + "@"
        domain = parts[1]
    return local_part, _SEPARATOR_RE.sub(".", domain).split(".")


def join_labels(local_part: str, labels: Iterable[str]) -> str:
    return local_part + ".".join(labels)


def to_ascii(value: str) -> str:
    """Convert a domain name or email address to its ASCII form.

    >>> to_ascii("münich.de")
    'xn--mnich-kva.de'
    """
    local_part, labels = split_domain(value)
    return join_labels(local_part, [encode_label(label) for label in labels])


__all__ = [
    "ACE_PREFIX",
    "LABEL_SEPARATORS",
    "PunycodeOverflowError",
    "adapt",
    "encode_integer",
    "encode_label",
    "join_labels",
    "punycode_encode",
    "split_domain",
    "to_ascii",
]
