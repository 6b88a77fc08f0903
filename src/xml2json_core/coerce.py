"""Scalar coercion: raw XML text → Boolean, Number or String."""

from __future__ import annotations

import logging
import math
import re
from typing import Callable

from .model import JBool, JNumber, JString, Value

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"-?[0-9]+")

# XML whitespace only; other Unicode spaces are content
XML_WHITESPACE = " \t\r\n"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_BOOLEANS = {"true": True, "false": False}


def _as_bool(token: str) -> Value | None:
    if token in _BOOLEANS:
        return JBool(_BOOLEANS[token])
    return None


def _as_number(token: str) -> Value | None:
    if not _NUMBER_RE.fullmatch(token):
        return None
    if _INT_RE.fullmatch(token):
        n = int(token)
        if _INT64_MIN <= n <= _INT64_MAX:
            return JNumber(n)
    v = float(token)
    if math.isinf(v):
        logger.debug("numeric literal %r overflows float, keeping as string", token)
        return None
    return JNumber(v)


# Tried in order; the first non-None result wins.
_ATTEMPTS: list[Callable[[str], Value | None]] = [_as_bool, _as_number]


def coerce_scalar(text: str) -> Value:
    """Convert raw text to the most specific scalar Value.

    - ``"true"`` / ``"false"`` → JBool
    - fully numeric text (sign, digits, fraction, exponent) → JNumber
    - everything else → JString of the original, untrimmed text

    Surrounding XML whitespace (space, tab, CR, LF) is ignored when matching
    booleans and numbers.
    """
    token = text.strip(XML_WHITESPACE)
    for attempt in _ATTEMPTS:
        value = attempt(token)
        if value is not None:
            return value
    return JString(text)
