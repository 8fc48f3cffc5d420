from __future__ import annotations

import re

# Predicates for numeric strings. Every check takes any value and coerces it
# with `str()`; `None` never matches a numeric pattern.

NULL_MARKERS = frozenset({"", "undefined", "null", "(null)", "NaN"})

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"-?(?:\d|[1-9]\d+)", re.ASCII)
_DECIMAL_RE = re.compile(r"-?(?:\d|[1-9]\d+)\.\d+", re.ASCII)
_MONEY_RE = re.compile(r"-?(?:\d|[1-9]\d+)(?:\.\d{1,2})?", re.ASCII)


def _fullmatch(pattern: re.Pattern[str], value: object) -> bool:
    if value is None:
        return False
    return pattern.fullmatch(str(value)) is not None


def is_null(value: object) -> bool:
    """True for `None`, "" and the textual null markers ("null", "NaN", ...)."""
    if value is None:
        return True
    return isinstance(value, str) and value in NULL_MARKERS


def is_number(value: object) -> bool:
    """
    Signed decimal numeral check.

    - is_number("20") -> True
    - is_number("-20") -> True
    - is_number(".2") -> False
    """
    return _fullmatch(_NUMBER_RE, value)


def is_integer(value: object) -> bool:
    """Signed integer without leading zeros ("020" is rejected)."""
    return _fullmatch(_INTEGER_RE, value)


def is_decimal(value: object) -> bool:
    return _fullmatch(_DECIMAL_RE, value)


def is_money(value: object) -> bool:
    """Yuan amount: signed numeral with at most two decimals ("20.002" is rejected)."""
    return _fullmatch(_MONEY_RE, value)
