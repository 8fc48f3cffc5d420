from __future__ import annotations

from loguru import logger

from .check import is_number

# Cent <-> yuan conversion on the decimal text itself, so large amounts never
# pass through float arithmetic.


def _split_sign(s: str) -> tuple[str, str]:
    if s.startswith("-"):
        return "-", s[1:]
    return "", s


def _is_empty(value: object) -> bool:
    return value is None or value == ""


def fen_to_yuan(value: object, empty_format: str = "0.00", *, cut_zero: bool = False) -> str:
    """
    Cents -> yuan with two decimals (trailing zeros dropped with `cut_zero`).

    - fen_to_yuan(2000) -> "20.00"
    - fen_to_yuan("2000.45") -> "20.00"  (fractional cents are dropped)
    - fen_to_yuan(None) -> "0.00", fen_to_yuan(None, "--") -> "--"
    - fen_to_yuan(".2") -> "", fen_to_yuan("null") -> ""
    - fen_to_yuan(2000, cut_zero=True) -> "20"
    """
    if _is_empty(value):
        return empty_format
    if not is_number(value):
        logger.debug(f"fen_to_yuan: not a number: {value!r}")
        return ""

    sign, s = _split_sign(str(value))
    s = s.split(".", 1)[0].rjust(3, "0")
    out = f"{s[:-2]}.{s[-2:]}"
    if cut_zero:
        out = out.rstrip("0").rstrip(".")
    return sign + out


def yuan_to_fen(value: object, empty_format: str = "0") -> str:
    """
    Yuan -> cents as an integer string.

    - yuan_to_fen("10.0201") -> "1002"  (digits past the cent are dropped)
    - yuan_to_fen("0.1") -> "10"
    - yuan_to_fen("-0") -> "-0"
    - yuan_to_fen(None, "--") -> "--"
    """
    if _is_empty(value):
        return empty_format
    if not is_number(value):
        logger.debug(f"yuan_to_fen: not a number: {value!r}")
        return ""

    sign, s = _split_sign(str(value))
    integer, _, fraction = s.partition(".")
    cents = (integer + (fraction + "00")[:2]).lstrip("0") or "0"
    return sign + cents
