from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from loguru import logger

from .check import is_null
from .config import Settings
from .errors import (
    EmptyNumeralError,
    MalformedNumeralError,
    NumeralError,
    NumeralOutOfRangeError,
)

# Capital ("大写") numerals as used on cheques and invoices.
_DIGITS = "零壹贰叁肆伍陆柒捌玖"
_PLACES = ("", "拾", "佰", "仟")
_TIERS = ("", "万", "亿")

LIMIT = 10**12

DATA_ERROR = "数据错误"
NUMBER_TOO_LARGE = "超大数字"
AMOUNT_TOO_LARGE = "超大金额"

_NUMERAL_RE = re.compile(r"(\d+)(?:\.(\d+))?", re.ASCII)

_DEFAULT_SETTINGS = Settings()


@dataclass(frozen=True)
class Numeral:
    integer: str
    fraction: str = ""


def _numeral_text(value: object) -> str:
    # Python prints floats from 1e16 up (and below 1e-4) with an exponent.
    if isinstance(value, float):
        value = Decimal(repr(value))
    if isinstance(value, Decimal) and value.is_finite():
        return format(value, "f")
    return str(value)


def parse_numeral(value: object, *, limit: int = LIMIT) -> Numeral:
    """
    Validate a non-negative decimal numeral and split it into its parts.

    Accepts str/int/float/Decimal; floats and Decimals are written out in
    positional notation, anything else is coerced with `str()`. The text must
    match `\\d+(\\.\\d+)?` exactly, so signs, bare ".2", trailing garbage and
    scientific notation in strings ("1e+21") are all rejected.

    Raises:
        EmptyNumeralError: `None`, "" or a null marker ("null", "NaN", ...).
        MalformedNumeralError: anything else that is not a plain numeral.
        NumeralOutOfRangeError: integer part >= `limit`.
    """
    if is_null(value):
        raise EmptyNumeralError(value)
    if isinstance(value, bool):
        raise MalformedNumeralError(value)

    m = _NUMERAL_RE.fullmatch(_numeral_text(value))
    if m is None:
        raise MalformedNumeralError(value)

    integer = m.group(1).lstrip("0") or "0"
    if int(integer) >= limit:
        raise NumeralOutOfRangeError(value, limit)
    return Numeral(integer=integer, fraction=m.group(2) or "")


def _digits_to_cn(s: str) -> str:
    return "".join(_DIGITS[int(ch)] for ch in s)


def _integer_to_cn(integer: str) -> str:
    """Render a digit string (no leading zeros) with 拾佰仟 places and 万/亿 tiers."""
    if not integer.strip("0"):
        return _DIGITS[0]

    out: list[str] = []
    zeros = 0
    group_has_digit = False
    n = len(integer)
    for idx, ch in enumerate(integer):
        pos = n - 1 - idx
        place, tier = pos % 4, pos // 4
        d = int(ch)
        if d == 0:
            zeros += 1
        else:
            if zeros:
                out.append(_DIGITS[0])
            zeros = 0
            group_has_digit = True
            out.append(_DIGITS[d] + _PLACES[place])

        if place == 0:
            # A zero right before a tier word is swallowed by it: 108000 -> 壹拾万捌仟.
            if group_has_digit:
                out.append(_TIERS[tier])
                zeros = 0
            group_has_digit = False
    return "".join(out)


def _fraction_to_currency(fraction: str) -> str:
    jiao, fen = (fraction[:2] + "00")[:2]
    if jiao == "0" and fen == "0":
        return "整"
    out = _DIGITS[int(jiao)] + "角" if jiao != "0" else _DIGITS[0]
    if fen != "0":
        out += _DIGITS[int(fen)] + "分"
    return out


def number_to_cn(value: object = None) -> str:
    """
    Arabic numeral -> capital Chinese numeral text.

    - number_to_cn("10000800") -> "壹仟万零捌佰"
    - number_to_cn("0.01") -> "零点零壹"
    - number_to_cn("-12") -> "数据错误"
    - number_to_cn(10**12) -> "超大数字"

    Never raises for bad input; failures come back as sentinel strings.
    """
    try:
        num = parse_numeral(value)
    except NumeralOutOfRangeError as exc:
        logger.debug(f"number_to_cn: {exc}")
        return NUMBER_TOO_LARGE
    except NumeralError as exc:
        logger.debug(f"number_to_cn: {exc}")
        return DATA_ERROR

    text = _integer_to_cn(num.integer)
    if num.fraction:
        text += "点" + _digits_to_cn(num.fraction[:2])
    return text


def currency_to_cn(
    value: object = None,
    empty_format: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
) -> str:
    """
    Yuan amount -> RMB capital wording with 元/角/分/整.

    - currency_to_cn("1.01") -> "壹元零壹分"
    - currency_to_cn("0.10") -> "壹角"
    - currency_to_cn(None) -> "零元整" (or `empty_format` when given)

    Without `empty_format`, empty input falls back to `settings.empty_format`;
    the settings are loaded once at import unless passed in.

    Digits past the 分 place are ignored, not rounded.
    """
    try:
        num = parse_numeral(value)
    except EmptyNumeralError:
        if empty_format is not None:
            return empty_format
        return (settings or _DEFAULT_SETTINGS).empty_format
    except NumeralOutOfRangeError as exc:
        logger.debug(f"currency_to_cn: {exc}")
        return AMOUNT_TOO_LARGE
    except NumeralError as exc:
        logger.debug(f"currency_to_cn: {exc}")
        return DATA_ERROR

    fraction = _fraction_to_currency(num.fraction)
    if num.integer == "0" and fraction != "整":
        return fraction
    return _integer_to_cn(num.integer) + "元" + fraction
