"""Chinese capital-numeral and RMB amount conversion helpers."""

from .check import is_decimal, is_integer, is_money, is_null, is_number
from .errors import EmptyNumeralError, MalformedNumeralError, NumeralError, NumeralOutOfRangeError
from .money import fen_to_yuan, yuan_to_fen
from .numeral import Numeral, currency_to_cn, number_to_cn, parse_numeral

__all__ = [
    "EmptyNumeralError",
    "MalformedNumeralError",
    "Numeral",
    "NumeralError",
    "NumeralOutOfRangeError",
    "currency_to_cn",
    "fen_to_yuan",
    "is_decimal",
    "is_integer",
    "is_money",
    "is_null",
    "is_number",
    "number_to_cn",
    "parse_numeral",
    "yuan_to_fen",
]
