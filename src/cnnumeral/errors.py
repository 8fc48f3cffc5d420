from __future__ import annotations


class NumeralError(ValueError):
    """Base class for numerals rejected by `parse_numeral`."""

    def __init__(self, value: object, message: str | None = None):
        super().__init__(message or f"invalid numeral: {value!r}")
        self.value = value


class EmptyNumeralError(NumeralError):
    """Raised for absent values and the null markers (`None`, "", "null", ...)."""

    def __init__(self, value: object):
        super().__init__(value, f"empty numeral: {value!r}")


class MalformedNumeralError(NumeralError):
    """Raised when the text is not a plain non-negative decimal numeral."""

    def __init__(self, value: object):
        super().__init__(value, f"malformed numeral: {value!r}")


class NumeralOutOfRangeError(NumeralError):
    def __init__(self, value: object, limit: int):
        super().__init__(value, f"numeral out of range (>= {limit}): {value!r}")
        self.limit = limit
