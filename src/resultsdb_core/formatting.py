# src/resultsdb_core/formatting.py
"""
Engineering-notation rendering of numbers for diagnostics and `str()` output.

The rendering is meant for humans and log files only. It is not a stable
serialization format and no parser for it is provided.
"""
import logging
import math
from decimal import Context, Decimal
from numbers import Real
from typing import Union

from .constants import FORMAT_SIGNIFICANT_DIGITS, PREFIX_ROUNDING_OFFSET, SI_PREFIXES

logger = logging.getLogger(__name__)

_DECIMAL64 = Context(prec=FORMAT_SIGNIFICANT_DIGITS)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _to_decimal(number: Union[Real, Decimal]) -> Decimal:
    if isinstance(number, Decimal):
        return _DECIMAL64.plus(number)
    return _DECIMAL64.create_decimal_from_float(float(number))


def format_eng(number: Union[Real, Decimal]) -> str:
    """
    Formats a number with an SI magnitude prefix, e.g. 1500 -> '1.5k', 2.2e-9 -> '2.2n'.

    The prefix exponent is 3 * round(log10(|n|) / 3 - 0.39), so values switch to
    the next prefix at roughly half of it (400 -> '400', 500 -> '0.5k'). Numbers
    whose exponent falls outside the y..Y range are returned in decimal
    engineering notation (e.g. '1E+30'). NaN and infinities render as 'nan',
    'inf' and '-inf'.
    """
    if isinstance(number, Decimal):
        if number.is_nan():
            return "nan"
        if number.is_infinite():
            return "-inf" if number.is_signed() else "inf"
    else:
        as_float = float(number)
        if math.isnan(as_float):
            return "nan"
        if math.isinf(as_float):
            return "inf" if as_float > 0 else "-inf"

    value = _to_decimal(number)
    if value.is_zero():
        return "0"

    prefix = 3 * _round_half_up(math.log10(abs(float(value))) / 3.0 - PREFIX_ROUNDING_OFFSET)
    if prefix not in SI_PREFIXES:
        return value.normalize().to_eng_string()

    mantissa = value.scaleb(-prefix).normalize()
    return f"{mantissa:f}{SI_PREFIXES[prefix]}"


def format_complex_eng(number: complex) -> str:
    """Formats a complex number as '<re> + j*<im>' with both parts in engineering notation."""
    return f"{format_eng(number.real)} + j*{format_eng(number.imag)}"
