from __future__ import annotations

import math
from decimal import (ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal,
                     localcontext)
from enum import IntEnum

from gamemath.logging import MathValueError
from gamemath.types import Number


class RoundingMode(IntEnum):
    """
    How ties (values exactly halfway between two candidates) are broken when rounding.
    The values match PHP's ``PHP_ROUND_*`` constants.
    """

    HALF_UP = 1
    """Ties are rounded away from zero."""
    HALF_DOWN = 2
    """Ties are rounded towards zero."""
    HALF_EVEN = 3
    """Ties are rounded to the nearest even digit (banker's rounding)."""
    HALF_ODD = 4
    """Ties are rounded to the nearest odd digit."""


def _quantize(value: Decimal, exp: Decimal, rounding: str) -> Decimal:
    with localcontext() as ctx:
        # enough digits for any double, so quantize never overflows the context
        ctx.prec = 400 + max(0, -exp.as_tuple().exponent)
        return value.quantize(exp, rounding=rounding)


def round_half(
    value: Number, precision: int = 0, mode: int = RoundingMode.HALF_UP
) -> float:
    """
    Rounds a number to a given amount of fractional digits, breaking ties as
    specified by ``mode``. Unlike the builtin :func:`round`, the default breaks
    ties away from zero, so ``round_half(2.5) == 3.0`` and ``round_half(1.25, 1) == 1.3``.

    The value is rounded from its shortest decimal representation, which makes
    ``round_half(1.005, 2) == 1.01`` even though the closest double to ``1.005`` is slightly below it.

    Args:
        value: The number to round. Infinities and NaN are returned unchanged.
        precision: Number of fractional digits to keep. Negative values round to tens, hundreds and so on.
        mode: One of the :class:`RoundingMode` members.

    Returns:
        The rounded value as a float.
    """
    try:
        mode = RoundingMode(mode)
    except ValueError:
        raise MathValueError(f"Unknown rounding mode: {mode}") from None

    if isinstance(value, float) and not math.isfinite(value):
        return value

    number = Decimal(str(value))
    exp = Decimal(1).scaleb(-precision)
    if mode == RoundingMode.HALF_UP:
        return float(_quantize(number, exp, ROUND_HALF_UP))
    if mode == RoundingMode.HALF_DOWN:
        return float(_quantize(number, exp, ROUND_HALF_DOWN))
    if mode == RoundingMode.HALF_EVEN:
        return float(_quantize(number, exp, ROUND_HALF_EVEN))

    up = _quantize(number, exp, ROUND_HALF_UP)
    down = _quantize(number, exp, ROUND_HALF_DOWN)
    if up == down:  # not a tie
        return float(up)
    even = _quantize(number, exp, ROUND_HALF_EVEN)
    return float(down if even == up else up)
