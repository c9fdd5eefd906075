from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number) -> int:
    """
    Round to the nearest integer, ties away from zero for positive values.

    Built-in round() uses banker's rounding (round(10.5) == 10), which
    would shift scores and fine bounds sitting exactly on a .5 boundary.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
