import math
import random
from typing import Tuple

from modring.euclid import ExtendedEuclideanView


def is_unit(val: int, N: int) -> bool:
    """Checks if val is a unit in Z/N."""
    a, b = val, N
    while b:
        a, b = b, a % b
    return a == 1


def random_coprime_pair(low: int, high: int) -> Tuple[int, int]:
    """Draw (x, y) with low <= |x|, |y| <= high, gcd 1 and random signs."""
    while True:
        x = random.randint(low, high)
        y = random.randint(low, high)
        if math.gcd(x, y) == 1:
            return x * random.choice((1, -1)), y * random.choice((1, -1))


def lame_bound(smaller: int) -> int:
    """Upper bound on Euclidean division steps for a divisor of this size.

    Lamé: the step count never exceeds five times the number of decimal
    digits of the smaller operand.
    """
    return 5 * len(str(abs(smaller)))


def check_view_rows(view: ExtendedEuclideanView) -> None:
    """Row-by-row version of ``view.verify`` with readable failures."""
    for x, y, q, r in view.down.tolist():
        assert x == y * q + r, f"down row {[x, y, q, r]} breaks x = y*q + r"
        assert 0 <= r < y
    for x, a, y, b in view.up.tolist():
        assert x * a + y * b == 1, f"up row {[x, a, y, b]} breaks x*a + y*b = 1"

    # Consecutive down rows chain divisor -> dividend, remainder -> divisor.
    for prev, cur in zip(view.down.tolist(), view.down.tolist()[1:]):
        assert cur[0] == prev[1] and cur[1] == prev[3]
    assert view.down[-1, 3] == 1
    assert len(view.up) == len(view.down)
