"""Extended Euclidean algorithm with a recorded trace.

``extended_euclidean`` works in two phases:

* the forward pass divides the larger magnitude by the smaller one until the
  remainder drops to ``1`` (coprime) or ``0`` (common factor), storing every
  division as a row ``[x, y, q, r]`` with ``x = y*q + r``;
* the backward pass back-substitutes through those rows, storing every
  intermediate identity as a row ``[x, a, y, b]`` with ``x*a + y*b = 1``.

Both traces are returned in an :class:`ExtendedEuclideanView` so callers can
audit how the Bézout coefficients were obtained. Non-coprime input is not an
error: it is reported through :class:`NotCoprime` carrying the gcd.
"""

import logging
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Tuple, Union

import numpy as np

from .constants import INT64_MAX, INT64_MIN

_logger = logging.getLogger(__name__)

Row = Tuple[int, int, int, int]


@dataclass(frozen=True, eq=False)
class ExtendedEuclideanView:
    """Forward (``down``) and backward (``up``) rows of one computation."""

    down: np.ndarray
    up: np.ndarray

    def __post_init__(self):
        for name in ("down", "up"):
            rows = np.array(getattr(self, name), dtype=np.int64).reshape(-1, 4)
            rows.setflags(write=False)
            object.__setattr__(self, name, rows)

    def verify(self) -> bool:
        """Check ``x = y*q + r`` on every down row and ``x*a + y*b = 1``
        on every up row."""
        # Products of 64-bit entries overflow int64; check on Python ints.
        down, up = self.down.astype(object), self.up.astype(object)
        forward = np.array_equal(down[:, 0], down[:, 1] * down[:, 2] + down[:, 3])
        backward = bool(np.all(up[:, 0] * up[:, 1] + up[:, 2] * up[:, 3] == 1))
        return forward and backward


@dataclass(frozen=True)
class Bezout:
    """Coprime inputs: ``a*x + b*y == 1``."""

    a: int
    b: int
    view: ExtendedEuclideanView = field(repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class NotCoprime:
    """Degenerate or non-coprime inputs, carrying their gcd."""

    gcd: int

    @property
    def ok(self) -> bool:
        return False


def _check_int64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(
            f"{name}={value} is outside [{INT64_MIN}, {INT64_MAX}]"
        )


def _substitute(row: Row, step: Row) -> Row:
    # row:  x*a + y*b = 1
    # step: z = x*d + y
    # =>    z*b + x*(a - b*d) = 1
    x, a, _, b = row
    z, _, d, _ = step
    return (z, b, x, a - b * d)


def extended_euclidean(x: int, y: int) -> Union[Bezout, NotCoprime]:
    """Compute Bézout coefficients for ``x`` and ``y``.

    Args:
        x: Signed 64-bit integer.
        y: Signed 64-bit integer.

    Returns:
        ``Bezout(a, b, view)`` with ``a*x + b*y == 1`` when ``x`` and ``y``
        are coprime and the smaller magnitude is at least 2. Otherwise
        ``NotCoprime(g)``: ``g`` is the larger magnitude when the smaller one
        is 0, ``1`` when the smaller one is 1, and ``gcd(x, y)`` when the
        forward pass ends on a zero remainder.

    Raises:
        TypeError: If an argument is not an integer.
        OverflowError: If an argument does not fit in a signed 64-bit
            integer with a representable absolute value.
    """
    _check_int64("x", x)
    _check_int64("y", y)
    x, y = int(x), int(y)

    abs_x, abs_y = abs(x), abs(y)
    swapped = abs_x < abs_y
    larger, smaller = (abs_y, abs_x) if swapped else (abs_x, abs_y)

    if smaller < 2:
        gcd = larger if smaller == 0 else smaller
        _logger.debug("extended_euclidean(%d, %d): degenerate, gcd=%d", x, y, gcd)
        return NotCoprime(gcd)

    down = []
    dividend, divisor = larger, smaller
    while divisor > 1:
        q, r = divmod(dividend, divisor)
        down.append((dividend, divisor, q, r))
        dividend, divisor = divisor, r

    if divisor == 0:
        _logger.debug(
            "extended_euclidean(%d, %d): not coprime, gcd=%d after %d steps",
            x, y, dividend, len(down),
        )
        return NotCoprime(dividend)

    # The last row reads x = y*q + 1, i.e. x*1 + y*(-q) = 1.
    last_x, last_y, last_q, _ = down[-1]
    seed = (last_x, 1, last_y, -last_q)
    up = list(accumulate(reversed(down[:-1]), _substitute, initial=seed))

    # The final row pairs (larger, smaller) with their coefficients.
    _, coef_larger, _, coef_smaller = up[-1]
    a, b = (coef_smaller, coef_larger) if swapped else (coef_larger, coef_smaller)
    if x < 0:
        a = -a
    if y < 0:
        b = -b

    return Bezout(a, b, ExtendedEuclideanView(np.array(down), np.array(up)))


def modular_inverse(value: int, modulus: int) -> int:
    """Return the inverse of ``value`` modulo ``modulus`` in ``[0, modulus)``.

    Raises:
        ValueError: If ``modulus`` is outside ``[1, INT64_MAX]`` or ``value``
            is not a unit modulo ``modulus``.
    """
    if not 1 <= modulus <= INT64_MAX:
        raise ValueError(f"Modulus {modulus} is outside [1, {INT64_MAX}]")

    residue = value % modulus
    result = extended_euclidean(residue, modulus)
    if result.ok:
        return result.a % modulus

    # Smaller operand 1: either residue == 1 or modulus == 1.
    if result.gcd == 1:
        return 1 % modulus

    _logger.debug("no inverse for %d mod %d (gcd %d)", value, modulus, result.gcd)
    raise ValueError(
        f"{value} is not invertible in Z/{modulus} (gcd {result.gcd})"
    )
