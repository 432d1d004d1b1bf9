from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering

import numpy as np

from .constants import MODULUS_MAX, MODULUS_MIN, VALUE_MAX
from .euclid import modular_inverse


class RingMismatchError(ValueError):
    """Raised when elements of two different rings are combined."""


class Ring(ABC):
    """A finite ring that hands out its own elements."""

    @property
    @abstractmethod
    def modulus(self) -> int:
        ...

    @abstractmethod
    def create_element(self, value: int) -> "RingElement":
        ...


class RingElement(ABC):
    """Arithmetic contract for elements of a :class:`Ring`."""

    @property
    @abstractmethod
    def ring(self) -> Ring:
        ...

    @property
    @abstractmethod
    def value(self) -> int:
        ...

    @abstractmethod
    def __add__(self, other): ...

    @abstractmethod
    def __sub__(self, other): ...

    @abstractmethod
    def __mul__(self, other): ...

    @abstractmethod
    def __mod__(self, other): ...

    @abstractmethod
    def __neg__(self): ...

    @abstractmethod
    def __lt__(self, other): ...


def _as_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


@dataclass(frozen=True)
class BoundedRing(Ring):
    """Z/MZ with a 32-bit modulus and 64-bit raw values."""

    _modulus: int

    def __post_init__(self):
        modulus = _as_int("modulus", self._modulus)
        if not MODULUS_MIN <= modulus <= MODULUS_MAX:
            raise ValueError(
                f"Modulus {modulus} is outside [{MODULUS_MIN}, {MODULUS_MAX}]"
            )
        object.__setattr__(self, "_modulus", modulus)

    @property
    def modulus(self) -> int:
        return self._modulus

    def create_element(self, value: int) -> "BoundedRingElement":
        # Stored verbatim; reduction happens on the first operation.
        return BoundedRingElement(self, value)

    def zero(self) -> "BoundedRingElement":
        return self.create_element(0)

    def one(self) -> "BoundedRingElement":
        return self.create_element(1 % self._modulus)

    def __str__(self) -> str:
        return f"Ring (mod {self._modulus})"

    def __repr__(self) -> str:
        return f"BoundedRing({self._modulus})"


@total_ordering
@dataclass(frozen=True, eq=False)
class BoundedRingElement(RingElement):
    _ring: BoundedRing
    _value: int

    def __post_init__(self):
        if not isinstance(self._ring, BoundedRing):
            raise TypeError(
                f"ring must be a BoundedRing, got {type(self._ring).__name__}"
            )
        value = _as_int("value", self._value)
        if not 0 <= value <= VALUE_MAX:
            raise ValueError(f"Value {value} is outside [0, {VALUE_MAX}]")
        object.__setattr__(self, "_value", value)

    @property
    def ring(self) -> BoundedRing:
        return self._ring

    @property
    def value(self) -> int:
        return self._value

    def _check_ring(self, other: "BoundedRingElement") -> None:
        if self._ring != other._ring:
            raise RingMismatchError(
                f"Ring operation failed, lhs ring: {self._ring}, "
                f"rhs ring: {other._ring}"
            )

    def _wrap(self, value: int) -> "BoundedRingElement":
        return BoundedRingElement(self._ring, value)

    def __add__(self, other):
        if not isinstance(other, BoundedRingElement):
            return NotImplemented
        self._check_ring(other)
        return self._wrap((self._value + other._value) % self._ring.modulus)

    def __sub__(self, other):
        if not isinstance(other, BoundedRingElement):
            return NotImplemented
        self._check_ring(other)
        return self._wrap((self._value - other._value) % self._ring.modulus)

    def __mul__(self, other):
        if not isinstance(other, BoundedRingElement):
            return NotImplemented
        self._check_ring(other)
        return self._wrap((self._value * other._value) % self._ring.modulus)

    def __mod__(self, other):
        # Plain remainder of the raw values, not reduced by the modulus.
        # No ring check: the result always lives in the left operand's ring.
        if not isinstance(other, BoundedRingElement):
            return NotImplemented
        return self._wrap(self._value % other._value)

    def __neg__(self):
        N = self._ring.modulus
        return self._wrap((N - self._value % N) % N)

    def __truediv__(self, other):
        if not isinstance(other, BoundedRingElement):
            return NotImplemented
        self._check_ring(other)
        return self * other.inverse()

    def inverse(self) -> "BoundedRingElement":
        """Multiplicative inverse; ``ValueError`` if not a unit."""
        return self._wrap(modular_inverse(self._value, self._ring.modulus))

    def reduced(self) -> "BoundedRingElement":
        return self._wrap(self._value % self._ring.modulus)

    # Ordering and equality look at the raw value only.
    def __eq__(self, other):
        if not isinstance(other, BoundedRingElement):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, BoundedRingElement):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BoundedRingElement({self._value}, mod={self._ring.modulus})"
