from .euclid import (
    Bezout,
    ExtendedEuclideanView,
    NotCoprime,
    extended_euclidean,
    modular_inverse,
)
from .ring import (
    BoundedRing,
    BoundedRingElement,
    Ring,
    RingElement,
    RingMismatchError,
)

__all__ = [
    "Bezout",
    "BoundedRing",
    "BoundedRingElement",
    "ExtendedEuclideanView",
    "NotCoprime",
    "Ring",
    "RingElement",
    "RingMismatchError",
    "extended_euclidean",
    "modular_inverse",
]
