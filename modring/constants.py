"""Numeric bounds shared by the ring and the Euclidean routines."""

# Bounded modular ring: 32-bit modulus, 64-bit raw values.
MODULUS_MIN = 1
MODULUS_MAX = (1 << 32) - 1
VALUE_MAX = (1 << 64) - 1

# Signed 64-bit inputs for extended_euclidean. The most negative value is
# excluded because its absolute value does not fit.
INT64_MAX = (1 << 63) - 1
INT64_MIN = -INT64_MAX
