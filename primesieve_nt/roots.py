"""Integer roots and exact perfect-power detection."""

from __future__ import annotations

from math import isqrt

__all__ = ["nth_root", "nth_root_exact", "sqrt_exact", "cbrt_exact"]


def _residues(modulus: int, power: int) -> frozenset[int]:
    return frozenset(pow(i, power, modulus) for i in range(modulus))


# Moduli used to reject non-squares and non-cubes cheaply before root extraction.
_QUAD_FILTERS = tuple((m, _residues(m, 2)) for m in (63, 65, 11))
_CUBIC_FILTERS = tuple((m, _residues(m, 3)) for m in (63, 13, 19, 37))


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def nth_root(n: int, k: int) -> int:
    """Return the integer k-th root of ``n``, rounded toward zero.

    Raises ValueError for ``k < 1`` or for an even root of a negative number.
    """
    if k < 1:
        raise ValueError("root degree must be at least 1")
    if n < 0:
        if k % 2 == 0:
            raise ValueError("even root of a negative number")
        return -nth_root(-n, k)
    if k == 1 or n < 2:
        return n
    if k == 2:
        return isqrt(n)
    if k >= n.bit_length():
        return 1

    x = 1 << -(-n.bit_length() // k)  # an upper bound of the root
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def nth_root_exact(n: int, k: int) -> int | None:
    """Return the k-th root of ``n`` if ``n`` is a perfect k-th power, else None."""
    if k < 1:
        raise ValueError("root degree must be at least 1")
    if n < 0 and k % 2 == 0:
        return None
    root = nth_root(n, k)
    return root if root**k == n else None


def sqrt_exact(n: int) -> int | None:
    """Return the square root of ``n`` if it is a perfect square, else None."""
    if n < 0:
        return None
    if n == 0:
        return 0

    # every square has the form 2^(2m) * (8N + 1)
    shift = _trailing_zeros(n)
    if shift & 1:
        return None
    if (n >> shift) & 7 != 1:
        return None

    if any(n % m not in residues for m, residues in _QUAD_FILTERS):
        return None

    root = isqrt(n)
    return root if root * root == n else None


def cbrt_exact(n: int) -> int | None:
    """Return the cube root of ``n`` if it is a perfect cube, else None."""
    if n == 0:
        return 0
    magnitude = abs(n)

    if _trailing_zeros(magnitude) % 3:
        return None
    if any(magnitude % m not in residues for m, residues in _CUBIC_FILTERS):
        return None

    root = nth_root(magnitude, 3)
    if root**3 != magnitude:
        return None
    return -root if n < 0 else root