"""A growable container of primes backed by a sieve of Eratosthenes."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from math import isqrt, log

__all__ = ["NaiveBuffer", "nth_prime_upper_bound"]

# Sieve the odd numbers in [current, sieve_limit) up to this bound at start-up.
_INITIAL_NEXT = 8163  # all primes below this are held initially (8161 is the 1024th)
_CLEARED_COUNT = 16
_CLEARED_NEXT = 55  # the 16th prime is 53

_SMALL_NTH_PRIMES = (2, 3, 5, 7, 11)


def nth_prime_upper_bound(n: int) -> int:
    """Return an integer not smaller than the n-th prime (n counts from 1)."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n <= len(_SMALL_NTH_PRIMES):
        return _SMALL_NTH_PRIMES[n - 1]
    # Rosser's theorem: p_n < n (ln n + ln ln n) for n >= 6
    ln_n = log(n)
    return int(n * (ln_n + log(ln_n))) + 1


def _initial_primes() -> list[int]:
    sieve = bytearray([1]) * _INITIAL_NEXT
    sieve[0:2] = b"\x00\x00"
    for p in range(2, isqrt(_INITIAL_NEXT - 1) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, _INITIAL_NEXT, p)))
    return [i for i, flag in enumerate(sieve) if flag]


_SMALL_PRIMES = tuple(_initial_primes())


class NaiveBuffer:
    """Sorted list of all primes below an odd sieving frontier, extended on demand."""

    def __init__(self) -> None:
        self._list: list[int] = list(_SMALL_PRIMES)
        self._next = _INITIAL_NEXT  # every prime below this is in the list; always odd

    def __iter__(self) -> Iterator[int]:
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)

    def __contains__(self, num: object) -> bool:
        if not isinstance(num, int):
            return False
        return self.contains(num)

    def contains(self, num: int) -> bool:
        """Tell whether ``num`` is among the primes currently held."""
        pos = bisect_left(self._list, num)
        return pos < len(self._list) and self._list[pos] == num

    def clear(self) -> None:
        """Drop all but the first few primes."""
        del self._list[_CLEARED_COUNT:]
        self._next = _CLEARED_NEXT

    def bound(self) -> int:
        """Return the largest prime currently held."""
        return self._list[-1]

    def reserve(self, limit: int) -> None:
        """Make sure every prime up to ``limit`` is held."""
        sieve_limit = (limit | 1) + 2  # odd and larger than limit
        current = self._next
        if sieve_limit < current:
            return

        size = (sieve_limit - current) // 2
        composite = bytearray(size)

        def mark(start: int, p: int) -> None:
            first = (start - current) // 2
            if first < size:
                composite[first::p] = b"\x01" * len(range(first, size, p))

        # filter with the primes already known, skipping 2
        for p in self._list[1:]:
            square = p * p
            if square >= sieve_limit:
                break
            if square < current:
                start = p * ((current // p) | 1)  # an odd multiple
                if start < current:
                    start += 2 * p
            else:
                start = square
            mark(start, p)

        # sieve with the primes found inside the new range
        for p in range(current, isqrt(sieve_limit) + 1, 2):
            if not composite[(p - current) // 2]:
                mark(p * p, p)

        self._list.extend(
            current + 2 * i for i, flag in enumerate(composite) if not flag
        )
        self._next = sieve_limit

    def primes(self, limit: int) -> list[int]:
        """Return all primes up to and including ``limit``, sorted."""
        self.reserve(limit)
        return self._list[: bisect_right(self._list, limit)]

    def nprimes(self, count: int) -> list[int]:
        """Return the first ``count`` primes, sorted."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return []
        self.reserve(nth_prime_upper_bound(count))
        return self._list[:count]