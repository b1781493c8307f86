"""Prime counting, n-th prime and primorial on top of a prime buffer."""

from __future__ import annotations

from collections.abc import MutableMapping
from math import isqrt, log, prod

from .buffer import NaiveBuffer
from .roots import nth_root

__all__ = ["primorial", "nth_prime", "prime_phi", "prime_pi"]

# n-th primes up to this index are found by sieving directly
_NTH_PRIME_SIEVE_THRESHOLD = 4096
# prime_pi sieves directly up to this limit (the 4096th prime)
_PRIME_PI_SIEVE_THRESHOLD = 38873

_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def _is_prime(n: int) -> bool:
    """Miller-Rabin with a base set that is deterministic below 3.3 * 10^24."""
    if n < 2:
        return False
    for p in _MR_BASES:
        if n % p == 0:
            return n == p
    d = n - 1
    s = (d & -d).bit_length() - 1
    d >>= s
    for base in _MR_BASES:
        x = pow(base, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def _prev_prime(x: int) -> int:
    candidate = x - 1
    while candidate >= 2:
        if _is_prime(candidate):
            return candidate
        candidate -= 1
    raise ValueError(f"no prime below {x}")


def _next_prime(x: int) -> int:
    candidate = x + 1
    while not _is_prime(candidate):
        candidate += 1
    return candidate


def _nth_prime_estimate(n: int) -> int:
    """Cipolla's asymptotic estimate of the n-th prime, for large n."""
    ln_n = log(n)
    lnln_n = log(ln_n)
    return int(n * (ln_n + lnln_n - 1 + (lnln_n - 2) / ln_n))


def primorial(buffer: NaiveBuffer, n: int) -> int:
    """Return the product of the first ``n`` primes."""
    return prod(buffer.nprimes(n))


def nth_prime(buffer: NaiveBuffer, n: int) -> int:
    """Return the n-th prime, counting from 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n < len(buffer) or n <= _NTH_PRIME_SIEVE_THRESHOLD:
        return buffer.nprimes(n)[-1]

    # start from an estimate and walk to the exact prime
    x = _prev_prime(_nth_prime_estimate(n))
    pi = prime_pi(buffer, x)
    while pi > n:
        x = _prev_prime(x)
        pi -= 1
    while pi < n:
        x = _next_prime(x)
        pi += 1
    return x


def _phi(
    x: int,
    a: int,
    primes: list[int],
    cache: MutableMapping[tuple[int, int], int],
) -> int:
    if a == 1:
        return (x + 1) // 2
    if x == 0:
        return 0
    key = (x, a)
    cached = cache.get(key)
    if cached is not None:
        return cached
    value = _phi(x, a - 1, primes, cache) - _phi(x // primes[a - 1], a - 1, primes, cache)
    cache[key] = value
    return value


def prime_phi(
    buffer: NaiveBuffer,
    x: int,
    a: int,
    cache: MutableMapping[tuple[int, int], int],
) -> int:
    """Legendre's phi: count integers in [1, x] not divisible by any of the first ``a`` primes.

    Intermediate results are stored in ``cache``, keyed by ``(x, a)``.
    """
    if a < 1:
        raise ValueError("a must be at least 1")
    if x < 0:
        raise ValueError("x must not be negative")
    return _phi(x, a, buffer.nprimes(a), cache)


def prime_pi(buffer: NaiveBuffer, limit: int) -> int:
    """Return the number of primes not greater than ``limit``.

    Small limits are answered by sieving; large ones by the Meissel-Lehmer method.
    """
    if limit < 2:
        return 0
    if limit <= buffer.bound() or limit <= _PRIME_PI_SIEVE_THRESHOLD:
        return len(buffer.primes(limit))

    b = isqrt(limit)
    a = isqrt(b)
    c = nth_root(limit, 3)
    buffer.reserve(b)

    a = prime_pi(buffer, a)
    b = prime_pi(buffer, b)
    c = prime_pi(buffer, c)

    primes = buffer.nprimes(b)
    cache: dict[tuple[int, int], int] = {}
    total = _phi(limit, a, primes, cache) + (b + a - 2) * (b - a + 1) // 2
    for i in range(a + 1, b + 1):
        w = limit // primes[i - 1]
        total -= prime_pi(buffer, w)
        if i <= c:
            bi = prime_pi(buffer, isqrt(w))
            total += (bi * (bi - 1) - i * (i - 3)) // 2 - 1
            for j in range(i, bi + 1):
                total -= prime_pi(buffer, w // primes[j - 1])
    return total