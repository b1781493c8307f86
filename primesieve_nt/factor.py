"""Integer factorization algorithms: trial division, Pollard's rho, SQUFOF and one line."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from math import gcd, isqrt

from .roots import sqrt_exact

__all__ = [
    "SQUFOF_MULTIPLIERS",
    "TrialDivisionResult",
    "trial_division",
    "pollard_rho",
    "squfof",
    "one_line",
]

# Good SQUFOF multipliers sorted by efficiency, descending.
# Any square-free odd number is a suitable multiplier.
SQUFOF_MULTIPLIERS: tuple[int, ...] = (
    3 * 5 * 7 * 11,
    3 * 5 * 7,
    3 * 5 * 7 * 11 * 13,
    3 * 5 * 7 * 13,
    3 * 5 * 7 * 11 * 17,
    3 * 5 * 11,
    3 * 5 * 7 * 17,
    3 * 5,
    3 * 5 * 7 * 11 * 19,
    3 * 5 * 11 * 13,
    3 * 5 * 7 * 19,
    3 * 5 * 7 * 13 * 17,
    3 * 5 * 13,
    3 * 7 * 11,
    3 * 7,
    5 * 7 * 11,
    3 * 7 * 13,
    5 * 7,
    3 * 5 * 17,
    5 * 7 * 13,
    3 * 5 * 19,
    3 * 11,
    3 * 7 * 17,
    3,
    3 * 11 * 13,
    5 * 11,
    3 * 7 * 19,
    3 * 13,
    5,
    5 * 11 * 13,
    5 * 7 * 19,
    5 * 13,
    7 * 11,
    7,
    3 * 17,
    7 * 13,
    11,
    1,
)


@dataclass
class TrialDivisionResult:
    """Factors found by trial division and the cofactor left over.

    ``complete`` is true when the residual is known to be 1 or a prime.
    """

    factors: dict[int, int] = field(default_factory=dict)
    residual: int = 1
    complete: bool = False


def trial_division(
    primes: Iterable[int], target: int, limit: int | None = None
) -> TrialDivisionResult:
    """Divide ``target`` by the given ascending primes.

    The target is fully factored only if some prime exceeds its square root.
    ``limit`` additionally caps the primes that are tried.
    """
    tsqrt = isqrt(target) + 1
    bound = tsqrt if limit is None else min(tsqrt, limit)

    residual = target
    factors: dict[int, int] = {}
    complete = False
    for p in primes:
        if p > tsqrt:
            complete = True
        if p > bound:
            break
        while residual % p == 0:
            residual //= p
            factors[p] = factors.get(p, 0) + 1
        if residual == 1:
            complete = True
            break

    return TrialDivisionResult(factors, residual, complete)


def pollard_rho(
    target: int, start: int, offset: int, max_iter: int
) -> tuple[int | None, int]:
    """Pollard's rho with Brent's cycle detection.

    Returns the factor found (or None) and the number of iterations used.
    """
    if target < 1:
        raise ValueError("target must be positive")

    a = b = start
    z = 1 % target  # accumulated product for a batched gcd
    i, j = 0, 1  # tortoise and hare positions
    saved = start
    backtrace = False

    while i < max_iter:
        i += 1
        a = (a * a + offset) % target
        if a == b:
            return None, i

        z = z * abs(b - a) % target
        if z == 0:
            # the batched gcd swallowed the factor; replay from the saved state once
            if backtrace:
                return None, i
            backtrace = True
            a, saved = saved, 1
            z = 1 % target
            continue

        if i == j or i & 127 == 0 or backtrace:
            d = gcd(z, target)
            if d != 1 and d != target:
                return d, i
            saved = a

        if i == j:
            b = a
            j <<= 1

    return None, i


def _reduce_form(rd: int, p: int, q: int, qm1: int) -> tuple[int, int, int]:
    """Reduce the quadratic form (qm1, p, q); return the new (p, q, qm1)."""
    b = (rd + p) // q
    new_p = b * q - p
    new_q = qm1 + b * (p - new_p)
    return new_p, new_q, q


def squfof(target: int, mul_target: int, max_iter: int) -> tuple[int | None, int]:
    """Shanks's square forms factorization.

    ``mul_target`` is ``target`` times a square-free odd multiplier.
    Returns the factor found (or None) and the number of iterations used.
    """
    if mul_target % target != 0:
        raise ValueError("mul_target should be multiples of target")
    rd = isqrt(mul_target)

    p, q, qm1 = rd, mul_target - rd * rd, 1
    if q == 0:
        return rd, 0

    for i in range(1, max_iter):
        p, q, qm1 = _reduce_form(rd, p, q, qm1)
        if i % 2 == 0:
            continue
        rq = sqrt_exact(q)
        if not rq:
            continue

        b = (rd - p) // rq
        u = b * rq + p
        v, vm1 = (mul_target - u * u) // rq, rq

        # backward loop, search the ambiguous cycle
        while True:
            new_u, v, vm1 = _reduce_form(rd, u, v, vm1)
            if new_u == u:
                break
            u = new_u

        d = gcd(target, u)
        if 1 < d < target:
            return d, i

    return None, max_iter


def one_line(target: int, mul_target: int, max_iter: int) -> tuple[int | None, int]:
    """Hart's one line factorization.

    ``mul_target`` is ``target`` times a smooth multiplier (480 is a good one).
    Returns the factor found (or None) and the number of iterations used.
    """
    if mul_target % target != 0:
        raise ValueError("mul_target should be multiples of target")

    ikn = mul_target
    for i in range(1, max_iter):
        s = isqrt(ikn) + 1
        t = sqrt_exact(s * s - ikn)
        if t is not None:
            g = gcd(target, s - t)
            if g != 1 and g != target:
                return g, i
        ikn += mul_target

    return None, max_iter