# primesieve_nt

Prime number utilities in pure Python with no third-party dependencies:
a growable sieve of Eratosthenes, prime counting, n-th prime lookup,
exact integer roots and several integer factorization algorithms.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `primesieve_nt.buffer`: `NaiveBuffer`, a sorted, growable list of primes,
  and `nth_prime_upper_bound`.
- `primesieve_nt.counting`: `prime_pi`, `nth_prime`, `prime_phi` and
  `primorial`, all working on a `NaiveBuffer`.
- `primesieve_nt.roots`: `nth_root`, `nth_root_exact`, `sqrt_exact`,
  `cbrt_exact`.
- `primesieve_nt.factor`: `trial_division`, `pollard_rho`, `squfof`,
  `one_line`, the `TrialDivisionResult` dataclass and the
  `SQUFOF_MULTIPLIERS` tuple.

## Prime buffer

`NaiveBuffer` starts out holding every prime below 8163 and sieves further
on demand.

```python
from primesieve_nt.buffer import NaiveBuffer, nth_prime_upper_bound

pb = NaiveBuffer()
pb.primes(50)          # [2, 3, 5, ..., 47], every prime <= 50
pb.nprimes(5)          # [2, 3, 5, 7, 11], the first 5 primes
97 in pb               # True; same as pb.contains(97)
len(pb)                # number of primes currently held
pb.reserve(10_000)     # sieve every prime up to 10000
pb.bound()             # largest prime held so far
pb.clear()             # shrink back to the first 16 primes
nth_prime_upper_bound(10)  # an integer not smaller than the 10th prime
```

Iterating over a buffer yields the primes it currently holds, in order.
`nprimes` raises `ValueError` for a negative count.

## Counting primes

```python
from primesieve_nt.buffer import NaiveBuffer
from primesieve_nt.counting import nth_prime, prime_phi, prime_pi, primorial

pb = NaiveBuffer()
prime_pi(pb, 10**6)         # 78498, by the Meissel-Lehmer method
nth_prime(pb, 10000)        # 104729
primorial(pb, 5)            # 2 * 3 * 5 * 7 * 11 == 2310
prime_phi(pb, 100, 3, {})   # integers in [1, 100] not divisible by 2, 3 or 5
```

`prime_pi` answers limits up to 38873 (or up to the buffer's bound) by
sieving and uses Meissel-Lehmer beyond that. `nth_prime` sieves directly for
n up to 4096; for larger n it starts from an estimate and walks to the exact
prime. `prime_phi` stores intermediate values in the mapping passed as
`cache`, keyed by `(x, a)`.

## Exact roots

```python
from primesieve_nt.roots import cbrt_exact, nth_root, nth_root_exact, sqrt_exact

nth_root(1000, 3)        # 10, rounded toward zero
nth_root_exact(1000, 3)  # 10
nth_root_exact(1001, 3)  # None
sqrt_exact(144)          # 12
sqrt_exact(18)           # None
cbrt_exact(-27)          # -3
```

`nth_root` raises `ValueError` for a degree below 1 or an even root of a
negative number.

## Factorization

```python
from primesieve_nt.buffer import NaiveBuffer
from primesieve_nt.factor import one_line, pollard_rho, squfof, trial_division

result = trial_division(NaiveBuffer().primes(100), 360, None)
# result.factors == {2: 3, 3: 2, 5: 1}
# result.residual == 1, result.complete is True

pollard_rho(8051, 2, 1, 100)   # (97, <iterations>)
squfof(11111, 11111, 100)      # (41, <iterations>)
one_line(11111, 11111, 100)    # (271, <iterations>)
```

`trial_division` divides by the given ascending primes, optionally capped by
`limit`; `complete` is true when the residual is known to be 1 or a prime.
Each of `pollard_rho`, `squfof` and `one_line` returns a pair of the factor
found (or `None`) and the number of iterations spent. `squfof` and
`one_line` take the target multiplied by a multiplier as `mul_target` and
raise `ValueError` if it is not a multiple of the target; good multipliers
for `squfof` are listed in `SQUFOF_MULTIPLIERS`.

## What this package does not do

There is no command-line program. The package offers no general primality
test for arbitrary integers, no random prime generation and no function
that drives the factorization algorithms to a complete factorization: the
algorithms in `primesieve_nt.factor` each find at most one factor per call,
and combining them is left to the caller.