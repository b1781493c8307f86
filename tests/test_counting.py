import pytest

from primesieve_nt.buffer import NaiveBuffer
from primesieve_nt.counting import nth_prime, prime_phi, prime_pi, primorial


@pytest.fixture
def buffer():
    return NaiveBuffer()


def test_nth_prime_small_and_medium(buffer):
    assert nth_prime(buffer, 10000) == 104729
    assert nth_prime(buffer, 20000) == 224737
    assert nth_prime(buffer, 10000) == 104729  # use existing primes


def test_nth_prime_first_values(buffer):
    assert [nth_prime(buffer, n) for n in range(1, 7)] == [2, 3, 5, 7, 11, 13]
    assert nth_prime(buffer, 1024) == 8161
    assert nth_prime(buffer, 4096) == 38873


def test_nth_prime_large(buffer):
    # OEIS A006988
    assert nth_prime(buffer, 10**4) == 104729
    assert nth_prime(buffer, 10**5) == 1299709
    assert nth_prime(buffer, 10**6) == 15485863


def test_nth_prime_rejects_zero(buffer):
    with pytest.raises(ValueError):
        nth_prime(buffer, 0)


def test_prime_pi_sieve_range(buffer):
    assert prime_pi(buffer, 8161) == 1024
    assert prime_pi(buffer, 10000) == 1229
    assert prime_pi(buffer, 20000) == 2262
    assert prime_pi(buffer, 38873) == 4096


def test_prime_pi_after_clear(buffer):
    buffer.clear()
    assert prime_pi(buffer, 8161) == 1024
    assert prime_pi(buffer, 10000) == 1229
    assert prime_pi(buffer, 20000) == 2262
    assert prime_pi(buffer, 10000) == 1229


def test_prime_pi_meissel_lehmer(buffer):
    buffer.clear()
    # OEIS A006880
    assert prime_pi(buffer, 10**5) == 9592
    assert prime_pi(buffer, 10**6) == 78498
    assert prime_pi(buffer, 10**7) == 664579


def test_prime_pi_tiny_limits(buffer):
    assert prime_pi(buffer, 0) == 0
    assert prime_pi(buffer, 1) == 0
    assert prime_pi(buffer, 2) == 1
    assert prime_pi(buffer, 10) == 4


def test_prime_pi_and_nth_prime_agree(buffer):
    for n in (5000, 12345):
        assert prime_pi(buffer, nth_prime(buffer, n)) == n


def test_prime_phi_base_case(buffer):
    assert prime_phi(buffer, 7, 1, {}) == 4
    assert prime_phi(buffer, 10, 1, {}) == 5


def test_prime_phi_legendre_identity(buffer):
    # pi(x) = phi(x, a) + a - 1 with a = pi(sqrt(x)); pi(100) = 25, pi(10) = 4
    assert prime_phi(buffer, 100, 4, {}) == 22
    # pi(10000) = 1229, pi(100) = 25
    assert prime_phi(buffer, 10000, 25, {}) == 1205


def test_prime_phi_fills_cache(buffer):
    cache = {}
    value = prime_phi(buffer, 1000, 5, cache)
    assert cache[(1000, 5)] == value
    assert prime_phi(buffer, 1000, 5, cache) == value


def test_prime_phi_rejects_bad_arguments(buffer):
    with pytest.raises(ValueError):
        prime_phi(buffer, 10, 0, {})
    with pytest.raises(ValueError):
        prime_phi(buffer, -1, 2, {})


def test_primorial(buffer):
    assert primorial(buffer, 0) == 1
    assert primorial(buffer, 1) == 2
    assert primorial(buffer, 5) == 2310
    assert primorial(buffer, 10) == 6469693230