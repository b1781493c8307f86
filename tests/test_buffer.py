import pytest

from primesieve_nt.buffer import NaiveBuffer, nth_prime_upper_bound

PRIME50 = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
PRIME300 = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83,
    89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151, 157, 163, 167, 173, 179,
    181, 191, 193, 197, 199, 211, 223, 227, 229, 233, 239, 241, 251, 257, 263, 269, 271,
    277, 281, 283, 293,
]


def _is_prime_slow(n):
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def test_prime_generation():
    pb = NaiveBuffer()
    assert pb.primes(50) == PRIME50
    assert pb.primes(300) == PRIME300


def test_limit_itself_prime_after_clear():
    pb = NaiveBuffer()
    pb.clear()
    assert pb.primes(293) == PRIME300


def test_table_boundaries():
    assert NaiveBuffer().primes(257)[-1] == 257
    assert NaiveBuffer().primes(8167)[-1] == 8167


def test_clear_keeps_sixteen_primes():
    pb = NaiveBuffer()
    pb.clear()
    assert len(pb) == 16
    assert pb.bound() == 53
    assert list(pb) == PRIME300[:16]


@pytest.mark.parametrize("cleared", [False, True])
def test_sieve_matches_slow_check(cleared):
    pb = NaiveBuffer()
    if cleared:
        pb.clear()
    expected = [n for n in range(20001) if _is_prime_slow(n)]
    assert pb.primes(20000) == expected


def test_prime_count_to_ten_thousand():
    pb = NaiveBuffer()
    assert len(pb.primes(10000)) == 1229


def test_incremental_reserve_is_consistent():
    pb = NaiveBuffer()
    pb.clear()
    for limit in (60, 61, 100, 1000, 1001, 5000):
        pb.reserve(limit)
    fresh = NaiveBuffer()
    assert pb.primes(5000) == fresh.primes(5000)


def test_contains():
    pb = NaiveBuffer()
    assert pb.contains(8161)
    assert not pb.contains(8163)
    assert 10007 not in pb
    pb.reserve(10007)
    assert 10007 in pb
    assert 10008 not in pb
    assert "7" not in pb


def test_bound_after_reserve():
    pb = NaiveBuffer()
    pb.reserve(10000)
    assert pb.bound() >= 9973
    assert 9973 in pb


def test_nprimes():
    pb = NaiveBuffer()
    assert pb.nprimes(15) == PRIME50
    assert pb.nprimes(0) == []
    assert pb.nprimes(1229)[-1] == 9973


def test_nprimes_rejects_negative():
    with pytest.raises(ValueError):
        NaiveBuffer().nprimes(-1)


def test_nth_prime_upper_bound_small_values():
    assert [nth_prime_upper_bound(n) for n in range(1, 6)] == [2, 3, 5, 7, 11]


def test_nth_prime_upper_bound_holds():
    pb = NaiveBuffer()
    primes = pb.nprimes(5000)
    for n in (6, 7, 10, 100, 1024, 1229, 5000):
        assert nth_prime_upper_bound(n) >= primes[n - 1]


def test_nth_prime_upper_bound_rejects_zero():
    with pytest.raises(ValueError):
        nth_prime_upper_bound(0)