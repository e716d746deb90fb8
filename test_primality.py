import math
import random

import pytest
import sympy

from primegen import InvalidParameter, draw_witness, fermat_test, miller_rabin_test

BOTH = pytest.mark.parametrize("test", [fermat_test, miller_rabin_test],
                               ids=["fermat", "miller-rabin"])

CARMICHAEL = (561, 1105, 1729, 2465, 2821, 6601, 8911)

class ScriptedWitnesses:
    """randrange() stand-in that hands out a fixed list of witnesses."""

    def __init__(self, values):
        self._values = iter(values)
        self.drawn = 0

    def randrange(self, start, stop):
        v = next(self._values)
        assert start <= v < stop
        self.drawn += 1
        return v

@BOTH
@pytest.mark.parametrize("n,expected", [
    (-7, False), (0, False), (1, False), (2, True), (3, True),
    (4, False), (6, False), (100, False), (2 ** 64, False),
])
def test_boundary_cases(test, n, expected):
    assert test(n, 10) is expected

@BOTH
def test_four_is_composite_for_any_rounds(test):
    for rounds in (1, 2, 10, 50):
        assert test(4, rounds) is False

@BOTH
def test_small_prime(test):
    assert test(97, 10) is True

def test_miller_rabin_rejects_91():
    # 91 = 7 * 13
    for _ in range(20):
        assert miller_rabin_test(91, 10) is False

@BOTH
def test_no_false_negatives_below_one_million(test):
    rng = random.Random(20240601)
    for p in sympy.primerange(2, 10 ** 6 + 1):
        assert test(int(p), 10, rng=rng), p

@BOTH
def test_large_primes(test):
    rng = random.Random(5)
    for bits in (64, 128, 256, 521):
        p = int(sympy.randprime(2 ** (bits - 1), 2 ** bits))
        assert test(p, 10, rng=rng)
    # Mersenne prime M521
    assert test(2 ** 521 - 1, 10, rng=rng)

@BOTH
def test_semiprime_is_composite(test):
    p = int(sympy.nextprime(10 ** 6))
    q = int(sympy.nextprime(p))
    assert test(p * q, 10, rng=random.Random(3)) is False

@BOTH
def test_agrees_with_sympy_on_random_odd_integers(test):
    rng = random.Random(11)
    for _ in range(300):
        n = rng.getrandbits(96) | 1
        if sympy.isprime(n):
            assert test(n, 10, rng=rng)
        else:
            assert not test(n, 20, rng=rng)

@pytest.mark.parametrize("c", CARMICHAEL)
def test_carmichael_fools_fermat_with_coprime_witnesses(c):
    coprime = [a for a in range(2, c - 1) if math.gcd(a, c) == 1][:10]
    assert fermat_test(c, 10, rng=ScriptedWitnesses(coprime)) is True

@pytest.mark.parametrize("c", CARMICHAEL)
def test_miller_rabin_catches_carmichael(c):
    assert miller_rabin_test(c, 20, rng=random.Random(c)) is False

def test_miller_rabin_witness_two_on_561():
    assert miller_rabin_test(561, 1, rng=ScriptedWitnesses([2])) is False

def test_weak_witness_two_for_2047():
    # 2047 = 23 * 89 is a strong pseudoprime to base 2
    assert miller_rabin_test(2047, 1, rng=ScriptedWitnesses([2])) is True
    assert miller_rabin_test(2047, 1, rng=ScriptedWitnesses([3])) is False

@BOTH
def test_stops_at_first_failing_witness(test):
    rng = ScriptedWitnesses([2])
    assert test(91, 5, rng=rng) is False
    assert rng.drawn == 1

@BOTH
def test_runs_every_round_for_primes(test):
    rng = ScriptedWitnesses([2, 3, 5, 10, 50])
    assert test(97, 5, rng=rng) is True
    assert rng.drawn == 5

@BOTH
def test_zero_rounds_draws_nothing(test):
    rng = ScriptedWitnesses([])
    assert test(91, 0, rng=rng) is True

@pytest.mark.parametrize("n", [5, 7, 11, 97])
def test_witness_range(n):
    rng = random.Random(n)
    seen = {draw_witness(n, rng) for _ in range(5000)}
    assert seen == set(range(2, n - 1))

def test_witness_default_source():
    for _ in range(100):
        assert 2 <= draw_witness(1009) <= 1007

@pytest.mark.parametrize("n", [-1, 0, 1, 2, 3, 4])
def test_witness_needs_room_above_two(n):
    with pytest.raises(InvalidParameter):
        draw_witness(n, random.Random(0))
