# primegen/primality.py
# Probabilistic primality tests driven by random witnesses.
# Both return False only on a proof of compositeness; True means "probable prime".

from __future__ import annotations
import secrets
from typing import Optional

from .arith import powmod, split_pow2
from .errors import InvalidParameter

_SYSTEM_RNG = secrets.SystemRandom()

def draw_witness(n: int, rng=None) -> int:
    """Uniform witness in [2, n-2]. rng needs randrange(); defaults to the OS CSPRNG."""
    if n < 5:
        raise InvalidParameter("witness range [2, n-2] needs n >= 5")
    return (rng or _SYSTEM_RNG).randrange(2, n - 1)

def _trivial_verdict(n: int) -> Optional[bool]:
    if n == 2 or n == 3:
        return True
    if n <= 1:
        return False
    if n % 2 == 0:
        return False
    return None

# ---------- Fermat ----------

def fermat_test(n: int, rounds: int, rng=None) -> bool:
    """
    a^(n-1) = 1 (mod n) for every prime n and a not divisible by n.

    No false negatives. Carmichael numbers (561, 1105, ...) satisfy the
    congruence for every coprime witness, so they pass regardless of rounds.
    """
    verdict = _trivial_verdict(n)
    if verdict is not None:
        return verdict
    for _ in range(rounds):
        a = draw_witness(n, rng)
        if powmod(a, n - 1, n) != 1:
            return False
    return True

# ---------- Miller-Rabin ----------

def miller_rabin_test(n: int, rounds: int, rng=None) -> bool:
    """
    With n-1 = 2^k * q (q odd), a prime n gives a^q = 1 or a^(2^j * q) = -1
    for some 0 <= j < k. A composite survives one random round with
    probability at most 1/4, so the error bound is 4^-rounds.
    """
    verdict = _trivial_verdict(n)
    if verdict is not None:
        return verdict
    n1 = n - 1
    k, q = split_pow2(n1)
    for _ in range(rounds):
        a = draw_witness(n, rng)
        b = powmod(a, q, n)
        if b == 1 or b == n1:
            continue
        for _ in range(k - 1):
            b = (b * b) % n
            if b == n1:
                break
        else:
            return False
    return True

TESTS = {
    "fermat": fermat_test,
    "miller-rabin": miller_rabin_test,
}
