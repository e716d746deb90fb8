# primegen/arith.py
# Big-integer helpers backed by GMP. Results come back as plain ints so the
# bit-level composition in the generators stays on Python int semantics.

from __future__ import annotations
import gmpy2

def powmod(a: int, e: int, n: int) -> int:
    return int(gmpy2.powmod(a, e, n))

def gcd(a: int, b: int) -> int:
    return int(gmpy2.gcd(a, b))

def split_pow2(n: int) -> tuple[int, int]:
    """Write n = 2**k * q with q odd; returns (k, q). n must be positive."""
    k = (n & -n).bit_length() - 1  # v2(n)
    return k, n >> k
