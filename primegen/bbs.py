# primegen/bbs.py
# Blum-Blum-Shub: x_i = x_{i-1}^2 mod n, n = p*q with p = q = 3 (mod 4).
# One output bit (the LSB of x_i) per squaring step.

from __future__ import annotations
import logging, time
from typing import Callable

from . import config
from .arith import gcd, powmod
from .errors import InvalidParameter, SamplingExhausted

logger = logging.getLogger(__name__)

DEFAULT_P = 30000000091
DEFAULT_Q = 40000000003

class BBSGenerator:
    """
    Not thread-safe: each instance owns its seed. Use one generator per thread.

    A seed sharing a factor with n is replaced by time-derived values until one
    is coprime. This fallback is not cryptographically sound; it is bounded by
    max_attempts and then raises SamplingExhausted.
    """

    name = "bbs"

    def __init__(self, p: int, q: int, seed: int,
                 seed_source: Callable[[], int] = time.time_ns,
                 max_attempts: int | None = None):
        if p <= 0 or p % 4 != 3:
            raise InvalidParameter("p must be congruent to 3 mod 4")
        if q <= 0 or q % 4 != 3:
            raise InvalidParameter("q must be congruent to 3 mod 4")
        self.p = p
        self.q = q
        self.n = p * q
        self.max_attempts = config.MAX_ATTEMPTS if max_attempts is None else max_attempts

        attempts = 0
        while gcd(seed, self.n) != 1:
            if attempts >= self.max_attempts:
                raise SamplingExhausted(f"no seed coprime to n after {attempts} reseeds")
            if attempts == 0:
                logger.warning("BBS seed shares a factor with n; reseeding from clock")
            seed = seed_source()
            attempts += 1
        self._seed = seed % self.n

    @classmethod
    def default(cls, seed: int | None = None) -> "BBSGenerator":
        if seed is None:
            seed = time.time_ns()
        return cls(DEFAULT_P, DEFAULT_Q, seed)

    def _step(self) -> int:
        self._seed = powmod(self._seed, 2, self.n)
        return self._seed

    def generate(self, length: int) -> int:
        """
        Collect LSBs until the result reaches `length` bits. Leading zero bits
        do not count toward the length, so mask if an exact width is needed.
        """
        self._step()
        result = 0
        zero_run = 0
        while result.bit_length() < length:
            result = (result << 1) | (self._step() & 1)
            if result == 0:
                # an all-even orbit would never reach the threshold
                zero_run += 1
                if zero_run >= self.max_attempts:
                    raise SamplingExhausted(f"{zero_run} consecutive zero bits from BBS orbit")
        return result

    def next(self, length: int) -> int:
        if length < 0:
            raise InvalidParameter("length must be >= 0")
        return self.generate(length)

    def __repr__(self) -> str:
        return f"BBSGenerator(p={self.p}, q={self.q})"
