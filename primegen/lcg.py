# primegen/lcg.py
# Linear congruential generator with block concatenation for arbitrary bit lengths.
# Default parameters: Numerical Recipes ranqd1 (Knuth / H. W. Lewis), m = 2^32.

from __future__ import annotations
import time

from . import config
from .errors import InvalidParameter, SamplingExhausted

NR_MODULUS = 1 << 32
NR_MULTIPLIER = 1664525
NR_INCREMENT = 1013904223
BLOCK_WIDTH = 32

def time_seed() -> int:
    return time.time_ns() & 0x7FFFFFFF

class LCGGenerator:
    """
    seed <- (a*seed + c) mod m.

    Not thread-safe: each instance owns its seed. Use one generator per thread.
    """

    name = "lcg"

    def __init__(self, m: int, a: int, c: int, seed: int,
                 block_width: int = BLOCK_WIDTH, max_attempts: int | None = None):
        if m <= 0:
            raise InvalidParameter("invalid m: must be positive")
        if a <= 0 or a >= m:
            raise InvalidParameter("invalid a: must satisfy 0 < a < m")
        if c < 0 or c >= m:
            raise InvalidParameter("invalid c: must satisfy 0 <= c < m")
        if seed < 0 or seed >= m:
            raise InvalidParameter("invalid seed: must satisfy 0 <= seed < m")
        if block_width <= 0:
            raise InvalidParameter("invalid block_width: must be positive")
        self._m = m
        self._a = a
        self._c = c
        self._seed = seed
        self.block_width = block_width
        self.max_attempts = config.MAX_ATTEMPTS if max_attempts is None else max_attempts

    @classmethod
    def default(cls, seed: int | None = None) -> "LCGGenerator":
        if seed is None:
            seed = time_seed()
        return cls(NR_MODULUS, NR_MULTIPLIER, NR_INCREMENT, seed)

    def generate(self) -> int:
        self._seed = (self._a * self._seed + self._c) % self._m
        return self._seed

    def _draw_partial(self, bits: int) -> int:
        # Reducing mod 2^bits carries a modulo bias toward low values; left as is.
        mask = (1 << bits) - 1
        for _ in range(self.max_attempts):
            val = self.generate() & mask
            if val.bit_length() >= bits:
                return val
        raise SamplingExhausted(f"no {bits}-bit partial block after {self.max_attempts} draws")

    def _draw_block(self) -> int:
        w = self.block_width
        for _ in range(self.max_attempts):
            val = self.generate()
            if val.bit_length() == w:
                return val
        raise SamplingExhausted(f"no full {w}-bit block after {self.max_attempts} draws (m={self._m})")

    def next(self, length: int) -> int:
        """
        Integer of exactly `length` bits: a leading partial block of
        length % block_width bits, then length // block_width full blocks,
        concatenated high to low.
        """
        if length < 0:
            raise InvalidParameter("length must be >= 0")
        quotient, remainder = divmod(length, self.block_width)
        result = 0
        if remainder:
            result = self._draw_partial(remainder)
        for _ in range(quotient):
            result = (result << self.block_width) | self._draw_block()
        return result

    def __repr__(self) -> str:
        return f"LCGGenerator(m={self._m}, a={self._a}, c={self._c}, block_width={self.block_width})"
