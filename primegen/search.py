# primegen/search.py
# Draw candidates from a generator until a primality test accepts one.

from __future__ import annotations
import logging, time
from dataclasses import dataclass
from typing import Callable, Optional

from .bbs import BBSGenerator
from .errors import InvalidParameter, SamplingExhausted
from .lcg import LCGGenerator

logger = logging.getLogger(__name__)

GENERATORS = {
    "lcg": LCGGenerator.default,
    "bbs": BBSGenerator.default,
}

@dataclass
class SearchResult:
    prime: int
    trials: int
    bits: int
    generator: str
    test: str
    elapsed_ms: int

def find_probable_prime(bits: int, rounds: int, generator,
                        test: Callable[[int, int], bool],
                        max_trials: Optional[int] = None) -> SearchResult:
    """
    `generator` is anything with next(bits) -> int (LCGGenerator, BBSGenerator);
    `test` is a (candidate, rounds) -> bool callable such as miller_rabin_test.

    Unbounded unless max_trials is given. Roughly one in ln(2^bits) candidates
    is prime, so the loop converges quickly but has no hard termination bound.
    """
    if bits < 2:
        raise InvalidParameter("bits must be >= 2")
    if rounds < 1:
        # zero rounds would accept every odd candidate
        raise InvalidParameter("rounds must be >= 1")
    if max_trials is not None and max_trials <= 0:
        raise InvalidParameter("max_trials must be positive")
    gen_name = getattr(generator, "name", type(generator).__name__)
    test_name = getattr(test, "__name__", repr(test))
    t0 = time.perf_counter()
    trials = 0
    while max_trials is None or trials < max_trials:
        candidate = generator.next(bits)
        trials += 1
        if test(candidate, rounds):
            ms = int((time.perf_counter() - t0) * 1000)
            logger.info("probable prime after %d trials (%d bits, %s/%s, %d ms)",
                        trials, bits, gen_name, test_name, ms)
            return SearchResult(prime=candidate, trials=trials, bits=bits,
                                generator=gen_name, test=test_name, elapsed_ms=ms)
        logger.debug("trial %d: %d rejected", trials, candidate)
    raise SamplingExhausted(f"no probable prime in {max_trials} trials ({bits} bits)")
