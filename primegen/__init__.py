from .bbs import BBSGenerator
from .errors import InvalidParameter, PrimegenError, SamplingExhausted
from .lcg import LCGGenerator
from .primality import TESTS, draw_witness, fermat_test, miller_rabin_test
from .search import GENERATORS, SearchResult, find_probable_prime
__all__ = [
    "BBSGenerator", "LCGGenerator",
    "fermat_test", "miller_rabin_test", "draw_witness", "TESTS",
    "find_probable_prime", "SearchResult", "GENERATORS",
    "PrimegenError", "InvalidParameter", "SamplingExhausted",
]
