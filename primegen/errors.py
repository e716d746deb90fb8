# primegen/errors.py

class PrimegenError(Exception):
    """Base class for primegen failures."""

class InvalidParameter(PrimegenError, ValueError):
    """Out-of-range construction parameter or argument."""

class SamplingExhausted(PrimegenError, RuntimeError):
    """A bounded rejection loop ran out of attempts."""
