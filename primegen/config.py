# primegen/config.py
# Environment-driven defaults for the CLI and web surfaces.
import os

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default

ROUNDS = _env_int("PRIMEGEN_ROUNDS", 10)
MAX_ATTEMPTS = _env_int("PRIMEGEN_MAX_ATTEMPTS", 100_000)
MAX_BITS = _env_int("PRIMEGEN_MAX_BITS", 4096)
# 0 means unbounded
MAX_TRIALS = _env_int("PRIMEGEN_MAX_TRIALS", 0)
LOG_LEVEL = os.getenv("PRIMEGEN_LOG_LEVEL", "INFO")
