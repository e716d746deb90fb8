import logging, time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest, ServiceUnavailable

from primegen import config
from primegen.errors import InvalidParameter, SamplingExhausted
from primegen.primality import TESTS
from primegen.search import GENERATORS, find_probable_prime

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("primegen.web")

app = Flask(__name__)

def _int_arg(name: str, default: int|None = None) -> int|None:
    s = request.args.get(name, "").strip()
    if not s:
        if default is None:
            raise BadRequest(f"missing {name}")
        return default
    try:
        return int(s)
    except ValueError:
        raise BadRequest(f"{name} must be integer")

def _choice_arg(name: str, options: dict, default: str) -> str:
    s = request.args.get(name, default).strip()
    if s not in options:
        raise BadRequest(f"{name} must be one of {', '.join(sorted(options))}")
    return s

def _rounds_arg() -> int:
    rounds = _int_arg("rounds", config.ROUNDS)
    if rounds < 1 or rounds > 1000:
        raise BadRequest("rounds must be in 1..1000")
    return rounds

# /api/probable_prime?bits=256&generator=bbs&test=fermat&rounds=10
@app.get("/api/probable_prime")
def api_probable_prime():
    bits = _int_arg("bits")
    if bits < 2 or bits > config.MAX_BITS:
        raise BadRequest(f"bits must be in 2..{config.MAX_BITS}")
    gen_name = _choice_arg("generator", GENERATORS, "lcg")
    test_name = _choice_arg("test", TESTS, "miller-rabin")
    rounds = _rounds_arg()
    max_trials = _int_arg("max_trials", config.MAX_TRIALS) or None
    t0 = time.perf_counter()
    try:
        # one generator per request; instances are not shared between threads
        res = find_probable_prime(bits, rounds, GENERATORS[gen_name](), TESTS[test_name],
                                  max_trials=max_trials)
    except InvalidParameter as e:
        raise BadRequest(str(e))
    except SamplingExhausted as e:
        logger.warning("search gave up: %s", e)
        raise ServiceUnavailable(str(e))
    dt_ms = int((time.perf_counter() - t0) * 1000)
    return jsonify({"ok": True, "bits": bits, "prime": str(res.prime), "trials": res.trials,
                    "generator": gen_name, "test": test_name, "duration_ms": dt_ms})

# /api/verify?n=97&test=fermat&rounds=10
@app.get("/api/verify")
def api_verify():
    n = _int_arg("n")
    if n.bit_length() > config.MAX_BITS:
        raise BadRequest(f"n must have at most {config.MAX_BITS} bits")
    test_name = _choice_arg("test", TESTS, "miller-rabin")
    rounds = _rounds_arg()
    verdict = TESTS[test_name](n, rounds)
    return jsonify({"ok": True, "n": str(n), "test": test_name, "rounds": rounds,
                    "probable_prime": verdict})

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8080)
