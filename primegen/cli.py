# primegen/cli.py
# Simple CLI: primegen --bits 256 [--generator bbs] [--test fermat] [--json]

from __future__ import annotations
import argparse, json, logging, sys

from . import config
from .errors import PrimegenError
from .primality import TESTS
from .search import GENERATORS, find_probable_prime

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="primegen",
                                 description="Search for a probable prime of a given bit length.")
    ap.add_argument("--bits", type=int, required=True, help="bit length of the candidates")
    ap.add_argument("--generator", choices=sorted(GENERATORS), default="lcg")
    ap.add_argument("--test", choices=sorted(TESTS), default="miller-rabin")
    ap.add_argument("--rounds", type=int, default=config.ROUNDS, help="witness rounds per candidate")
    ap.add_argument("--max-trials", type=int, default=config.MAX_TRIALS or None,
                    help="give up after this many candidates (default: unbounded)")
    ap.add_argument("--seed", type=int, default=None, help="generator seed for reproducibility")
    ap.add_argument("--json", action="store_true", help="emit JSON instead of text")
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        gen = GENERATORS[args.generator](args.seed)
        res = find_probable_prime(args.bits, args.rounds, gen, TESTS[args.test],
                                  max_trials=args.max_trials)
    except PrimegenError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps({"bits": res.bits, "prime": str(res.prime), "trials": res.trials,
                          "generator": args.generator, "test": args.test, "ms": res.elapsed_ms}))
    else:
        print(res.prime)
        print(f"# {res.trials} trials, {args.generator}/{args.test}, {res.elapsed_ms} ms", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
