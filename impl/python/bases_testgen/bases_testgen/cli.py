"""
Generate the base-encoding vector file.

    bases-testgen > test/vectors/base_vectors.json
    bases-testgen --seed 1 -o test/vectors/base_vectors.json -v

stdout carries the JSON document only; diagnostics go to stderr.
"""
import argparse, logging, pathlib, sys

from .corpus import DEFAULT_MAX_LEN, DEFAULT_RANDOM_LEN, assemble, emit, generate_corpus
from .errors import Error
from .rng import DEFAULT_SEED

_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)-5s | %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

logger = logging.getLogger("bases_testgen")


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="bases-testgen", description="Generate deterministic base32/58/64 and bech32 test vectors.")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="one-byte seed for the filler bytes (default: %(default)s)")
    ap.add_argument("--random-len", type=int, default=DEFAULT_RANDOM_LEN, help="length of the filler buffer (default: %(default)s)")
    ap.add_argument("--max-len", type=int, default=DEFAULT_MAX_LEN, help="inputs of length 0..max-len-1 are generated (default: %(default)s)")
    ap.add_argument("-o", "--output", type=str, default=None, help="write to this file instead of stdout")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    args = ap.parse_args(argv)

    if not 0 <= args.seed <= 0xFF:
        ap.error("--seed must be in 0..255")
    if args.max_len < 0:
        ap.error("--max-len must be >= 0")
    if args.random_len < args.max_len - 1:
        ap.error("--random-len must be at least --max-len - 1")

    setup_logging(args.verbose)

    try:
        records = generate_corpus(args.seed, args.random_len, args.max_len)
        doc = assemble(records)
    except Error as e:
        logger.error("generation aborted: %s", e)
        return 1

    if args.output:
        out = pathlib.Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", encoding="utf-8") as f:
            emit(doc, f)
        logger.info("wrote %d vectors to %s", len(records), out)
    else:
        emit(doc, sys.stdout)
    return 0
