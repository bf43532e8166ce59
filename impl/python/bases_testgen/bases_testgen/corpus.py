"""
Assemble records into the vector document and drive a full generation run.

Document shape (compact JSON, one line):

    {"v": [{"fn_name": "base32", "data": "<lowercase hex>", "exp": "..."}, ...]}
"""
from __future__ import annotations

import json
import logging
from typing import IO, Any, Dict, Iterable, Iterator, List, Mapping, Optional

from .edges import edge_cases
from .errors import SerializationFailure
from .oracles import Oracle
from .rng import DEFAULT_SEED, random_bytes
from .vectors import Corpus, TestRecord

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_LEN = 4096
DEFAULT_MAX_LEN = 512


def _drop_none(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}

def assemble(records: Iterable[TestRecord]) -> str:
    try:
        doc = {"v": [_drop_none(r.to_json()) for r in records]}
        return json.dumps(doc, separators=(",", ":"), ensure_ascii=True, allow_nan=False)
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationFailure(f"cannot serialize corpus: {e}") from e

def emit(document: str, stream: IO[str]) -> None:
    stream.write(document)
    stream.write("\n")
    stream.flush()


def candidate_inputs(seed: int = DEFAULT_SEED,
                     random_len: int = DEFAULT_RANDOM_LEN,
                     max_len: int = DEFAULT_MAX_LEN) -> Iterator[bytes]:
    if max_len < 0:
        raise ValueError(f"max_len must be >= 0, got {max_len}")
    if random_len < max_len - 1:
        raise ValueError(f"random_len ({random_len}) too short for inputs up to {max_len - 1} bytes")
    rnd = random_bytes(seed, random_len)
    for i in range(max_len):
        yield rnd[:i]
        yield bytes(i)
        yield b"\xff" * i
    logger.debug("length sweep done (%d lengths)", max_len)
    yield from edge_cases()


def generate_corpus(seed: int = DEFAULT_SEED,
                    random_len: int = DEFAULT_RANDOM_LEN,
                    max_len: int = DEFAULT_MAX_LEN,
                    oracles: Optional[Mapping[str, Oracle]] = None) -> List[TestRecord]:
    logger.info("generating vectors: seed=%d random_len=%d max_len=%d", seed, random_len, max_len)
    corpus = Corpus(oracles)
    inputs = 0
    for data in candidate_inputs(seed, random_len, max_len):
        corpus.add_all(data)
        inputs += 1
    logger.info("built %d records from %d inputs", len(corpus), inputs)
    return corpus.records
