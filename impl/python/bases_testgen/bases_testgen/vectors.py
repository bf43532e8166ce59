"""
Turn one input into one record per encoding.

Every oracle is called on every input. A single rejection aborts the whole
build; records are never skipped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .errors import OracleEncodingFailure
from .oracles import DEFAULT_ORACLES, Oracle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestRecord:
    __test__ = False  # not a pytest class

    encoding: str
    data: bytes
    expected: str

    def to_json(self) -> Dict[str, Any]:
        return {"fn_name": self.encoding, "data": self.data.hex(), "exp": self.expected}


def build(data: bytes, oracles: Optional[Mapping[str, Oracle]] = None) -> List[TestRecord]:
    if oracles is None:
        oracles = DEFAULT_ORACLES
    data = bytes(data)
    out = []
    for name, encode in oracles.items():
        try:
            exp = encode(data)
        except Exception as e:
            logger.debug("%s rejected input %s", name, data.hex())
            raise OracleEncodingFailure(name, data, f"{type(e).__name__}: {e}") from e
        if not isinstance(exp, str):
            raise OracleEncodingFailure(name, data, f"returned {type(exp).__name__}, not str")
        out.append(TestRecord(name, data, exp))
    return out


class Corpus:
    """Append-only list of records in generation order."""

    def __init__(self, oracles: Optional[Mapping[str, Oracle]] = None):
        self.oracles = DEFAULT_ORACLES if oracles is None else oracles
        self.records: List[TestRecord] = []

    def add_all(self, data: bytes) -> None:
        self.records.extend(build(data, self.oracles))

    def __len__(self) -> int:
        return len(self.records)

    def to_json(self) -> str:
        from .corpus import assemble
        return assemble(self.records)
