import dataclasses

import pytest
from hypothesis import given, settings, strategies as st

from bases_testgen import oracles
from bases_testgen.errors import Error, OracleEncodingFailure
from bases_testgen.oracles import DEFAULT_ORACLES
from bases_testgen.vectors import Corpus, TestRecord, build

def _too_long(data):
    if len(data) > 2:
        raise ValueError("input too long")
    return data.hex()

@given(st.binary(max_size=64))
@settings(max_examples=50, deadline=None)
def test_one_record_per_oracle(data):
    recs = build(data)
    assert [r.encoding for r in recs] == list(DEFAULT_ORACLES)
    for r in recs:
        assert r.data == data
        assert r.expected == DEFAULT_ORACLES[r.encoding](data)

def test_records_are_immutable():
    r = build(b"\x01")[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.expected = "x"

def test_accepts_bytearray_and_stores_bytes():
    recs = build(bytearray(b"\x00\xff"), {"base64": oracles.base64_std})
    assert recs == [TestRecord("base64", b"\x00\xff", "AP8=")]
    assert type(recs[0].data) is bytes

def test_injected_oracles_only():
    recs = build(b"abc", {"hex": lambda d: d.hex()})
    assert recs == [TestRecord("hex", b"abc", "616263")]

def test_oracle_failure_aborts_build():
    with pytest.raises(OracleEncodingFailure) as ei:
        build(b"abcd", {"base64": oracles.base64_std, "short": _too_long})
    err = ei.value
    assert isinstance(err, Error)
    assert err.encoding == "short"
    assert err.data == b"abcd"
    assert isinstance(err.__cause__, ValueError)
    assert "4-byte" in str(err)

def test_non_string_result_is_a_failure():
    with pytest.raises(OracleEncodingFailure):
        build(b"a", {"raw": lambda d: d})

def test_corpus_appends_in_order():
    c = Corpus({"base64": oracles.base64_std, "base32": oracles.base32})
    c.add_all(b"")
    c.add_all(b"\xff")
    assert len(c) == 4
    assert [(r.encoding, r.data) for r in c.records] == [
        ("base64", b""), ("base32", b""), ("base64", b"\xff"), ("base32", b"\xff"),
    ]
    assert c.to_json() == (
        '{"v":[{"fn_name":"base64","data":"","exp":""},'
        '{"fn_name":"base32","data":"","exp":""},'
        '{"fn_name":"base64","data":"ff","exp":"/w=="},'
        '{"fn_name":"base32","data":"ff","exp":"74======"}]}'
    )

def test_failed_input_adds_nothing():
    c = Corpus({"short": _too_long})
    c.add_all(b"ab")
    with pytest.raises(OracleEncodingFailure):
        c.add_all(b"abc")
    assert len(c) == 1
