"""Throw arbitrary data at the reader and the writer.

Whatever the input, the only acceptable failure is a Sir0Error.
"""
from io import BytesIO

import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given, settings, strategies as st

from pmdsir0 import (
    decode_pointers, encode_pointers, Sir0, Sir0Error, write_sir0)
from pmdsir0.checked import U32_MAX, U64_MAX

positions = st.lists(
    st.integers(min_value=1, max_value=U64_MAX), unique=True).map(sorted)


def _parse(data):
    try:
        sir0 = Sir0(BytesIO(data))
    except Sir0Error:
        return None
    assert len(sir0.header) == sir0.pointer_offset - sir0.header_offset
    assert list(sir0.offsets) == sorted(sir0.offsets)
    return sir0


@given(st.binary())
@settings(max_examples=200)
def test_read_fuzzer(data):
    _parse(data)

@given(st.binary(), st.integers(min_value=0, max_value=64),
       st.integers(min_value=0, max_value=64))
@settings(max_examples=200)
def test_read_fuzzer_with_valid_magic(rest, header_offset, pointer_offset):
    data = (
        b'SIR0'
        + header_offset.to_bytes(4, 'little')
        + pointer_offset.to_bytes(4, 'little')
        + rest)
    _parse(data)

@given(st.binary())
@settings(max_examples=200)
def test_decode_fuzzer(data):
    try:
        pointers = decode_pointers(data)
    except Sir0Error:
        return
    assert len(pointers) <= len(data)
    assert pointers == sorted(pointers)

@given(st.lists(st.integers(min_value=-1, max_value=U32_MAX + 1)))
@settings(max_examples=200)
def test_write_fuzzer(data):
    try:
        encode_pointers(data)
    except Sir0Error:
        pass

@given(positions)
def test_encode_then_decode(positions):
    assert decode_pointers(encode_pointers(positions)) == positions

@given(st.binary(max_size=256), positions)
def test_write_then_read(header, positions):
    stream = BytesIO()
    write_sir0(stream, header, positions)
    sir0 = Sir0(BytesIO(stream.getvalue()))
    assert sir0.header[:len(header)] == header
    assert list(sir0.offsets) == positions

@pytest.mark.slow
@given(st.binary(min_size=12, max_size=4096))
@settings(max_examples=5000, deadline=None)
def test_read_fuzzer_long(data):
    _parse(b'SIR0' + data[4:])
