import gzip
import io
import json
import os
import sqlite3
import tempfile
import zipfile

import pytest

from pidecs.engine import generate
from pidecs.formats import apply_compression, output_filename, serialize_payload


PI_10 = "3.141592653"


@pytest.fixture
def state():
    return generate(10)


def test_serialize_txt(state):
    b, mime = serialize_payload(state, "txt")
    assert mime == "text/plain"
    assert b == PI_10.encode("ascii")


def test_serialize_json_and_ndjson(state):
    b, mime = serialize_payload(state, "json")
    assert mime == "application/json"
    payload = json.loads(b.decode("utf-8"))
    assert payload["value"] == PI_10
    assert payload["digits"] == 10
    b2, mime2 = serialize_payload(state, "ndjson")
    assert mime2 == "application/x-ndjson"
    assert b2.endswith(b"\n")
    assert json.loads(b2.decode("utf-8")) == payload


def test_serialize_csv_tsv(state):
    b, mime = serialize_payload(state, "csv")
    assert mime == "text/csv"
    lines = b.decode("utf-8").splitlines()
    assert lines[0] == "constant,digits,words,value"
    assert lines[1] == "pi,10,5," + PI_10
    b2, mime2 = serialize_payload(state, "tsv")
    assert mime2 == "text/tab-separated-values"
    assert "\t" in b2.decode("utf-8").splitlines()[0]


def test_serialize_bin_modes(state):
    b, mime = serialize_payload(state, "bin")
    assert mime == "application/octet-stream"
    assert b == PI_10.encode("ascii")
    bcd, _ = serialize_payload(state, "bin", binary_mode="Packed BCD")
    assert bcd == bytes([0x31, 0x41, 0x59, 0x26, 0x53])
    cents, _ = serialize_payload(state, "bin", binary_mode="cents")
    assert cents == bytes([31, 41, 59, 26, 53])
    with pytest.raises(ValueError):
        serialize_payload(state, "bin", binary_mode="hex")


def test_serialize_sqlite(state):
    b, mime = serialize_payload(state, "sqlite")
    assert mime == "application/vnd.sqlite3"
    with tempfile.NamedTemporaryFile(suffix=".sqlite3", delete=False) as tf:
        path = tf.name
        tf.write(b)
    try:
        conn = sqlite3.connect(path)
        row = conn.execute("select digits, words, value from runs order by id asc limit 1").fetchone()
        conn.close()
        assert row == (10, 5, PI_10)
    finally:
        os.unlink(path)


def test_serialize_zip(state):
    b, mime = serialize_payload(state, "zip")
    assert mime == "application/zip"
    with zipfile.ZipFile(io.BytesIO(b), "r") as zf:
        assert set(zf.namelist()) == {"meta.json", "digits.txt"}
        assert zf.read("digits.txt").decode("ascii") == PI_10


def test_unknown_format(state):
    with pytest.raises(ValueError):
        serialize_payload(state, "xml")


def test_compression():
    assert apply_compression(b"314", "none") == (b"314", "")
    packed, suffix = apply_compression(b"314", "gzip")
    assert suffix == ".gz"
    assert gzip.decompress(packed) == b"314"
    with pytest.raises(ValueError):
        apply_compression(b"314", "bz2")


def test_output_filename():
    assert output_filename("pi", "txt", "") == "pi.txt"
    assert output_filename("pi.json", "json", ".gz") == "pi.json.gz"
