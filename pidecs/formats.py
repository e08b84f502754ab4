import gzip
import io
import json
import os
import sqlite3
import tempfile
import zipfile
from typing import Dict, Tuple

from .engine import PiState, digits_one_each, digits_packed
from .serialize import decimal_string


FORMATS = ("txt", "json", "csv", "tsv", "ndjson", "bin", "sqlite", "zip")
BINARY_MODES = ("ascii digits", "packed bcd", "cents")
COMPRESSIONS = ("none", "gzip")


def _packed_bcd(digits: bytes) -> bytes:
    out = bytearray()
    for i in range(0, len(digits), 2):
        hi = digits[i]
        lo = digits[i + 1] if i + 1 < len(digits) else 0
        out.append((hi << 4) | lo)
    return bytes(out)


def state_meta(state: PiState) -> Dict:
    return {"constant": "pi", "digits": state.digit_count, "words": state.words, "engine": "limb-atan"}


def _binary_payload(state: PiState, binary_mode: str) -> bytes:
    binary_mode = (binary_mode or "ascii digits").lower().strip()
    if binary_mode == "ascii digits":
        return decimal_string(digits_one_each(state)).encode("ascii")
    if binary_mode == "packed bcd":
        return _packed_bcd(digits_one_each(state))
    if binary_mode == "cents":
        return digits_packed(state)
    raise ValueError("unsupported binary mode")


def _sqlite_payload(meta: Dict, value: str) -> bytes:
    with tempfile.NamedTemporaryFile(suffix=".sqlite3", delete=False) as tf:
        tmp = tf.name
    try:
        conn = sqlite3.connect(tmp)
        cur = conn.cursor()
        cur.execute("create table if not exists runs (id integer primary key, digits integer, words integer, value text)")
        cur.execute(
            "insert into runs(digits,words,value) values(?,?,?)",
            (int(meta["digits"]), int(meta["words"]), value),
        )
        conn.commit()
        conn.close()
        with open(tmp, "rb") as f:
            return f.read()
    finally:
        os.unlink(tmp)


def serialize_payload(state: PiState, fmt: str, binary_mode: str = "ascii digits") -> Tuple[bytes, str]:
    fmt = (fmt or "txt").lower().strip()
    if fmt == "bin":
        return _binary_payload(state, binary_mode), "application/octet-stream"
    meta = state_meta(state)
    value = decimal_string(digits_one_each(state))
    if fmt == "txt":
        return value.encode("ascii"), "text/plain"
    if fmt in {"json", "ndjson"}:
        payload = dict(meta)
        payload["value"] = value
        out = json.dumps(payload, separators=(",", ":"))
        if fmt == "ndjson":
            return (out + "\n").encode("utf-8"), "application/x-ndjson"
        return out.encode("utf-8"), "application/json"
    if fmt in {"csv", "tsv"}:
        sep = "," if fmt == "csv" else "\t"
        header = ["constant", "digits", "words", "value"]
        row = [meta["constant"], str(meta["digits"]), str(meta["words"]), value]
        out = sep.join(header) + "\n" + sep.join(row) + "\n"
        mime = "text/csv" if fmt == "csv" else "text/tab-separated-values"
        return out.encode("utf-8"), mime
    if fmt == "sqlite":
        return _sqlite_payload(meta, value), "application/vnd.sqlite3"
    if fmt == "zip":
        mem = io.BytesIO()
        with zipfile.ZipFile(mem, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("meta.json", json.dumps(meta, separators=(",", ":")))
            zf.writestr("digits.txt", value)
        return mem.getvalue(), "application/zip"
    raise ValueError("unsupported format")


def apply_compression(payload: bytes, compression: str) -> Tuple[bytes, str]:
    compression = (compression or "none").lower().strip()
    if compression == "none":
        return payload, ""
    if compression in {"gzip", "gz"}:
        return gzip.compress(payload), ".gz"
    raise ValueError("unsupported compression")


def output_filename(out_path: str, fmt: str, compression_suffix: str) -> str:
    stem = out_path[: -(len(fmt) + 1)] if out_path.lower().endswith("." + fmt) else out_path
    return f"{stem}.{fmt}{compression_suffix}"
