"""
codec.py
- Binary layout for the diagonal IDF model (little-endian):
    int64 rows | int64 cols | float64 x min(rows, cols) diagonal values
- Decoding treats the stream as untrusted: short reads, negative or
  non-square dimensions raise ModelDecodeError.
"""
from __future__ import annotations
import struct
from typing import BinaryIO
import numpy as np
from scipy import sparse

from src.weighting.errors import ModelDecodeError
from src.weighting.idf import diagonal, diagonal_weights

_HEADER = struct.Struct("<qq")
_VALUE = np.dtype("<f8")
_CHUNK = 1 << 16  # values per read


def encode_diagonal(model: "sparse.dia_matrix", stream: BinaryIO) -> int:
    """Write `model` to `stream`; returns bytes written."""
    rows, cols = model.shape
    values = diagonal_weights(model).astype(_VALUE, copy=False)
    stream.write(_HEADER.pack(rows, cols))
    stream.write(values.tobytes())
    return _HEADER.size + values.nbytes


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = stream.read(size - len(buf))
        if not chunk:
            raise ModelDecodeError(f"truncated stream: expected {size} bytes for {what}, got {len(buf)}")
        buf.extend(chunk)
    return bytes(buf)


def decode_diagonal(stream: BinaryIO) -> "sparse.dia_matrix":
    rows, cols = _HEADER.unpack(_read_exact(stream, _HEADER.size, "header"))
    if rows < 0 or cols < 0:
        raise ModelDecodeError(f"negative dimensions in header: ({rows}, {cols})")
    if rows != cols:
        raise ModelDecodeError(f"diagonal model must be square, got ({rows}, {cols})")

    # bounded chunks so a forged header cannot force one huge allocation
    parts = []
    remaining = rows
    while remaining > 0:
        count = min(remaining, _CHUNK)
        raw = _read_exact(stream, count * _VALUE.itemsize, f"weights {rows - remaining}..{rows - remaining + count - 1}")
        parts.append(np.frombuffer(raw, dtype=_VALUE))
        remaining -= count
    values = np.concatenate(parts) if parts else np.zeros(0, dtype=_VALUE)
    return diagonal(values.astype(np.float64))
