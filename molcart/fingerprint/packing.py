"""Packed byte-buffer form of bit-vector fingerprints.

Bit ``i`` of a vector lives in byte ``i // 8`` at bit position ``i % 8``
(least significant bit first). A vector of N bits packs into ceil(N / 8)
bytes; pad bits past N in the last byte are zero on output and ignored on
input.
"""

from __future__ import annotations

import numpy as np

from ..base import BitVector
from ..constants.runtime import MAX_BITSTRING_BITS, MAX_BITSTRING_SIZE
from ..errors import MalformedInput, OutOfMemory, toolkit_call


def packed_size(num_bits: int) -> int:
    """Number of bytes needed to hold ``num_bits`` bits."""
    return (int(num_bits) + 7) // 8


def pack(bits: BitVector) -> bytes:
    """Pack a bit vector into its LSB-first byte form."""
    num_bits = len(bits)
    on_bits = np.fromiter(bits.on_bits(), dtype=np.int64)
    try:
        buf = np.zeros(packed_size(num_bits), dtype=np.uint8)
    except MemoryError as e:
        raise OutOfMemory(f"cannot allocate {packed_size(num_bits)} bytes") from e
    if on_bits.size:
        np.bitwise_or.at(
            buf,
            on_bits // 8,
            np.left_shift(1, on_bits % 8).astype(np.uint8),
        )
    return buf.tobytes()


def unpack(buf: bytes, declared_len: int) -> BitVector:
    """
    Rebuild a bit vector of ``declared_len`` bits from a packed buffer.

    Raises:
        MalformedInput: If ``declared_len`` is not in ``[1, MAX_BITSTRING_BITS]``
            or the buffer is too short to hold that many bits.
    """
    declared_len = int(declared_len)
    if declared_len <= 0 or declared_len > MAX_BITSTRING_BITS:
        raise MalformedInput(
            f"bit length {declared_len} outside [1, {MAX_BITSTRING_BITS}]"
        )
    if len(buf) < packed_size(declared_len):
        raise MalformedInput(
            f"{len(buf)} byte(s) cannot hold {declared_len} bits"
        )
    raw = np.frombuffer(bytes(buf), dtype=np.uint8)
    flags = np.unpackbits(raw, count=declared_len, bitorder="little")
    on_bits = np.flatnonzero(flags).tolist()
    with toolkit_call(MalformedInput, "bit vector construction"):
        return BitVector.from_on_bits(declared_len, on_bits)


def unpack_blob(buf: bytes) -> BitVector:
    """Unpack a host blob, whose bit length is always its full byte width."""
    return unpack(buf, bit_length(buf))


def bit_length(buf: bytes) -> int:
    return 8 * len(buf)


def check_blob(buf: bytes) -> None:
    """Raise MalformedInput unless ``buf`` is a usable host fingerprint blob."""
    if not buf or len(buf) > MAX_BITSTRING_SIZE:
        raise MalformedInput(
            f"fingerprint blob of {len(buf)} byte(s) outside [1, {MAX_BITSTRING_SIZE}]"
        )


def bit_weight(buf: bytes) -> int:
    """Number of set bits in a packed buffer."""
    raw = np.frombuffer(bytes(buf), dtype=np.uint8)
    return int(np.unpackbits(raw).sum())


def make_uniform(length: int, byte_value: int) -> bytes:
    """
    Build a buffer of ``length`` identical bytes, mostly for fixtures.

    ``length`` is clamped to ``[1, MAX_BITSTRING_SIZE]`` and ``byte_value``
    to ``[0, 255]``.
    """
    length = min(max(int(length), 1), MAX_BITSTRING_SIZE)
    byte_value = min(max(int(byte_value), 0), 255)
    try:
        return np.full(length, byte_value, dtype=np.uint8).tobytes()
    except MemoryError as e:
        raise OutOfMemory(f"cannot allocate {length} bytes") from e
