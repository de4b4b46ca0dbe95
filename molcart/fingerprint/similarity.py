"""Tanimoto and Dice similarity over equal-length bit vectors.

Both metrics assume the caller already checked that the two vectors have
the same bit length (see :func:`check_lengths`).
"""

from typing import Callable, Dict

from rdkit import DataStructs

from ..base import BitVector
from ..errors import ComputeError, LengthMismatch, toolkit_call


def check_lengths(a: BitVector, b: BitVector) -> None:
    if len(a) != len(b):
        raise LengthMismatch(f"cannot compare {len(a)}-bit and {len(b)}-bit fingerprints")


def tanimoto(a: BitVector, b: BitVector) -> float:
    """|a & b| / |a | b|"""
    with toolkit_call(ComputeError, "tanimoto similarity"):
        return float(DataStructs.TanimotoSimilarity(a.bits, b.bits))


def dice(a: BitVector, b: BitVector) -> float:
    """2 |a & b| / (|a| + |b|)"""
    with toolkit_call(ComputeError, "dice similarity"):
        return float(DataStructs.DiceSimilarity(a.bits, b.bits))


METRICS: Dict[str, Callable[[BitVector, BitVector], float]] = {
    "tanimoto": tanimoto,
    "dice": dice,
}
