"""
Owned, call-scoped handles for molcart.

Defines the single-owner wrappers around toolkit objects (molecules and
bit vectors). A handle is created only from a successful parse/decode/
generation step and is released by its owner as soon as the step that
needed it is done, normally by using it as a context manager or by
entering it on a ``contextlib.ExitStack``.
"""

from typing import Any, List

from rdkit import Chem, DataStructs


class OwnedHandle:
    """
    Base class for resources owned by exactly one pipeline step.

    Once released, the wrapped toolkit object is dropped and any further
    access raises ``RuntimeError``.
    """

    def __init__(self, value: Any):
        self._value = value

    @property
    def closed(self) -> bool:
        return self._value is None

    def _get(self) -> Any:
        if self._value is None:
            raise RuntimeError(f"{type(self).__name__} used after release")
        return self._value

    def release(self) -> None:
        self._value = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class StructureHandle(OwnedHandle):
    """Owned wrapper over a parsed RDKit molecule."""

    def __init__(self, mol: Chem.Mol):
        super().__init__(mol)

    @property
    def mol(self) -> Chem.Mol:
        return self._get()

    def __repr__(self) -> str:
        if self.closed:
            return "StructureHandle(<released>)"
        return f"StructureHandle(num_atoms={self.mol.GetNumAtoms()})"


class BitVector(OwnedHandle):
    """Owned wrapper over a fixed-length RDKit ``ExplicitBitVect``."""

    def __init__(self, bits: DataStructs.ExplicitBitVect):
        super().__init__(bits)

    @classmethod
    def from_on_bits(cls, length: int, on_bits: List[int]) -> "BitVector":
        bits = DataStructs.ExplicitBitVect(int(length))
        bits.SetBitsFromList([int(i) for i in on_bits])
        return cls(bits)

    @property
    def bits(self) -> DataStructs.ExplicitBitVect:
        return self._get()

    def __len__(self) -> int:
        return self.bits.GetNumBits()

    @property
    def weight(self) -> int:
        return self.bits.GetNumOnBits()

    def on_bits(self) -> List[int]:
        return list(self.bits.GetOnBits())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return len(self) == len(other) and self.on_bits() == other.on_bits()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.closed:
            return "BitVector(<released>)"
        return f"BitVector(length={len(self)}, weight={self.weight})"
