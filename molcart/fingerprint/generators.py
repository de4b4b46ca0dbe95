"""
Bit-vector fingerprint generators.

``GENERATORS`` maps an algorithm name to its RDKit call and fixed width.
Morgan-family generators also take a radius, which is handed to RDKit as
is: an out-of-range radius is rejected by the toolkit and reported as a
:class:`~molcart.errors.GenerationError`.
"""

from typing import Callable, Dict, NamedTuple, Optional

from rdkit import Chem, DataStructs
from rdkit.Chem import MACCSkeys, rdFingerprintGenerator

from ..base import BitVector, StructureHandle
from ..constants.runtime import (
    HASHED_PAIR_FP_SIZE,
    HASHED_TORSION_FP_SIZE,
    LAYERED_FP_SIZE,
    MACCS_FP_SIZE,
    MORGAN_FP_SIZE,
    RDKIT_FP_SIZE,
    SIGNATURE_MAX_PATH,
    SIGNATURE_MIN_PATH,
    SSS_FP_SIZE,
    SUBSTRUCT_LAYERS,
)
from ..errors import GenerationError, toolkit_call


class Generator(NamedTuple):
    func: Callable[..., DataStructs.ExplicitBitVect]
    num_bits: int
    takes_radius: bool = False


def _layered(mol: Chem.Mol) -> DataStructs.ExplicitBitVect:
    return Chem.LayeredFingerprint(mol, fpSize=LAYERED_FP_SIZE)


def _rdkit(mol: Chem.Mol) -> DataStructs.ExplicitBitVect:
    gen = rdFingerprintGenerator.GetRDKitFPGenerator(fpSize=RDKIT_FP_SIZE)
    return gen.GetFingerprint(mol)


def _atom_pairs(mol: Chem.Mol) -> DataStructs.ExplicitBitVect:
    gen = rdFingerprintGenerator.GetAtomPairGenerator(fpSize=HASHED_PAIR_FP_SIZE)
    return gen.GetFingerprint(mol)


def _topological_torsion(mol: Chem.Mol) -> DataStructs.ExplicitBitVect:
    gen = rdFingerprintGenerator.GetTopologicalTorsionGenerator(
        fpSize=HASHED_TORSION_FP_SIZE
    )
    return gen.GetFingerprint(mol)


def _maccs(mol: Chem.Mol) -> DataStructs.ExplicitBitVect:
    return MACCSkeys.GenMACCSKeys(mol)


def _morgan(mol: Chem.Mol, radius: int) -> DataStructs.ExplicitBitVect:
    gen = rdFingerprintGenerator.GetMorganGenerator(radius=radius, fpSize=MORGAN_FP_SIZE)
    return gen.GetFingerprint(mol)


def _feat_morgan(mol: Chem.Mol, radius: int) -> DataStructs.ExplicitBitVect:
    gen = rdFingerprintGenerator.GetMorganGenerator(
        radius=radius,
        fpSize=MORGAN_FP_SIZE,
        atomInvariantsGenerator=rdFingerprintGenerator.GetMorganFeatureAtomInvGen(),
    )
    return gen.GetFingerprint(mol)


def _signature(mol: Chem.Mol) -> DataStructs.ExplicitBitVect:
    # Substructure screening layers only, so a query's bits are a subset of
    # the bits of every molecule it matches.
    return Chem.LayeredFingerprint(
        mol,
        layerFlags=SUBSTRUCT_LAYERS,
        minPath=SIGNATURE_MIN_PATH,
        maxPath=SIGNATURE_MAX_PATH,
        fpSize=SSS_FP_SIZE,
    )


GENERATORS: Dict[str, Generator] = {
    "layered": Generator(_layered, LAYERED_FP_SIZE),
    "rdkit": Generator(_rdkit, RDKIT_FP_SIZE),
    "atom_pairs": Generator(_atom_pairs, HASHED_PAIR_FP_SIZE),
    "topological_torsion": Generator(_topological_torsion, HASHED_TORSION_FP_SIZE),
    "maccs": Generator(_maccs, MACCS_FP_SIZE),
    "morgan": Generator(_morgan, MORGAN_FP_SIZE, takes_radius=True),
    "feat_morgan": Generator(_feat_morgan, MORGAN_FP_SIZE, takes_radius=True),
    "signature": Generator(_signature, SSS_FP_SIZE),
}


def generate(
    name: str,
    handle: StructureHandle,
    radius: Optional[int] = None,
) -> BitVector:
    """
    Compute fingerprint ``name`` for a structure.

    Args:
        name: Key of ``GENERATORS``.
        handle: Structure to fingerprint.
        radius: Required by (and only passed to) Morgan-family generators.

    Raises:
        GenerationError: If RDKit raises or returns no fingerprint.
    """
    generator = GENERATORS[name]
    args = (radius,) if generator.takes_radius else ()
    with toolkit_call(GenerationError, f"{name} fingerprint"):
        bits = generator.func(handle.mol, *args)
    if bits is None:
        raise GenerationError(f"{name} fingerprint: toolkit returned nothing")
    return BitVector(bits)
