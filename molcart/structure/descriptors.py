"""
Scalar physicochemical descriptors read straight from a structure handle.

``DESCRIPTORS`` maps a descriptor name to its RDKit calculator and the
Python type of its result. The host function for descriptor ``name`` is
``mol_<name>``.
"""

from typing import Callable, Dict, NamedTuple, Type, Union

from rdkit import Chem
from rdkit.Chem import Descriptors, rdMolDescriptors

from ..base import StructureHandle


class Descriptor(NamedTuple):
    func: Callable[[Chem.Mol], Union[int, float]]
    result_type: Type


def _logp(mol: Chem.Mol) -> float:
    logp, _mr = rdMolDescriptors.CalcCrippenDescriptors(mol)
    return logp


DESCRIPTORS: Dict[str, Descriptor] = {
    "mw": Descriptor(Descriptors.MolWt, float),
    "tpsa": Descriptor(rdMolDescriptors.CalcTPSA, float),
    "hba": Descriptor(rdMolDescriptors.CalcNumLipinskiHBA, int),
    "hbd": Descriptor(rdMolDescriptors.CalcNumLipinskiHBD, int),
    "num_rotatable_bnds": Descriptor(rdMolDescriptors.CalcNumRotatableBonds, int),
    "num_hetatms": Descriptor(rdMolDescriptors.CalcNumHeteroatoms, int),
    "num_rings": Descriptor(rdMolDescriptors.CalcNumRings, int),
    # Connectivity indices
    "chi0v": Descriptor(rdMolDescriptors.CalcChi0v, float),
    "chi1v": Descriptor(rdMolDescriptors.CalcChi1v, float),
    "chi2v": Descriptor(rdMolDescriptors.CalcChi2v, float),
    "chi3v": Descriptor(rdMolDescriptors.CalcChi3v, float),
    "chi4v": Descriptor(rdMolDescriptors.CalcChi4v, float),
    "chi0n": Descriptor(rdMolDescriptors.CalcChi0n, float),
    "chi1n": Descriptor(rdMolDescriptors.CalcChi1n, float),
    "chi2n": Descriptor(rdMolDescriptors.CalcChi2n, float),
    "chi3n": Descriptor(rdMolDescriptors.CalcChi3n, float),
    "chi4n": Descriptor(rdMolDescriptors.CalcChi4n, float),
    # Kappa shape indices
    "kappa1": Descriptor(rdMolDescriptors.CalcKappa1, float),
    "kappa2": Descriptor(rdMolDescriptors.CalcKappa2, float),
    "kappa3": Descriptor(rdMolDescriptors.CalcKappa3, float),
    "logp": Descriptor(_logp, float),
    "num_atms": Descriptor(lambda mol: mol.GetNumAtoms(onlyExplicit=False), int),
    "num_hvyatms": Descriptor(lambda mol: mol.GetNumHeavyAtoms(), int),
}


def compute_descriptor(name: str, handle: StructureHandle) -> Union[int, float]:
    """Compute descriptor ``name`` for ``handle``."""
    descriptor = DESCRIPTORS[name]
    return descriptor.result_type(descriptor.func(handle.mol))
