"""Structure matching and the ordering used for sorting/equality."""

from rdkit.Chem import Descriptors, rdMolDescriptors

from ..base import StructureHandle


def is_substructure(needle: StructureHandle, haystack: StructureHandle) -> bool:
    """True if ``needle`` matches somewhere in ``haystack``."""
    return bool(haystack.mol.HasSubstructMatch(needle.mol))


def is_superstructure(haystack: StructureHandle, needle: StructureHandle) -> bool:
    return is_substructure(needle, haystack)


def _sign(value) -> int:
    return 1 if value > 0 else -1


def compare(a: StructureHandle, b: StructureHandle) -> int:
    """
    Order two structures, returning -1, 0 or 1.

    Fields are tried in turn and the first non-zero difference decides:
    atom count, bond count, molecular weight difference rounded half up,
    ring count. When all of these agree, ``a`` and ``b`` compare equal if
    ``a`` contains ``b`` and ``a < b`` otherwise.

    Note:
        The last rule is not antisymmetric. If neither structure contains the
        other, both ``compare(a, b)`` and ``compare(b, a)`` return -1.
    """
    mol_a, mol_b = a.mol, b.mol

    diff = mol_a.GetNumAtoms() - mol_b.GetNumAtoms()
    if diff:
        return _sign(diff)

    diff = mol_a.GetNumBonds() - mol_b.GetNumBonds()
    if diff:
        return _sign(diff)

    diff = int(Descriptors.MolWt(mol_a) - Descriptors.MolWt(mol_b) + 0.5)
    if diff:
        return _sign(diff)

    diff = rdMolDescriptors.CalcNumRings(mol_a) - rdMolDescriptors.CalcNumRings(mol_b)
    if diff:
        return _sign(diff)

    # FIXME: -1 whichever way round the arguments are when neither contains the other
    return 0 if is_substructure(b, a) else -1
