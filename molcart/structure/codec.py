"""
Structure codec: SMILES/SMARTS text <-> owned handle <-> RDKit pickle.

Each step is a single toolkit call behind the error boundary. A handle is
only ever returned from a call that produced a molecule; on any failure the
caller gets a :class:`~molcart.errors.CartridgeError` and no handle.
"""

import logging

from rdkit import Chem, RDLogger

from ..base import StructureHandle
from ..errors import (
    MalformedInput,
    ParseError,
    RenderError,
    SerializationError,
    toolkit_call,
)

# Failures are reported through the error taxonomy; keep RDKit off stderr.
RDLogger.DisableLog('rdApp.*')

logger = logging.getLogger(__name__)


def parse(text: str, as_pattern: bool = False) -> StructureHandle:
    """
    Parse SMILES (or SMARTS when ``as_pattern``) into an owned handle.

    Raises:
        ParseError: If the toolkit rejects the text or yields no molecule.
    """
    notation = "SMARTS" if as_pattern else "SMILES"
    with toolkit_call(ParseError, f"{notation} parsing"):
        mol = Chem.MolFromSmarts(text) if as_pattern else Chem.MolFromSmiles(text)
    if mol is None:
        logger.debug("toolkit rejected %s %r", notation, text)
        raise ParseError(f"Invalid {notation}: '{text}'")
    return StructureHandle(mol)


def render(handle: StructureHandle, as_pattern: bool = False) -> str:
    """Render SMARTS, or canonical isomeric SMILES, for a handle."""
    with toolkit_call(RenderError, "structure rendering"):
        if as_pattern:
            return Chem.MolToSmarts(handle.mol, isomericSmiles=False)
        return Chem.MolToSmiles(handle.mol, isomericSmiles=True)


def decode(blob: bytes) -> StructureHandle:
    """
    Rebuild a handle from its pickle.

    Raises:
        MalformedInput: If the pickle is corrupt or decodes to nothing.
    """
    with toolkit_call(MalformedInput, "structure unpickling"):
        mol = Chem.Mol(bytes(blob))
    if mol is None:
        raise MalformedInput("structure pickle decoded to no molecule")
    return StructureHandle(mol)


def encode(handle: StructureHandle) -> bytes:
    with toolkit_call(SerializationError, "structure pickling"):
        return bytes(handle.mol.ToBinary())


def text_to_blob(text: str, as_pattern: bool = False) -> bytes:
    """Parse then pickle; the intermediate handle is released either way."""
    with parse(text, as_pattern) as handle:
        return encode(handle)


def blob_to_text(blob: bytes, as_pattern: bool = False) -> str:
    """Unpickle then render; the intermediate handle is released either way."""
    with decode(blob) as handle:
        return render(handle, as_pattern)
