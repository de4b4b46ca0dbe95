"""molcart - chemical structure and fingerprint functions for database hosts."""

# --- Handles ---
from .base import StructureHandle, BitVector

# --- Codecs / engines ---
from .structure import codec
from .structure.compare import compare, is_substructure, is_superstructure
from .structure.descriptors import DESCRIPTORS, compute_descriptor
from .fingerprint.packing import pack, unpack, make_uniform
from .fingerprint.generators import GENERATORS, generate
from .fingerprint.similarity import tanimoto, dice

# --- Pipelines / host ---
from .functions import FUNCTION_SPECS, FunctionSpec, call
from .io import register_functions

# --- Infrastructure ---
from .errors import (
    ErrorCode, CartridgeError, TypeMismatch, MalformedInput, ParseError, RenderError,
    GenerationError, SerializationError, ComputeError, LengthMismatch, OutOfMemory,
)
from . import constants

__version__ = "0.1.0"

__all__ = [
    "StructureHandle", "BitVector",
    "codec", "compare", "is_substructure", "is_superstructure",
    "DESCRIPTORS", "compute_descriptor",
    "pack", "unpack", "make_uniform", "GENERATORS", "generate", "tanimoto", "dice",
    "FUNCTION_SPECS", "FunctionSpec", "call", "register_functions",
    "ErrorCode", "CartridgeError", "TypeMismatch", "MalformedInput", "ParseError",
    "RenderError", "GenerationError", "SerializationError", "ComputeError",
    "LengthMismatch", "OutOfMemory",
    "constants",
]
