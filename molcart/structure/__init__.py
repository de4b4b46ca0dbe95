from .codec import parse, render, decode, encode, text_to_blob, blob_to_text
from .compare import compare, is_substructure, is_superstructure
from .descriptors import DESCRIPTORS, compute_descriptor

__all__ = [
    "parse", "render", "decode", "encode", "text_to_blob", "blob_to_text",
    "compare", "is_substructure", "is_superstructure",
    "DESCRIPTORS", "compute_descriptor",
]
