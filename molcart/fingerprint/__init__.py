from .packing import pack, unpack, unpack_blob, make_uniform, bit_length, bit_weight
from .generators import GENERATORS, generate
from .similarity import METRICS, check_lengths, tanimoto, dice

__all__ = [
    "pack", "unpack", "unpack_blob", "make_uniform", "bit_length", "bit_weight",
    "GENERATORS", "generate",
    "METRICS", "check_lengths", "tanimoto", "dice",
]
