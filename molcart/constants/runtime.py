"""Runtime/default constants for fingerprints and bit-string handling."""

# Bit strings
MAX_BITSTRING_SIZE = 4096               # bytes; upper bound for bfp blobs
MAX_BITSTRING_BITS = MAX_BITSTRING_SIZE * 8

# Substructure screening signature
MOL_SIGNATURE_SIZE = 128                # bytes
SSS_FP_SIZE = 8 * MOL_SIGNATURE_SIZE    # bits
SUBSTRUCT_LAYERS = 0x07                 # pure topology | element | bond order
SIGNATURE_MIN_PATH = 1
SIGNATURE_MAX_PATH = 6

# Fingerprint widths (bits)
LAYERED_FP_SIZE = 1024
RDKIT_FP_SIZE = 1024
MORGAN_FP_SIZE = 1024
HASHED_PAIR_FP_SIZE = 2048
HASHED_TORSION_FP_SIZE = 2048
MACCS_FP_SIZE = 167

DEFAULT_MORGAN_RADIUS = 2
