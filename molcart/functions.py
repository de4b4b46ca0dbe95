"""
Scalar functions exposed to the host, and the pipeline each one runs.

Every function is described by a :class:`FunctionSpec`: its host name, the
host types of its arguments, and the implementation. :func:`call` checks the
arguments against the declared types before anything is decoded, then runs
the implementation. Implementations decode their arguments into owned
handles held on a ``contextlib.ExitStack``, so every handle is released
whether the pipeline returns a value or raises.

Results are ``bytes``, ``str``, ``int`` or ``float``; failures are always a
:class:`~molcart.errors.CartridgeError`.
"""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Sequence, Tuple

from .errors import ComputeError, TypeMismatch, toolkit_call
from .fingerprint import generators, packing, similarity
from .structure import codec, descriptors
from .structure.compare import compare, is_substructure, is_superstructure

BLOB = "blob"
TEXT = "text"
INTEGER = "integer"

_HOST_TYPES: Mapping[str, Tuple[type, ...]] = {
    BLOB: (bytes, bytearray, memoryview),
    TEXT: (str,),
    INTEGER: (int,),
}


@dataclass(frozen=True)
class FunctionSpec:
    name: str
    arg_types: Tuple[str, ...]
    impl: Callable[..., Any]
    deterministic: bool = True

    @property
    def arity(self) -> int:
        return len(self.arg_types)


def _host_type_name(value: Any) -> str:
    if value is None:
        return "null"
    for name, types in _HOST_TYPES.items():
        if isinstance(value, types) and not isinstance(value, bool):
            return name
    if isinstance(value, float):
        return "real"
    return type(value).__name__


def check_args(spec: FunctionSpec, args: Sequence[Any]) -> None:
    """
    Verify arity and host type of every argument.

    Raises:
        TypeMismatch: On the first argument whose type does not match.
    """
    if len(args) != spec.arity:
        raise TypeMismatch(
            f"{spec.name}() takes {spec.arity} argument(s), got {len(args)}"
        )
    for position, (expected, value) in enumerate(zip(spec.arg_types, args), start=1):
        actual = _host_type_name(value)
        if actual != expected:
            raise TypeMismatch(
                f"{spec.name}() argument {position} must be {expected}, not {actual}"
            )


# =========================================================================
# Pipelines
# =========================================================================

def _text_to_mol(as_pattern: bool) -> Callable[[str], bytes]:
    def impl(text: str) -> bytes:
        return codec.text_to_blob(text, as_pattern)
    return impl


def _mol_to_text(as_pattern: bool) -> Callable[[bytes], str]:
    def impl(blob: bytes) -> str:
        return codec.blob_to_text(blob, as_pattern)
    return impl


def _match(superstruct: bool) -> Callable[[bytes, bytes], int]:
    """
    ``mol_is_substruct(a, b)``: does ``a`` contain ``b``.
    ``mol_is_superstruct(a, b)``: does ``b`` contain ``a``.
    """
    def impl(blob_a: bytes, blob_b: bytes) -> int:
        with contextlib.ExitStack() as stack:
            a = stack.enter_context(codec.decode(blob_a))
            b = stack.enter_context(codec.decode(blob_b))
            with toolkit_call(ComputeError, "substructure match"):
                if superstruct:
                    return int(is_superstructure(b, a))
                return int(is_substructure(b, a))
    return impl


def _mol_cmp(blob_a: bytes, blob_b: bytes) -> int:
    with contextlib.ExitStack() as stack:
        a = stack.enter_context(codec.decode(blob_a))
        b = stack.enter_context(codec.decode(blob_b))
        with toolkit_call(ComputeError, "structure comparison"):
            return compare(a, b)


def _descriptor(name: str) -> Callable[[bytes], Any]:
    def impl(blob: bytes):
        with codec.decode(blob) as handle:
            with toolkit_call(ComputeError, f"{name} descriptor"):
                return descriptors.compute_descriptor(name, handle)
    return impl


def _fingerprint(name: str) -> Callable[..., bytes]:
    def impl(blob: bytes, *params: int) -> bytes:
        with contextlib.ExitStack() as stack:
            handle = stack.enter_context(codec.decode(blob))
            bits = stack.enter_context(generators.generate(name, handle, *params))
            return packing.pack(bits)
    return impl


def _similarity(metric: str) -> Callable[[bytes, bytes], float]:
    func = similarity.METRICS[metric]

    def impl(blob_a: bytes, blob_b: bytes) -> float:
        with contextlib.ExitStack() as stack:
            a = stack.enter_context(packing.unpack_blob(blob_a))
            b = stack.enter_context(packing.unpack_blob(blob_b))
            similarity.check_lengths(a, b)
            return func(a, b)
    return impl


def _bfp_length(blob: bytes) -> int:
    with packing.unpack_blob(blob) as bits:
        return len(bits)


def _bfp_weight(blob: bytes) -> int:
    packing.check_blob(blob)
    return packing.bit_weight(blob)


# =========================================================================
# Registry
# =========================================================================

def _build_specs() -> Dict[str, FunctionSpec]:
    specs = [
        FunctionSpec("mol", (TEXT,), _text_to_mol(as_pattern=False)),
        FunctionSpec("qmol", (TEXT,), _text_to_mol(as_pattern=True)),
        FunctionSpec("mol_smiles", (BLOB,), _mol_to_text(as_pattern=False)),
        FunctionSpec("mol_smarts", (BLOB,), _mol_to_text(as_pattern=True)),
        FunctionSpec("mol_is_substruct", (BLOB, BLOB), _match(superstruct=False)),
        FunctionSpec("mol_is_superstruct", (BLOB, BLOB), _match(superstruct=True)),
        FunctionSpec("mol_cmp", (BLOB, BLOB), _mol_cmp),
        FunctionSpec("bfp_length", (BLOB,), _bfp_length),
        FunctionSpec("bfp_weight", (BLOB,), _bfp_weight),
        FunctionSpec("bfp_dummy", (INTEGER, INTEGER), packing.make_uniform),
    ]
    for name in descriptors.DESCRIPTORS:
        specs.append(FunctionSpec(f"mol_{name}", (BLOB,), _descriptor(name)))
    for name, generator in generators.GENERATORS.items():
        arg_types = (BLOB, INTEGER) if generator.takes_radius else (BLOB,)
        host_name = "mol_bfp_signature" if name == "signature" else f"mol_{name}_bfp"
        specs.append(FunctionSpec(host_name, arg_types, _fingerprint(name)))
    for metric in similarity.METRICS:
        specs.append(FunctionSpec(f"bfp_{metric}", (BLOB, BLOB), _similarity(metric)))
    return {spec.name: spec for spec in specs}


FUNCTION_SPECS: Mapping[str, FunctionSpec] = _build_specs()


def call(name: str, *args: Any) -> Any:
    """
    Run host function ``name`` on already-marshaled host values.

    Raises:
        KeyError: If no function is registered under ``name``.
        CartridgeError: If the call fails; no result is produced.
    """
    spec = FUNCTION_SPECS[name]
    check_args(spec, args)
    return spec.impl(*args)
