"""Shared error types for molcart.

Every failure that reaches the host is one of the codes in :class:`ErrorCode`.
Calls into RDKit go through :func:`toolkit_call`, which turns any exception
raised by the toolkit into the matching :class:`CartridgeError`.
"""

from __future__ import annotations

import contextlib
import enum
import logging
from typing import Dict, Iterator, Type

logger = logging.getLogger(__name__)


class ErrorCode(enum.Enum):
    TYPE_MISMATCH = "type_mismatch"
    MALFORMED_INPUT = "malformed_input"
    PARSE_ERROR = "parse_error"
    RENDER_ERROR = "render_error"
    GENERATION_ERROR = "generation_error"
    SERIALIZATION_ERROR = "serialization_error"
    COMPUTE_ERROR = "compute_error"
    LENGTH_MISMATCH = "length_mismatch"
    OUT_OF_MEMORY = "out_of_memory"


class CartridgeError(Exception):
    """Base error type for molcart."""

    code: ErrorCode

    def __init__(self, message: str = ""):
        super().__init__(message or self.code.value)
        self.message = message or self.code.value

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class TypeMismatch(CartridgeError, TypeError):
    """Raised when an argument's host type is not the one the function takes."""

    code = ErrorCode.TYPE_MISMATCH


class MalformedInput(CartridgeError, ValueError):
    """Raised when a blob cannot be decoded as a structure or fingerprint."""

    code = ErrorCode.MALFORMED_INPUT


class ParseError(CartridgeError, ValueError):
    code = ErrorCode.PARSE_ERROR


class RenderError(CartridgeError, RuntimeError):
    code = ErrorCode.RENDER_ERROR


class GenerationError(CartridgeError, RuntimeError):
    code = ErrorCode.GENERATION_ERROR


class SerializationError(CartridgeError, RuntimeError):
    code = ErrorCode.SERIALIZATION_ERROR


class ComputeError(CartridgeError, RuntimeError):
    code = ErrorCode.COMPUTE_ERROR


class LengthMismatch(CartridgeError, ValueError):
    """Raised when two fingerprints of different bit length are compared."""

    code = ErrorCode.LENGTH_MISMATCH


class OutOfMemory(CartridgeError, MemoryError):
    code = ErrorCode.OUT_OF_MEMORY


_ERRORS_BY_CODE: Dict[ErrorCode, Type[CartridgeError]] = {
    cls.code: cls
    for cls in (
        TypeMismatch,
        MalformedInput,
        ParseError,
        RenderError,
        GenerationError,
        SerializationError,
        ComputeError,
        LengthMismatch,
        OutOfMemory,
    )
}


def error_for(code: ErrorCode) -> Type[CartridgeError]:
    """Return the exception class signaled for ``code``."""
    return _ERRORS_BY_CODE[code]


@contextlib.contextmanager
def toolkit_call(error_cls: Type[CartridgeError], what: str) -> Iterator[None]:
    """
    Boundary around a call into the chemistry toolkit.

    Errors already in the taxonomy pass through untouched. ``MemoryError``
    becomes :class:`OutOfMemory`; any other exception, whatever its type,
    becomes ``error_cls``.

    Args:
        error_cls: Error signaled for toolkit failures.
        what: Short description of the step, used in the message.
    """
    try:
        yield
    except CartridgeError:
        raise
    except MemoryError as e:
        logger.debug("%s: out of memory", what)
        raise OutOfMemory(f"{what}: out of memory") from e
    except Exception as e:
        logger.debug("%s failed (%s): %s", what, error_cls.code.value, e)
        raise error_cls(f"{what} failed: {e}") from e
