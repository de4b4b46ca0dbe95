"""Host adapters."""

from .sqlite import register_functions

__all__ = ["register_functions"]
