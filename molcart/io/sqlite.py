"""Register molcart scalar functions with a SQLite connection."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Callable, Iterable, Optional

from ..errors import CartridgeError
from ..functions import FUNCTION_SPECS, FunctionSpec, call

logger = logging.getLogger(__name__)


def _host_callable(spec: FunctionSpec) -> Callable[..., Any]:
    def func(*args):
        try:
            return call(spec.name, *args)
        except CartridgeError as e:
            # SQLite reports any exception raised here as
            # sqlite3.OperationalError on the statement being executed.
            logger.debug("%s() signaled %s: %s", spec.name, e.code.value, e.message)
            raise

    func.__name__ = spec.name
    return func


def register_functions(
    conn: sqlite3.Connection,
    names: Optional[Iterable[str]] = None,
) -> list[str]:
    """
    Create every molcart scalar function (or only ``names``) on ``conn``.

    Python's ``sqlite3`` turns any exception raised inside a user function
    into a generic ``sqlite3.OperationalError("user-defined function raised
    exception")``, so SQL callers see that a call failed but not its
    :class:`~molcart.errors.ErrorCode`. The code is logged at DEBUG here and
    is available directly from :func:`molcart.functions.call`.

    Returns:
        The names that were registered.
    """
    selected = list(FUNCTION_SPECS) if names is None else list(names)
    unknown = [n for n in selected if n not in FUNCTION_SPECS]
    if unknown:
        raise ValueError(f"Unknown function(s): {unknown}. Allowed: {list(FUNCTION_SPECS)}")

    for name in selected:
        spec = FUNCTION_SPECS[name]
        conn.create_function(
            spec.name,
            spec.arity,
            _host_callable(spec),
            deterministic=spec.deterministic,
        )
    logger.debug("registered %d molcart function(s)", len(selected))
    return selected
