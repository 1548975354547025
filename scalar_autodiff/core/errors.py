# scalar_autodiff/core/errors.py
"""
Exceptions raised by the engine.

The numeric path has no recoverable errors: NaN and +/-inf flow through the
graph like any other float. What remains are broken structural invariants,
which are programming errors and should stop the program early.
"""


class AutodiffError(Exception):
    """Base class for all engine errors."""


class ArityError(AutodiffError, AssertionError):
    """A node's operation does not match the number of operands it holds."""


class GraphMismatchError(AutodiffError, ValueError):
    """Operands that live in different graphs were combined."""
