"""
scalar_autodiff: reverse-mode automatic differentiation over scalar values.

Usage:
    from scalar_autodiff import Node, backward

    a = Node(2.0, "a")
    b = Node(-3.0, "b")
    out = (a * b + 10.0).tanh()
    backward(out, seed=1.0)
    a.grad, b.grad
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from . import ops
from .ops import add, multiply, mul, tanh

__version__ = "0.1.0"

__all__ = list(_core_all) + ["ops", "add", "multiply", "mul", "tanh"]
