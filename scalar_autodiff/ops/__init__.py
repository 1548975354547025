# scalar_autodiff/ops/__init__.py

# Importing the modules registers their local-derivative rules
from . import arithmetic
from . import transcendental

# Convenience re-exports so users can do: from scalar_autodiff.ops import add, tanh
from .arithmetic import add, multiply, mul
from .transcendental import tanh

__all__ = [
    "add", "multiply", "mul",
    "tanh",
]
