# scalar_autodiff/ops/transcendental.py
import numpy as np
from ..core.node import Node, Operation
from ..core.rules import get_rule, register_rule

# d tanh(x)/dx = 1 - tanh(x)^2, written through the node's own output
register_rule(Operation.TANH, forward=np.tanh, partials=lambda out, a: (1.0 - out * out,))

def tanh(x: Node) -> Node:
    if not isinstance(x, Node):
        raise TypeError(f"tanh expects a Node, got {type(x)}")
    with np.errstate(invalid="ignore"):
        out = get_rule(Operation.TANH).forward(x.value)
    return Node(out, operation=Operation.TANH, operands=(x,))
