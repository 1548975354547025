# scalar_autodiff/ops/arithmetic.py
import numpy as np
from ..core.node import Node, Operation
from ..core.rules import get_rule, register_rule

register_rule(Operation.ADD,      forward=lambda a, b: a + b, partials=lambda out, a, b: (1.0, 1.0))
register_rule(Operation.MULTIPLY, forward=lambda a, b: a * b, partials=lambda out, a, b: (b, a))

def _as_node(x, like: Node) -> Node:
    """Ensure x is a Node; otherwise wrap it as a constant leaf in `like`'s graph."""
    return x if isinstance(x, Node) else Node(x, trainable=False, graph=like.graph)

def _binary(x, y, operation: Operation) -> Node:
    """
    Generic binary primitive:
      - wraps plain numbers as constant leaves next to the Node operand
      - computes the forward value from the registered rule; overflow goes
        to +/-inf and invalid operations give nan without warnings
      - records (x, y) as the operands of the new node
    """
    if isinstance(x, Node):
        anchor = x
    elif isinstance(y, Node):
        anchor = y
    else:
        raise TypeError(f"{operation.name} needs at least one Node operand")
    x = _as_node(x, anchor)
    y = _as_node(y, anchor)
    with np.errstate(over="ignore", invalid="ignore"):
        out = get_rule(operation).forward(x.value, y.value)
    return Node(out, operation=operation, operands=(x, y))

def add(x, y) -> Node:      return _binary(x, y, Operation.ADD)
def multiply(x, y) -> Node: return _binary(x, y, Operation.MULTIPLY)

mul = multiply
