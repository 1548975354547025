# scalar_autodiff/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .config import get_config
from .engine import backward
from .graph import use_graph
from .node import Node


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return float(x.value) if isinstance(x, Node) else x


def _as_output(y: Any) -> Node:
    # f may ignore its inputs and return a plain number
    return y if isinstance(y, Node) else Node(y, label="y", trainable=False)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Any], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Runs one backward pass within a fresh, isolated graph.
    """
    with use_graph():
        x = Node(x0, label="x")
        y = _as_output(f(x))
        backward(y, seed=get_config().default_seed)
        return float(x.grad)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Any],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE backward pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    with use_graph():
        nodes = {k: Node(v, label=k) for k, v in inputs.items()}
        y = _as_output(f(nodes))
        backward(y, seed=get_config().default_seed)
        return {k: float(nodes[k].grad) for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Any], x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_graph():
        xs = [Node(v, label=f"x{i}") for i, v in enumerate(x0_list)]
        y = _as_output(f(xs))
        backward(y, seed=get_config().default_seed)
        return [float(x.grad) for x in xs]
