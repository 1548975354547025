# scalar_autodiff/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import List, Optional

from .config import UPDATE_SCOPES, get_config
from .node import Node, check_arity
from .rules import get_rule

logger = logging.getLogger(__name__)

def topological_order(root: Node) -> List[Node]:
    """
    Every node reachable from `root`, operands before the nodes that use them.

    Arena indices already respect dependencies, so sorting the reachable set
    by index is enough. The walk is iterative to stay clear of the recursion
    limit on long chains. Raises GraphMismatchError for a node detached by
    `Graph.reset()`.
    """
    root.ensure_attached()
    graph = root.graph
    seen = set()
    stack = [root.index]
    while stack:
        idx = stack.pop()
        if idx in seen:
            continue
        seen.add(idx)
        stack.extend(graph[idx].operands)
    return [graph[i] for i in sorted(seen)]

def zero_grad(root: Node):
    """Set the gradient of `root` and everything upstream of it to zero."""
    for node in topological_order(root):
        node.grad = 0.0

def backward(root: Node, *, seed: Optional[float] = None, accumulate: bool = False):
    """
    Run one reverse pass from `root`.

    Args:
        root: output node; its gradient must already be seeded unless `seed`
              is given (canonically 1.0).
        seed: if not None, written into `root.grad` before the pass.
        accumulate: keep the gradients currently stored upstream of `root`
              and add into them. By default they are reset to zero first,
              which makes repeated calls return the same gradients.

    Notes:
        - For each node, in reverse topological order: p.grad += node.grad * (∂node/∂p).
        - A node shared by several users receives every contribution before
          it propagates further.
    """
    if seed is not None:
        root.grad = float(seed)

    order = topological_order(root)
    if not accumulate:
        for node in order:
            if node is not root:
                node.grad = 0.0

    # Backward sweep; inf and nan propagate silently
    with np.errstate(over="ignore", invalid="ignore"):
        for node in reversed(order):
            check_arity(node.operation, len(node.operands))
            if node.is_leaf:
                continue  # nothing to propagate
            operands = node.children()
            partials = get_rule(node.operation).partials(node.value, *(p.value for p in operands))
            for p, local_partial in zip(operands, partials):
                # Accumulate: p.grad += node.grad * (∂node/∂p)
                p.grad = p.grad + node.grad * local_partial

    logger.debug("backward from node %d visited %d nodes", root.index, len(order))

def forward(root: Node):
    """Recompute the value of every derived node upstream of `root` from its operands."""
    with np.errstate(over="ignore", invalid="ignore"):
        for node in topological_order(root):
            check_arity(node.operation, len(node.operands))
            if node.is_leaf:
                continue
            node.value = get_rule(node.operation).forward(*(p.value for p in node.children()))
    return root.value

def apply_gradient(root: Node, learning_rate: float, *, scope: Optional[str] = None) -> int:
    """
    One gradient-descent step: value -= grad * learning_rate.

    scope="parameters" touches only trainable leaves; derived values go stale
    until `forward(root)` is run. scope="all" decrements every reachable node,
    intermediates included. None uses the configured default.

    Returns the number of nodes updated.
    """
    scope = scope if scope is not None else get_config().update_scope
    if scope not in UPDATE_SCOPES:
        raise ValueError(f"scope must be one of {UPDATE_SCOPES}, got {scope!r}")

    updated = 0
    with np.errstate(over="ignore", invalid="ignore"):
        for node in topological_order(root):
            if scope == "parameters" and not (node.is_leaf and node.trainable):
                continue
            node.value = node.value - node.grad * learning_rate
            updated += 1

    logger.debug("applied lr=%g to %d node(s) with scope=%s", learning_rate, updated, scope)
    return updated
