# scalar_autodiff/core/rules.py
"""
Registry of per-operation forward functions and local-derivative rules.

Each operation module registers its rule at import time. The backward engine
only ever asks this registry for the local partials of a node, so a new
operation needs a new `Operation` member and a `register_rule` call; the
traversal code stays the same.

A rule's `partials` receives the node's own value first and then its operand
values, and returns one partial derivative per operand:

    partials(out, *operand_values) -> (d out / d operand_0, ...)

Passing `out` lets rules such as tanh express the derivative through the
already computed output.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .errors import AutodiffError
from .node import Operation


@dataclass(frozen=True)
class Rule:
    forward: Callable[..., float]
    partials: Callable[..., Tuple[float, ...]]


_RULES: Dict[Operation, Rule] = {}


def register_rule(operation: Operation, forward, partials):
    _RULES[operation] = Rule(forward=forward, partials=partials)


def get_rule(operation: Operation) -> Rule:
    try:
        return _RULES[operation]
    except KeyError:
        raise AutodiffError(f"no rule registered for operation {operation.name}") from None
