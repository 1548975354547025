# scalar_autodiff/core/__init__.py

"""
Core public API for the scalar autodiff package.

This module exposes the set of symbols that users of the engine should
import from `scalar_autodiff.core`. The operator layer lives in
`scalar_autodiff.ops` and registers the local-derivative rules the backward
engine dispatches on.

Exports:
    Node, Operation   : Graph vertex and its operation tag.
    Graph, use_graph  : Node arena and context manager to swap the active one.
    backward          : Reverse pass from a seeded output.
    zero_grad         : Reset gradients upstream of a node.
    apply_gradient    : One gradient-descent step.
    forward           : Recompute derived values after an update.
    export_graph      : Read-only node/edge snapshot for renderers.
    grad, grads       : Convenience derivatives of plain Python functions.
"""

from .errors import AutodiffError, ArityError, GraphMismatchError
from .node import Node, Operation
from .graph import Graph, use_graph
from .engine import backward, zero_grad, apply_gradient, forward, topological_order
from .export import GraphExport, NodeRecord, export_graph
from .graph_utils import get_graph_stats, print_graph_summary, print_computation_graph
from .seeds import grad, grads, grads_list, value
from .config import EngineConfig, get_config, set_config, configure_logging

__all__ = [
    "AutodiffError", "ArityError", "GraphMismatchError",
    "Node", "Operation",
    "Graph", "use_graph",
    "backward", "zero_grad", "apply_gradient", "forward", "topological_order",
    "GraphExport", "NodeRecord", "export_graph",
    "get_graph_stats", "print_graph_summary", "print_computation_graph",
    "grad", "grads", "grads_list", "value",
    "EngineConfig", "get_config", "set_config", "configure_logging",
]
