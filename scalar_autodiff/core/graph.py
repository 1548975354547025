# scalar_autodiff/core/graph.py
from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, List, Optional
from contextlib import contextmanager
import logging
import weakref

from .errors import GraphMismatchError

if TYPE_CHECKING:
    from .node import Node

logger = logging.getLogger(__name__)


class Graph:
    """
    Arena of nodes in creation order.

    A node's operands always exist before the node itself, so creation order
    is a topological order and arena indices can be compared to order work.
    Indices are never reused.

    The arena only holds weak references: a node keeps its operands alive,
    and once the last reference to an output is dropped, its whole upstream
    subgraph leaves the arena.
    """
    def __init__(self):
        self._nodes: "weakref.WeakValueDictionary[int, Node]" = weakref.WeakValueDictionary()
        self._next_index = 0

    @property
    def nodes(self) -> List["Node"]:
        """Live nodes, in creation order."""
        return [node for _, node in sorted(self._nodes.items())]

    def reset(self):
        """Drop every node. Dropped nodes are detached and can no longer be traversed."""
        for node in list(self._nodes.values()):
            node.graph = None
            node.index = -1
        self._nodes.clear()

    def push_node(self, node: "Node") -> int:
        """Register `node` in the arena and return its index."""
        index = self._next_index
        self._nodes[index] = node
        self._next_index += 1
        return index

    def owns(self, node: "Node") -> bool:
        return self._nodes.get(node.index) is node

    def __len__(self):
        return len(self._nodes)

    def __getitem__(self, index: int) -> "Node":
        try:
            return self._nodes[index]
        except KeyError:
            raise GraphMismatchError(f"node {index} is not in this graph") from None

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.nodes)

    def __repr__(self):
        return f"Graph(nodes={len(self._nodes)})"

# Default arena; new leaves land here unless a graph is given or swapped in
global_graph = Graph()

@contextmanager
def use_graph(graph: Optional[Graph] = None):
    """
    Context manager to temporarily build into another graph (fresh by default):
        with use_graph() as g:
            ... build computation ...
            backward(y, seed=1.0)
    """
    from . import graph as _graph_mod  # rebinding the module attribute
    prev = _graph_mod.global_graph
    try:
        _graph_mod.global_graph = graph if graph is not None else Graph()
        logger.debug("switched active graph to %r", _graph_mod.global_graph)
        yield _graph_mod.global_graph
    finally:
        _graph_mod.global_graph = prev
