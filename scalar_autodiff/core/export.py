# scalar_autodiff/core/export.py
"""
Read-only export of a computation graph for renderers.

The export is a plain node/edge list with no drawing format attached:
each record carries label, value, gradient and the operation symbol, and
each edge goes from a node to one of its operands.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .node import Node


@dataclass(frozen=True)
class NodeRecord:
    index: int
    label: str
    value: float
    grad: float
    op: Optional[str]         # "+", "*", "tanh" or None for leaves


@dataclass
class GraphExport:
    nodes: List[NodeRecord] = field(default_factory=list)
    edges: List[Tuple[int, int]] = field(default_factory=list)   # (parent index, operand index)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [asdict(r) for r in self.nodes],
            "edges": [list(e) for e in self.edges],
        }


def export_graph(root: Node) -> GraphExport:
    """
    Snapshot every node reachable from `root`.

    Nodes are listed depth-first starting at `root`, operands in order, each
    node once. An operand used twice by the same node (e.g. a*a) gives two edges.
    """
    out = GraphExport()
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if node.index in seen:
            continue
        seen.add(node.index)
        out.nodes.append(NodeRecord(
            index=node.index,
            label=node.label,
            value=float(node.value),
            grad=float(node.grad),
            op=node.operation.symbol if node.operation is not None else None,
        ))
        children = node.children()
        out.edges.extend((node.index, c.index) for c in children)
        stack.extend(reversed(children))
    return out
