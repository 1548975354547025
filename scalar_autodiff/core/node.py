# scalar_autodiff/core/node.py
from __future__ import annotations
import enum
import numpy as np
from typing import Optional, Sequence, Tuple

from . import graph as graph_mod  # module access so use_graph() swaps are seen
from .errors import ArityError, GraphMismatchError


class Operation(enum.Enum):
    """
    Operation tag carried by every derived node.

    Each member knows its display symbol and the exact number of operands it
    takes; leaves carry no operation at all (``Node.operation is None``).
    """

    ADD = ("+", 2)
    MULTIPLY = ("*", 2)
    TANH = ("tanh", 1)

    def __init__(self, symbol: str, arity: int):
        self.symbol = symbol
        self.arity = arity

    def __str__(self):
        return self.symbol


def check_arity(operation: Optional[Operation], n_operands: int):
    """Raise ArityError unless `n_operands` is what `operation` requires."""
    expected = 0 if operation is None else operation.arity
    if n_operands != expected:
        name = "leaf" if operation is None else operation.name
        raise ArityError(f"{name} expects {expected} operand(s), got {n_operands}")


class Node:
    """
    Scalar vertex of the computation graph.

    Attributes
    ----------
    value : np.float64
        Forward value. Non-finite values are accepted and propagate as-is.
    grad : float
        Partial derivative of the last backward root with respect to this node.
    operation : Optional[Operation]
        None iff the node is a leaf.
    operands : Tuple[int, ...]
        Arena indices of the operands, in order; empty for leaves.
    label : str
        Display name only.
    trainable : bool
        Whether a parameter update may change this leaf's value. Constants
        wrapped from plain numbers are not trainable; derived nodes never are.
    graph : Graph
        The arena that owns this node, or None once detached.
    index : int
        Stable position of this node in its graph; -1 once detached by `Graph.reset()`.
    """

    def __init__(self, value, label: str = "", *, trainable: bool = True, graph=None,
                 operation: Optional[Operation] = None, operands: Sequence["Node"] = ()):
        # `operation`/`operands` are filled in by the operator layer; user code
        # only ever creates leaves.
        if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
            raise TypeError(f"Node only accepts real scalars, but got {type(value)}")
        operands = tuple(operands)
        check_arity(operation, len(operands))

        owner = graph
        for operand in operands:
            if not isinstance(operand, Node):
                raise TypeError(f"operands must be Node instances, got {type(operand)}")
            if not operand.attached:
                raise GraphMismatchError("operand was dropped from its graph by reset()")
            if owner is None:
                owner = operand.graph
            elif operand.graph is not owner:
                raise GraphMismatchError("cannot combine nodes that belong to different graphs")
        if owner is None:
            owner = graph_mod.global_graph

        self.value = np.float64(value)
        self.grad = 0.0
        self.operation = operation
        self.operands: Tuple[int, ...] = tuple(o.index for o in operands)
        self._inputs = operands  # keeps operands alive; the arena only holds weak refs
        self.label = str(label)
        self.trainable = bool(trainable) and operation is None
        self.graph = owner
        self.index = owner.push_node(self)

    @classmethod
    def new(cls, value) -> "Node":
        return cls(value)

    def with_label(self, name) -> "Node":
        self.label = str(name)
        return self

    @property
    def gradient(self):
        return self.grad

    @gradient.setter
    def gradient(self, g):
        self.grad = g

    @property
    def is_leaf(self) -> bool:
        return self.operation is None

    @property
    def attached(self) -> bool:
        """False once the owning graph has been reset."""
        return self.graph is not None and self.graph.owns(self)

    def ensure_attached(self):
        if not self.attached:
            raise GraphMismatchError(f"node {self.label or self.index!r} was dropped from its graph by reset()")

    def children(self) -> Tuple["Node", ...]:
        """Resolve operand indices to the operand nodes themselves."""
        self.ensure_attached()
        return tuple(self.graph[i] for i in self.operands)

    def __str__(self):
        return f"Node(label={self.label}, value={self.value}, grad={self.grad})"

    def __repr__(self):
        op = self.operation.symbol if self.operation is not None else "leaf"
        return (f"Node({float(self.value)!r}, grad={float(self.grad)!r}, op={op}, "
                f"label={self.label!r}, index={self.index})")

    # Operator overloading for the operator layer
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import multiply
        return multiply(other, self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)
