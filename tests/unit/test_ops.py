"""Unit tests for the operator layer: forward values and graph wiring."""

import math
import warnings

import pytest

from scalar_autodiff import Node, Operation, add, multiply, tanh


class TestForwardValues:

    def test_add(self):
        out = add(Node(2.0), Node(-3.0))
        assert out.value == -1.0
        assert out.operation is Operation.ADD

    def test_multiply(self):
        out = multiply(Node(2.0), Node(-3.0))
        assert out.value == -6.0
        assert out.operation is Operation.MULTIPLY

    def test_tanh(self):
        out = tanh(Node(0.5))
        assert out.value == pytest.approx(math.tanh(0.5))
        assert out.operation is Operation.TANH
        assert len(out.operands) == 1

    def test_operator_overloads(self):
        a, b = Node(2.0), Node(4.0)
        assert (a + b).value == 6.0
        assert (a * b).value == 8.0
        assert a.tanh().value == pytest.approx(math.tanh(2.0))

    def test_operands_are_unchanged(self):
        a, b = Node(2.0, "a"), Node(3.0, "b")
        multiply(a, b)
        assert (a.value, a.grad, a.label) == (2.0, 0.0, "a")
        assert (b.value, b.grad, b.label) == (3.0, 0.0, "b")

    def test_overflow_goes_to_infinity_without_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            out = Node(1e308) * Node(10.0)
            assert out.value == math.inf
            assert (Node(-1e308) + Node(-1e308)).value == -math.inf

    def test_invalid_operation_gives_nan_without_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert math.isnan((Node(math.inf) * Node(0.0)).value)
            assert math.isnan((Node(math.inf) + Node(-math.inf)).value)
            assert math.isnan(Node(math.nan).tanh().value)

    def test_nan_propagates(self):
        out = Node(float("nan")) + Node(1.0)
        assert math.isnan(out.value)


class TestPlainNumbers:
    """Plain numbers become constant leaves in the node operand's graph."""

    def test_right_constant(self):
        a = Node(2.0)
        out = a + 3.0
        const = out.children()[1]
        assert out.value == 5.0
        assert const.is_leaf
        assert not const.trainable
        assert const.graph is a.graph

    def test_reflected_constant_keeps_operand_order(self):
        a = Node(2.0)
        out = 3 * a
        left, right = out.children()
        assert left.value == 3.0
        assert right is a

    def test_two_plain_numbers_rejected(self):
        with pytest.raises(TypeError):
            add(1.0, 2.0)

    def test_tanh_of_plain_number_rejected(self):
        with pytest.raises(TypeError):
            tanh(0.5)


class TestSharedOperands:
    """A node may feed any number of later nodes."""

    def test_same_node_used_twice(self):
        a = Node(3.0)
        sq = a * a
        assert sq.value == 9.0
        assert sq.operands == (a.index, a.index)

    def test_node_reused_across_expressions(self):
        a = Node(2.0)
        left = a + 1.0
        right = a * 5.0
        assert left.children()[0] is a
        assert right.children()[0] is a
