"""Unit tests for the grad/grads convenience helpers."""

import math

import pytest

from scalar_autodiff import EngineConfig, Node, grad, grads, grads_list, set_config, value


class TestGrad:

    def test_square(self):
        assert grad(lambda x: x * x, 3.0) == 6.0

    def test_tanh_chain(self):
        g = grad(lambda x: (x * 2.0).tanh(), 0.25)
        assert g == pytest.approx(2.0 * (1.0 - math.tanh(0.5) ** 2))

    def test_constant_function_has_zero_gradient(self):
        assert grad(lambda x: 42.0, 1.0) == 0.0

    def test_runs_in_isolated_graph(self, fresh_graph):
        grad(lambda x: x + 1.0, 1.0)
        assert len(fresh_graph) == 0

    def test_uses_configured_seed(self):
        set_config(EngineConfig(default_seed=2.0))
        assert grad(lambda x: x * 5.0, 1.0) == 10.0


class TestGrads:

    def test_dict_inputs(self):
        out = grads(lambda v: v["a"] * v["b"] + v["c"], {"a": 2.0, "b": -3.0, "c": 10.0})
        assert out == {"a": -3.0, "b": 2.0, "c": 1.0}
        assert list(out) == ["a", "b", "c"]

    def test_list_inputs(self):
        assert grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0]) == [4.0, 3.0]


def test_value_helper():
    assert value(Node(2.5)) == 2.5
    assert value(7) == 7
