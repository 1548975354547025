"""Unit tests for the read-only graph export."""

import pytest

from scalar_autodiff import Node, backward, export_graph


class TestExport:

    def test_canonical_graph(self):
        a, b = Node(2.0, "a"), Node(-3.0, "b")
        e = (a * b).with_label("e")
        out = e.tanh().with_label("out")
        backward(out, seed=1.0)

        exported = export_graph(out)
        labels = [r.label for r in exported.nodes]
        assert labels == ["out", "e", "a", "b"]
        ops = {r.label: r.op for r in exported.nodes}
        assert ops == {"out": "tanh", "e": "*", "a": None, "b": None}
        assert exported.edges == [(out.index, e.index), (e.index, a.index), (e.index, b.index)]

        rec = {r.label: r for r in exported.nodes}
        assert rec["out"].grad == 1.0
        assert rec["a"].value == 2.0
        assert rec["a"].grad == pytest.approx(a.grad)

    def test_add_symbol(self):
        out = Node(1.0) + Node(2.0)
        assert export_graph(out).nodes[0].op == "+"

    def test_shared_node_listed_once_with_both_edges(self):
        a = Node(3.0, "a")
        sq = a * a
        exported = export_graph(sq)
        assert [r.label for r in exported.nodes].count("a") == 1
        assert exported.edges == [(sq.index, a.index), (sq.index, a.index)]

    def test_single_leaf(self):
        a = Node(1.0, "a")
        exported = export_graph(a)
        assert len(exported.nodes) == 1
        assert exported.edges == []

    def test_export_does_not_mutate(self):
        a, b = Node(2.0), Node(3.0)
        out = a * b
        backward(out, seed=1.0)
        snapshot = [(n.value, n.grad) for n in (a, b, out)]
        export_graph(out)
        assert [(n.value, n.grad) for n in (a, b, out)] == snapshot

    def test_to_dict_uses_builtin_types(self):
        a = Node(2.0, "a")
        out = a + 1.0
        d = export_graph(out).to_dict()
        assert d["edges"] == [[out.index, a.index], [out.index, out.operands[1]]]
        assert d["nodes"][0] == {"index": out.index, "label": "", "value": 3.0, "grad": 0.0, "op": "+"}
        assert type(d["nodes"][0]["value"]) is float
