"""
Computation graph utilities.
Print and summarise the structure of a graph arena.
"""

import numpy as np
from typing import Dict
from collections import Counter


def _op_name(node) -> str:
    return node.operation.symbol if node.operation is not None else "leaf"


def get_graph_stats(graph) -> Dict:
    """
    Collect graph statistics without printing.

    Returns:
        dict with node/edge counts, fan-in/fan-out max and mean,
        leaf count and per-operation counts
    """
    if not graph.nodes:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    nodes = graph.nodes
    n_nodes = len(nodes)
    n_edges = sum(len(node.operands) for node in nodes)

    # fan-in: operands per node
    fan_ins = [len(node.operands) for node in nodes]

    # fan-out: how many nodes use each node as an operand (indices are sparse)
    uses = Counter(idx for node in nodes for idx in node.operands)
    fan_outs = [uses[node.index] for node in nodes]

    op_counter = Counter(_op_name(node) for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': op_counter.get('leaf', 0),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(graph, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph.

    Args:
        graph: Graph arena
        detailed: also list every node (only for graphs of at most 100 nodes)

    Returns:
        the statistics dict from get_graph_stats()
    """
    if not graph.nodes:
        print("Empty computation graph")
        return {}

    stats = get_graph_stats(graph)

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for node in graph.nodes:
            operand_info = ", ".join(f"Node{idx}" for idx in node.operands)
            print(f"Node {node.index:3d}: {_op_name(node):12s} <- [{operand_info}]")

    print("="*70 + "\n")

    return stats


def print_computation_graph(graph, max_nodes: int = 20) -> None:
    """
    Print the graph one node per line with value, gradient and operands.

    Args:
        graph: Graph arena
        max_nodes: print at most this many nodes
    """
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    if not graph.nodes:
        print("Empty graph")
        return

    for node in graph.nodes[:max_nodes]:
        head = (f"Node {node.index:4d}: {_op_name(node):6s} {node.label:8s} "
                f"({float(node.value):10.6f}, grad {float(node.grad):10.6f})")
        if node.operands:
            operand_info = ", ".join(f"Node{idx}" for idx in node.operands)
            print(f"{head} <- [{operand_info}]")
        else:
            print(f"{head} [leaf/input]")

    if len(graph.nodes) > max_nodes:
        print(f"... ({len(graph.nodes) - max_nodes} more nodes)")

    print("="*70 + "\n")
