"""
Breadth-first traversal of plan trees and plan graphs.

Traversals:
    tree_bfs(root, step)        - BFS over a tree, no visited bookkeeping
    graph_bfs(root, step)       - BFS over a general graph, each node visited once
    graph_bfs_order(root)       - Nodes reachable from root in BFS order

Both traversals call `step(node)` on every visited node. Returning True from
`step` stops the traversal from expanding that node's successors; the rest of
the queue is still processed.
"""

from collections import deque
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from constants import NEIGHBOUR_KEY
from localtypes import HasSuccessors, StepFunc

T = TypeVar("T")


def successors_of(node: Any, neighbour_key: str = NEIGHBOUR_KEY) -> Sequence[Any]:
    """
    Returns the successors stored on a node.

    Mappings are read by key, anything else by attribute, so both dataclass
    nodes and plain dicts work. A node without successors yields ().
    """
    if neighbour_key == NEIGHBOUR_KEY and isinstance(node, HasSuccessors):
        successors = node.next_nodes
    elif isinstance(node, Mapping):
        successors = node.get(neighbour_key)
    else:
        successors = getattr(node, neighbour_key, None)
    if successors is None:
        return ()
    return successors


def tree_bfs(root: T, step: StepFunc[T], neighbour_key: str = NEIGHBOUR_KEY) -> None:
    """
    Traverse a tree from its root node, calling `step` on every node.

    Every node is visited once because a tree has a single path to each node.
    Use `graph_bfs` when the structure may share nodes or contain cycles.
    """
    queue = deque([root])
    while queue:
        current = queue.popleft()

        if not step(current):
            queue.extend(successors_of(current, neighbour_key))


def graph_bfs(root: T, step: StepFunc[T], neighbour_key: str = NEIGHBOUR_KEY) -> None:
    """
    Traverse a graph from any of its nodes, calling `step` on every reachable node.

    Nodes are tracked by identity and marked when queued, so a node reachable
    through several paths (diamonds, cycles) is still visited exactly once.

    Args:
        root: Node to start from.
        step: Callback on each visited node, return True to skip its successors.
        neighbour_key: Attribute or mapping key holding the successors.
    """
    queued = {id(root)}
    queue = deque([root])
    while queue:
        current = queue.popleft()

        if step(current):
            continue
        for next_node in successors_of(current, neighbour_key):
            if id(next_node) not in queued:
                queued.add(id(next_node))
                queue.append(next_node)


def graph_bfs_order(root: T, neighbour_key: str = NEIGHBOUR_KEY) -> list[T]:
    """Nodes reachable from root, in the order `graph_bfs` visits them."""
    order: list[T] = []

    def record(node: T) -> bool:
        order.append(node)
        return False

    graph_bfs(root, record, neighbour_key)
    return order


__all__ = [
    "successors_of",
    "tree_bfs",
    "graph_bfs",
    "graph_bfs_order",
]
