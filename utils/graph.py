"""
Functions related to graphs
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from constants import NEIGHBOUR_KEY
from localtypes import Group
from utils.algorithms.traversal import graph_bfs, successors_of

T = TypeVar("T")

logger = logging.getLogger(__name__)

UNASSIGNED = -1


@dataclass(eq=False)
class ShellNode(Generic[T]):
    """
    Undirected stand-in for a node of the input graph.

    Holds the original node, edges in both directions and the group id,
    so the input never has to be touched.
    """

    val: T
    next_nodes: "list[ShellNode[T]]" = field(default_factory=list)
    group: int = UNASSIGNED


def build_shell_graph(
    nodes: Iterable[T], neighbour_key: str = NEIGHBOUR_KEY
) -> dict[int, ShellNode[T]]:
    """
    Make an undirected shell graph from the original directed graph.

    Args:
        nodes: Closed collection of nodes, every successor must be a member.
        neighbour_key: Attribute or mapping key holding the successors.

    Returns:
        Shell nodes keyed by the id() of their original node, in input order.

    Raises:
        ValueError: If a successor is not part of the collection.
    """
    node_to_shell: dict[int, ShellNode[T]] = {}
    for node in nodes:
        if id(node) not in node_to_shell:
            node_to_shell[id(node)] = ShellNode(node)

    for shell in list(node_to_shell.values()):
        for next_node in successors_of(shell.val, neighbour_key):
            next_shell = node_to_shell.get(id(next_node))
            if next_shell is None:
                raise ValueError(
                    f"Successor {next_node!r} of {shell.val!r} is not in the node collection"
                )
            shell.next_nodes.append(next_shell)
            next_shell.next_nodes.append(shell)

    return node_to_shell


def assign_group_ids(shells: Iterable[ShellNode[Any]]) -> int:
    """
    Give every shell node the id of its connected component.

    Ids start at 0 and follow the iteration order of `shells`.

    Returns:
        The number of groups.
    """
    count = 0
    for shell in shells:
        if shell.group != UNASSIGNED:
            continue

        group = count
        count += 1

        def mark(current: ShellNode[Any]) -> bool:
            current.group = group
            return False

        graph_bfs(shell, mark)
    return count


def group_connected_components(
    nodes: Iterable[T], neighbour_key: str = NEIGHBOUR_KEY
) -> list[Group[T]]:
    """
    Group nodes in the same connected component, edges taken in either direction.

    The input is not changed and the output holds the original references.
    Groups come in order of their first member in `nodes`, and members keep
    their input order.

    Example:
        >>> a, b, c = {"next_nodes": []}, {"next_nodes": []}, {"next_nodes": []}
        >>> a["next_nodes"].append(b)
        >>> [len(group) for group in group_connected_components([a, b, c])]
        [2, 1]
    """
    node_to_shell = build_shell_graph(nodes, neighbour_key)
    count = assign_group_ids(node_to_shell.values())

    groups: list[Group[T]] = [[] for _ in range(count)]
    for shell in node_to_shell.values():
        groups[shell.group].append(shell.val)

    logger.debug(
        "Grouped %d nodes into %d connected components", len(node_to_shell), count
    )
    return groups

