"""
Type definitions shared by the graph helpers and the dashboard front end.

Nodes are duck-typed: anything exposing an ordered sequence of successors
under the neighbour key (as an attribute or a mapping item) can be traversed
and grouped.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, TypedDict, TypeVar, runtime_checkable

# Basic type variables for generic operations
T = TypeVar("T")

# Data Type
type Json = None | int | float | str | bool | list[Json] | dict[str, Json]

# Called on each visited node, returns True to stop expanding that node
type StepFunc[T] = Callable[[T], bool]

# A group of nodes in the same connected component
type Group[T] = list[T]


@runtime_checkable
class HasSuccessors(Protocol):
    """Node exposing its outgoing edges as an ordered sequence."""

    @property
    def next_nodes(self) -> Sequence[Any]: ...


@dataclass(eq=False)
class PlanNode:
    """
    A node of a query plan as shown on the dashboard.

    Compared and hashed by identity: two operators with the same name and
    payload are still two different nodes.
    """

    node_id: str
    name: str
    next_nodes: list[PlanNode] = field(default_factory=list)
    payload: Json = None

    def __repr__(self) -> str:
        return f"PlanNode({self.node_id!r}, {self.name!r})"


# File format
class PlanEntry(TypedDict, total=False):
    id: str
    name: str
    next: list[str]
    payload: Json


class PlanData(TypedDict):
    nodes: list[PlanEntry]
