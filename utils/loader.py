"""
Module used to import plan graphs from JSON files
"""

import json
import logging
import os

from constants import DATA
from localtypes import PlanData, PlanNode

logger = logging.getLogger(__name__)


def path_to_plan(path: str) -> PlanData:
    """Read a plan graph file, relative paths are resolved against DATA."""
    if not os.path.isabs(path) and not os.path.exists(path):
        path = os.path.join(DATA, path)
    with open(path, "r", encoding="utf-8") as file:
        data = json.load(file)

    if not isinstance(data, dict) or not isinstance(data.get("nodes"), list):
        raise ValueError(f"Error: {path} has no 'nodes' list")
    return data


def plan_to_nodes(data: PlanData) -> list[PlanNode]:
    """
    Build linked PlanNodes from a plan graph description.

    Each entry needs an "id". "name" defaults to the id, "next" to no
    successors and "payload" to the entry itself.

    Raises:
        ValueError: On a missing, duplicate or unknown node id, an entry that
            is not an object or a "next" that is not a list.
    """
    by_id: dict[str, PlanNode] = {}
    for entry in data["nodes"]:
        if not isinstance(entry, dict):
            raise ValueError(f"Error: plan entry is not an object: {entry!r}")
        if "id" not in entry:
            raise ValueError(f"Error: plan entry without an 'id': {entry}")
        node_id = str(entry["id"])
        if node_id in by_id:
            raise ValueError(f"Error: duplicate node id {node_id!r}")
        by_id[node_id] = PlanNode(
            node_id=node_id,
            name=str(entry.get("name", node_id)),
            payload=entry.get("payload", dict(entry)),
        )

    for entry in data["nodes"]:
        node = by_id[str(entry["id"])]
        next_ids = entry.get("next", [])
        if not isinstance(next_ids, list):
            raise ValueError(
                f"Error: 'next' of node {node.node_id!r} is not a list: {next_ids!r}"
            )
        for next_id in next_ids:
            next_node = by_id.get(str(next_id))
            if next_node is None:
                raise ValueError(
                    f"Error: node {node.node_id!r} points to unknown node {next_id!r}"
                )
            node.next_nodes.append(next_node)

    logger.debug("Loaded %d plan nodes", len(by_id))
    return list(by_id.values())
