"""
Inspect plan graphs from the command line.

Commands:
    groups FILE            - Print the connected groups of the plan graph
    view FILE [--node ID]  - Open the JSON viewer on a node (or the whole file)
"""

import argparse
import logging
import sys

from constants import DEBUG, LOG_FORMAT
from utils.display import display_groups
from utils.graph import group_connected_components
from utils.io.json_view import JsonViewerApp, format_json
from utils.loader import path_to_plan, plan_to_nodes

logger = logging.getLogger(__name__)


def show_groups(path: str) -> int:
    nodes = plan_to_nodes(path_to_plan(path))
    groups = group_connected_components(nodes)
    logger.info("%s: %d nodes, %d groups", path, len(nodes), len(groups))
    display_groups(groups)
    return 0


def view_node(path: str, node_id: str | None) -> int:
    data = path_to_plan(path)
    if node_id is None:
        JsonViewerApp(format_json(data), sub_title=path).run()
        return 0

    nodes = {node.node_id: node for node in plan_to_nodes(data)}
    if node_id not in nodes:
        logger.error("No node %r in %s", node_id, path)
        return 1
    node = nodes[node_id]
    JsonViewerApp(format_json(node.payload), sub_title=f"{node.node_id}: {node.name}").run()
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect plan graphs")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    groups = subparsers.add_parser("groups", help="Print connected groups")
    groups.add_argument("file", help="Plan graph JSON file")

    view = subparsers.add_parser("view", help="Open the JSON viewer")
    view.add_argument("file", help="Plan graph JSON file")
    view.add_argument("--node", default=None, help="Node id to show")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug or DEBUG else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        if args.command == "groups":
            return show_groups(args.file)
        return view_node(args.file, args.node)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
