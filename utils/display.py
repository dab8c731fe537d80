from collections.abc import Sequence

from localtypes import Group, PlanNode


def display_groups(groups: Sequence[Group[PlanNode]]):
    print(f"{len(groups)} connected group(s)")
    for i, group in enumerate(groups):
        print(f"\nGroup n°{i} ({len(group)} node(s))")
        for node in group:
            successors = ", ".join(next_node.node_id for next_node in node.next_nodes)
            print(f"  {node.node_id}: {node.name}" + (f" -> {successors}" if successors else ""))
