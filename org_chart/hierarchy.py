"""
Reporting tree built from a flat list of employee records.

Construction is two passes over the input (index by Id, then link each
record under its manager). It does not look for cycles: a record that
names itself as manager becomes its own child. Traversal helpers below
guard against re-entering a node that is already on the current path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from org_chart.config import COL_COMPANY, COL_ID, COL_MANAGER_ID

logger = logging.getLogger(__name__)


@dataclass
class TreeNode:
    record: dict
    children: list[TreeNode] = field(default_factory=list)
    position: int = 0

    @property
    def id(self) -> str | None:
        return self.record.get(COL_ID)

    @property
    def manager_id(self) -> str | None:
        return self.record.get(COL_MANAGER_ID)

    @property
    def company(self) -> str | None:
        return self.record.get(COL_COMPANY)

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    @property
    def key(self) -> str:
        """Stable key for per-node UI state; falls back to the row position."""
        if self.id is not None:
            return self.id
        return f"row:{self.position}"


Forest = list[TreeNode]


# -------------------------------------------
# BUILD PARENT → CHILD RELATIONSHIPS
# -------------------------------------------
def build_forest(records: list[dict]) -> Forest:
    nodes = [TreeNode(record=r, position=i) for i, r in enumerate(records)]

    by_id: dict[str, TreeNode] = {}
    for node in nodes:
        if node.id is None:
            continue
        if node.id in by_id:
            logger.debug("Duplicate Id %r: row %d shadows row %d",
                         node.id, node.position, by_id[node.id].position)
        by_id[node.id] = node

    roots: Forest = []
    for node in nodes:
        # duplicates resolve to whichever node holds the Id last
        placed = by_id[node.id] if node.id is not None else node
        # Id-less records are never linked, they stay roots
        manager = by_id.get(node.manager_id) if node.id is not None and node.manager_id else None

        if manager is not None:
            manager.children.append(placed)
        else:
            roots.append(placed)

    logger.info("Built hierarchy: %d record(s), %d root(s)", len(records), len(roots))
    if len(roots) > 1:
        logger.warning("Multiple roots detected. The chart will have multiple top-level trees.")
    return roots


# -------------------------------------------
# TRAVERSAL
# -------------------------------------------
def walk(forest: Forest) -> Iterator[tuple[TreeNode, int]]:
    """Depth-first (node, depth) pairs in child order."""

    def _walk(node, depth, path):
        yield node, depth
        path = path | {id(node)}
        for child in node.children:
            if id(child) in path:
                continue
            yield from _walk(child, depth + 1, path)

    for root in forest:
        yield from _walk(root, 0, frozenset())


def count_nodes(forest: Forest) -> int:
    return sum(1 for _ in walk(forest))


def forest_to_dicts(forest: Forest) -> list[dict]:
    """Nested dicts (record fields + "children"), ready for json.dump."""

    def to_dict(node, path):
        path = path | {id(node)}
        data = dict(node.record)
        data["children"] = [to_dict(c, path) for c in node.children if id(c) not in path]
        return data

    return [to_dict(root, frozenset()) for root in forest]
