"""
Org chart session: the loaded records, the tree built from them, the
active company filter and the per-node display state a renderer needs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from org_chart.companies import css_background, resolve_colors
from org_chart.config import (
    ALL_COMPANIES,
    ALL_COMPANIES_LABEL,
    DEFAULT_SCALE,
    MAX_SCALE,
    MIN_SCALE,
    SCALE_STEP,
)
from org_chart.filtering import filter_forest, is_all_companies
from org_chart.hierarchy import Forest, TreeNode, build_forest
from org_chart.managers import manager_ids
from org_chart.records import normalize_records
from org_chart.visibility import VisibilityState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeView:
    key: str
    colors: tuple[str, ...]
    background: str
    is_manager: bool
    collapsed: bool
    has_children: bool


def clamp_scale(scale: float) -> float:
    return round(min(max(scale, MIN_SCALE), MAX_SCALE), 2)


class OrgChart:
    def __init__(self, rows=None, company: str | None = ALL_COMPANIES):
        self.visibility = VisibilityState()
        self.scale = DEFAULT_SCALE
        self._company = company
        self._records: list[dict] = []
        self._forest: Forest = []
        self._managers: set[str] = set()
        self._visible: Forest = []
        if rows is not None:
            self.load(rows)

    # -------------------------------------------
    # DATA
    # -------------------------------------------
    def load(self, rows) -> None:
        """Replace records and tree together; every node starts expanded."""
        records = normalize_records(rows)
        forest = build_forest(records)
        visible = filter_forest(forest, self._company)

        self._records, self._forest = records, forest
        self._managers = manager_ids(records)
        self._visible = visible
        self.visibility.reset()

    def set_filter(self, company: str | None) -> None:
        self._visible = filter_forest(self._forest, company)
        self._company = company
        logger.info("Company filter %r: %d root(s) visible", company, len(self._visible))

    @property
    def records(self) -> list[dict]:
        return self._records

    @property
    def forest(self) -> Forest:
        return self._forest

    @property
    def company_filter(self) -> str | None:
        return self._company

    @property
    def visible_forest(self) -> Forest:
        return self._visible

    @property
    def title(self) -> str:
        if is_all_companies(self._company):
            return ALL_COMPANIES_LABEL
        return self._company

    # -------------------------------------------
    # PER-NODE QUERIES
    # -------------------------------------------
    def is_manager(self, node: TreeNode) -> bool:
        return node.id is not None and node.id in self._managers

    def node_view(self, node: TreeNode) -> NodeView:
        colors = resolve_colors(node.company)
        return NodeView(
            key=node.key,
            colors=tuple(colors),
            background=css_background(colors),
            is_manager=self.is_manager(node),
            collapsed=self.visibility.is_collapsed(node.key),
            has_children=node.has_children,
        )

    def toggle(self, node: TreeNode) -> bool:
        return self.visibility.toggle(node.key)

    def visible_children(self, node: TreeNode) -> list[TreeNode]:
        if self.visibility.is_collapsed(node.key):
            return []
        return node.children

    # -------------------------------------------
    # ZOOM
    # -------------------------------------------
    def zoom_in(self) -> float:
        self.scale = clamp_scale(self.scale + SCALE_STEP)
        return self.scale

    def zoom_out(self) -> float:
        self.scale = clamp_scale(self.scale - SCALE_STEP)
        return self.scale

    def reset_zoom(self) -> float:
        self.scale = 1.0
        return self.scale
