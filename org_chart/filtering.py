"""Company filter over a reporting forest."""

from __future__ import annotations

from org_chart.companies import parse_companies
from org_chart.config import ALL_COMPANIES
from org_chart.hierarchy import Forest, TreeNode


def is_all_companies(company) -> bool:
    return company is None or company == ALL_COMPANIES


def filter_forest(forest: Forest, company: str | None) -> Forest:
    """
    Keep every node whose Company lists `company`, plus the managers
    above it. Subtrees without a match are dropped, even under a matching
    manager. Returns new nodes; the input forest is left untouched.
    """
    if is_all_companies(company):
        return forest

    def prune(nodes, path):
        kept = []
        for node in nodes:
            if id(node) in path:
                continue
            children = prune(node.children, path | {id(node)})
            if company in parse_companies(node.company) or children:
                kept.append(TreeNode(record=node.record, children=children, position=node.position))
        return kept

    return prune(forest, frozenset())
