"""Org chart from a flat employee list: hierarchy, company filter, colors."""

from org_chart.chart import NodeView, OrgChart
from org_chart.companies import parse_companies, resolve_colors
from org_chart.filtering import filter_forest
from org_chart.hierarchy import TreeNode, build_forest
from org_chart.managers import is_manager
from org_chart.records import load_records, normalize_record
from org_chart.visibility import VisibilityState
