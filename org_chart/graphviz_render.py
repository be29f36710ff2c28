"""Draw an OrgChart session with graphviz and export it to PNG/PDF/SVG."""

from __future__ import annotations

import logging

from graphviz import Digraph

from org_chart.chart import OrgChart
from org_chart.companies import graphviz_fill, legend_entries
from org_chart.config import (
    BORDER_COLOR,
    COL_COMPANY,
    COL_DEPARTMENT,
    COL_EMAIL,
    COL_LOCATION,
    COL_MOBILE,
    COL_NAME,
    COL_POSITION,
    COLLAPSE_LABEL,
    EXPAND_LABEL,
    FONT,
    LEGEND_TITLE,
    LINE_COLOR,
    MANAGER_LABEL,
    MANAGER_OUTLINE_COLOR,
    NO_COMPANY_COLOR,
    RANKDIR,
)

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("png", "pdf", "svg")
EXPAND_MARK = "[+]"
COLLAPSE_MARK = "[−]"


# -------------------------------------------
# HELPERS
# -------------------------------------------
def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def build_label(record, collapsed=None):
    """
    Line 1: Name
    Line 2..: Position, Department, Mobile, Email (when present)
    Last:     Company / Location, then [+] or [−] if the node has children
    """
    lines = [_text(record.get(COL_NAME))]
    for col in (COL_POSITION, COL_DEPARTMENT, COL_MOBILE, COL_EMAIL):
        value = _text(record.get(col))
        if value:
            lines.append(value)

    where = " · ".join(v for v in (_text(record.get(COL_COMPANY)), _text(record.get(COL_LOCATION))) if v)
    if where:
        lines.append(where)

    if collapsed is not None:
        lines.append(EXPAND_MARK if collapsed else COLLAPSE_MARK)
    return "\n".join(lines)


# -------------------------------------------
# GRAPH
# -------------------------------------------
def build_digraph(chart: OrgChart, rankdir: str = RANKDIR, legend: bool = True) -> Digraph:
    dot = Digraph(comment="Org Chart", format="png")

    dot.graph_attr.update(
        rankdir=rankdir,
        splines="ortho",
        fontsize="11",
        fontname=FONT,
        labelloc="t",
        label=chart.title,
        nodesep="0.25",
        ranksep="0.4",
    )
    dot.node_attr.update(
        shape="box",
        style="rounded,filled",
        fillcolor=NO_COMPANY_COLOR,
        color=BORDER_COLOR,
        fontname=FONT,
        fontsize="9",
        margin="0.12,0.06",
    )
    dot.edge_attr.update(color=LINE_COLOR, arrowhead="none")

    counter = 0

    def add(node, path):
        nonlocal counter
        name = f"n{counter}"
        counter += 1

        view = chart.node_view(node)
        style, fillcolor = graphviz_fill(list(view.colors))
        attrs = {"style": style, "fillcolor": fillcolor}
        if view.is_manager:
            attrs["style"] = style + ",dashed"
            attrs["color"] = MANAGER_OUTLINE_COLOR
            attrs["penwidth"] = "1.3"

        collapsed = view.collapsed if view.has_children else None
        dot.node(name, label=build_label(node.record, collapsed), **attrs)

        path = path | {id(node)}
        for child in chart.visible_children(node):
            if id(child) in path:
                continue
            dot.edge(name, add(child, path))
        return name

    for root in chart.visible_forest:
        add(root, frozenset())

    if legend:
        add_legend(dot)

    logger.info("Graph built with %d node(s)", counter)
    return dot


def add_legend(dot: Digraph) -> None:
    with dot.subgraph(name="cluster_legend") as c:
        c.attr(label=LEGEND_TITLE, style="rounded", color=BORDER_COLOR, fontname=FONT, fontsize="10")
        for i, (company, color) in enumerate(legend_entries()):
            c.node(f"legend_{i}", label=company, fillcolor=color)
        c.node("legend_manager", label=MANAGER_LABEL, style="rounded,dashed",
               color=MANAGER_OUTLINE_COLOR)
        c.node("legend_expand", label=f"{EXPAND_MARK} {EXPAND_LABEL}", shape="plaintext", style="")
        c.node("legend_collapse", label=f"{COLLAPSE_MARK} {COLLAPSE_LABEL}", shape="plaintext", style="")


# -------------------------------------------
# RENDER
# -------------------------------------------
def export_chart(chart: OrgChart, output: str, fmt: str = "png", rankdir: str = RANKDIR) -> str:
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")

    dot = build_digraph(chart, rankdir=rankdir)
    output_path = dot.render(filename=output, format=fmt, cleanup=True)
    logger.info("Org chart generated: %s", output_path)
    return output_path
