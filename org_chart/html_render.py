"""Standalone interactive HTML export (jQuery OrgChart from CDN)."""

from __future__ import annotations

import html
import json
import logging
from pathlib import Path

from org_chart.chart import OrgChart
from org_chart.companies import legend_entries
from org_chart.config import (
    COL_COMPANY,
    COL_DEPARTMENT,
    COL_EMAIL,
    COL_LOCATION,
    COL_MOBILE,
    COL_NAME,
    COL_PHOTO,
    COL_POSITION,
    COLLAPSE_LABEL,
    EXPAND_LABEL,
    LEGEND_TITLE,
    LINE_COLOR,
    MANAGER_LABEL,
    MANAGER_OUTLINE_COLOR,
    PLACEHOLDER_PHOTO,
)

logger = logging.getLogger(__name__)

VIRTUAL_ROOT_ID = "VIRTUAL_ROOT"


def _text(value) -> str:
    return "" if value is None else str(value)


# -------------------------------------------
# SERIALIZE HIERARCHY
# -------------------------------------------
def node_data(chart: OrgChart, node, path=frozenset()) -> dict:
    record = node.record
    view = chart.node_view(node)
    path = path | {id(node)}
    return {
        "id": view.key,
        "name": _text(record.get(COL_NAME)),
        "title": _text(record.get(COL_POSITION)),
        "department": _text(record.get(COL_DEPARTMENT)),
        "mobile": _text(record.get(COL_MOBILE)),
        "email": _text(record.get(COL_EMAIL)),
        "company": _text(record.get(COL_COMPANY)),
        "location": _text(record.get(COL_LOCATION)),
        "photo": _text(record.get(COL_PHOTO)) or PLACEHOLDER_PHOTO,
        "background": view.background,
        "isManager": view.is_manager,
        "collapsed": view.collapsed and view.has_children,
        "children": [node_data(chart, c, path) for c in node.children if id(c) not in path],
    }


def chart_data(chart: OrgChart) -> dict:
    """OrgChart wants a single root; several roots hang off a virtual one."""
    roots = [node_data(chart, root) for root in chart.visible_forest]
    if len(roots) == 1:
        return roots[0]
    return {
        "id": VIRTUAL_ROOT_ID,
        "name": chart.title,
        "isGroup": True,
        "children": roots,
    }


def legend_html() -> str:
    items = [
        f'<span class="legend-item"><span class="swatch" style="background:{color}"></span>'
        f"{html.escape(company)}</span>"
        for company, color in legend_entries()
    ]
    items.append(
        f'<span class="legend-item"><span class="swatch manager-swatch"></span>{MANAGER_LABEL}</span>'
    )
    items.append(f'<span class="legend-item"><b>+</b> {EXPAND_LABEL}</span>')
    items.append(f'<span class="legend-item"><b>−</b> {COLLAPSE_LABEL}</span>')
    return f'<div class="legend"><strong>{LEGEND_TITLE}</strong>{"".join(items)}</div>'


# -------------------------------------------
# BUILD HTML WITH ORGCHART INTEGRATION
# -------------------------------------------
HTML_TEMPLATE = '''<!DOCTYPE html>
<html lang="ru">
<head>
  <meta charset="utf-8" />
  <title>__TITLE__</title>
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <link rel="stylesheet"
        href="https://cdn.jsdelivr.net/npm/orgchart@3.8.0/dist/css/jquery.orgchart.min.css">
  <style>
    body { margin: 0; font-family: Roboto, "Segoe UI", Helvetica, Arial, sans-serif; }
    .legend { display: flex; flex-wrap: wrap; gap: 12px; align-items: center;
              font-size: 13px; color: #4b5563; padding: 8px 16px; }
    .legend-item { display: inline-flex; align-items: center; gap: 4px; }
    .swatch { width: 14px; height: 14px; border-radius: 3px; display: inline-block;
              border: 1px solid #d0d7de; }
    .manager-swatch { border: 2px dashed __MANAGER_COLOR__; }
    #chart-container { height: 80vh; overflow: auto; border: 1px solid #e5e7eb; }
    #chart-zoom { transform: scale(__SCALE__); transform-origin: top center; }
    #chart-zoom .orgchart { background: transparent !important; }
    .orgchart .lines .topLine, .orgchart .lines .leftLine,
    .orgchart .lines .rightLine, .orgchart .lines .downLine { border-color: __LINE_COLOR__; }
    .orgchart .node { width: 256px; border-radius: 12px; border: 1px solid #d0d7de;
                      box-shadow: 0 2px 6px rgba(0,0,0,0.08); font-size: 9px; }
    .orgchart .node.manager { outline: 1px dashed __MANAGER_COLOR__; }
    .orgchart .node.group-node { visibility: hidden; }
    .card-photo { width: 40px; height: 40px; border-radius: 50%; object-fit: cover; }
    .card-name { font-weight: 600; }
    .card-muted { color: #4b5563; font-size: 10px; }
    .card-corner { position: absolute; top: 4px; right: 6px; text-align: right; font-size: 10px; color: #6b7280; }
  </style>
</head>
<body>
  __LEGEND__
  <div id="chart-container">
    <div id="chart-zoom"></div>
  </div>

  <script src="https://code.jquery.com/jquery-3.6.0.min.js"></script>
  <script src="https://cdn.jsdelivr.net/npm/orgchart@3.8.0/dist/js/jquery.orgchart.min.js"></script>
  <script>
    // Data injected from Python
    var orgData = __ORG_DATA__;

    function esc(s) { return $('<div>').text(s || '').html(); }

    $(function() {
      $('#chart-zoom').orgchart({
        data: orgData,
        pan: true,
        zoom: true,
        direction: 't2b',
        exportButton: false,
        nodeTemplate: function(data) {
          if (data.isGroup) { return ''; }
          return (
            '<img class="card-photo" src="' + esc(data.photo) + '" alt="">' +
            '<div class="card-name">' + esc(data.name) + '</div>' +
            '<div class="card-muted">' + esc(data.title) + '</div>' +
            '<div class="card-muted">' + esc(data.department) + '</div>' +
            '<div class="card-muted">' + esc(data.mobile) + '</div>' +
            '<div class="card-muted">' + esc(data.email) + '</div>' +
            '<div class="card-corner">' + esc(data.company) + '<br><i>' + esc(data.location) + '</i></div>'
          );
        },
        createNode: function($node, data) {
          if (data.isGroup) { $node.addClass('group-node'); return; }
          $node.css('background', data.background);
          if (data.isManager) { $node.addClass('manager'); }
        }
      });
    });
  </script>
</body>
</html>
'''


def render_html(chart: OrgChart) -> str:
    hierarchy_json = json.dumps(chart_data(chart), ensure_ascii=False).replace("</", "<\\/")
    return (
        HTML_TEMPLATE
        .replace("__TITLE__", html.escape(chart.title))
        .replace("__LEGEND__", legend_html())
        .replace("__SCALE__", str(chart.scale))
        .replace("__MANAGER_COLOR__", MANAGER_OUTLINE_COLOR)
        .replace("__LINE_COLOR__", LINE_COLOR)
        .replace("__ORG_DATA__", hierarchy_json)
    )


def export_html(chart: OrgChart, output: str | Path) -> str:
    path = Path(output)
    if path.suffix != ".html":
        path = path.with_suffix(".html")

    with open(path, "w", encoding="utf-8") as f:
        f.write(render_html(chart))

    logger.info("OrgChart HTML generated: %s", path)
    return str(path)
