import json

from org_chart.chart import OrgChart
from org_chart.html_render import VIRTUAL_ROOT_ID, chart_data, export_html, render_html


def test_multiple_roots_share_virtual_root(rows):
    data = chart_data(OrgChart(rows))

    assert data["id"] == VIRTUAL_ROOT_ID
    assert [c["id"] for c in data["children"]] == ["1", "6"]


def test_single_root_is_top_node(rows):
    chart = OrgChart(rows)
    chart.set_filter("РТ")

    data = chart_data(chart)

    assert data["id"] == "1"
    assert data["isManager"] is True
    assert data["children"][0]["background"] == "linear-gradient(135deg, #e0f2ff, #fff9db)"
    assert data["children"][0]["children"][0]["name"] == "Clara"


def test_collapsed_flag_in_data(rows):
    chart = OrgChart(rows)
    chart.visibility.collapse_all(["3", "4"])

    data = chart_data(chart)
    cto = data["children"][0]["children"][1]

    assert cto["collapsed"] is True
    # leaves never start collapsed
    assert cto["children"][0]["collapsed"] is False


def test_render_html(rows):
    chart = OrgChart(rows)
    chart.scale = 1.2

    page = render_html(chart)

    assert "__ORG_DATA__" not in page
    assert "#chart-zoom { transform: scale(1.2)" in page
    assert "$('#chart-zoom').orgchart(" in page
    assert "Легенда:" in page
    assert "Иван Петров" in page


def test_export_html_writes_file(rows, tmp_path):
    path = export_html(OrgChart(rows), tmp_path / "chart")

    assert path.endswith("chart.html")
    with open(path, encoding="utf-8") as f:
        page = f.read()
    start = page.index("var orgData = ") + len("var orgData = ")
    end = page.index(";\n", start)
    assert json.loads(page[start:end])["id"] == "VIRTUAL_ROOT"
