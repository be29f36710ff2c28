from org_chart.companies import (
    css_background,
    filter_options,
    graphviz_fill,
    is_blended,
    legend_entries,
    parse_companies,
    resolve_colors,
)
from org_chart.config import NO_COMPANY_COLOR, UNKNOWN_COMPANY_COLOR

UK = "#e0f2ff"
DK = "#e6fce6"
RT = "#fff9db"


def test_parse_companies_splits_and_trims():
    assert parse_companies("УК, ДК") == ["УК", "ДК"]
    assert parse_companies("УК;РТ ; ДК") == ["УК", "РТ", "ДК"]
    assert parse_companies(" РТ ") == ["РТ"]


def test_parse_companies_empty_values():
    assert parse_companies(None) == []
    assert parse_companies("") == []
    assert parse_companies("  ") == []
    assert parse_companies("УК,") == ["УК", ""]
    assert parse_companies(",") == ["", ""]


def test_empty_token_gets_fallback_color():
    assert resolve_colors("УК,") == [UK, UNKNOWN_COMPANY_COLOR]


def test_no_company_color():
    assert resolve_colors(None) == [NO_COMPANY_COLOR]
    assert resolve_colors("") == [NO_COMPANY_COLOR]


def test_single_company_color():
    assert resolve_colors("ДК") == [DK]


def test_unknown_company_is_distinct_from_no_company():
    assert resolve_colors("ООО Ромашка") == [UNKNOWN_COMPANY_COLOR]
    assert UNKNOWN_COMPANY_COLOR != NO_COMPANY_COLOR


def test_two_companies_blend_in_order():
    colors = resolve_colors("УК, ДК")

    assert colors == [UK, DK]
    assert is_blended(colors)
    assert resolve_colors("ДК; УК") == [DK, UK]


def test_unknown_token_inside_blend():
    assert resolve_colors("РТ, X") == [RT, UNKNOWN_COMPANY_COLOR]


def test_css_background():
    assert css_background([UK]) == UK
    assert css_background([UK, DK]) == f"linear-gradient(135deg, {UK}, {DK})"


def test_graphviz_fill():
    assert graphviz_fill([RT]) == ("rounded,filled", RT)
    assert graphviz_fill([UK, DK]) == ("rounded,filled", f"{UK}:{DK}")
    assert graphviz_fill([UK, DK, RT]) == ("striped", f"{UK}:{DK}:{RT}")


def test_legend_and_filter_options():
    assert legend_entries() == [("УК", UK), ("ДК", DK), ("РТ", RT)]
    assert filter_options() == [("Все", "Все компании"), ("УК", "УК"), ("ДК", "ДК"), ("РТ", "РТ")]
