"""Company tokens, display colors and the legend."""

from __future__ import annotations

import logging
import re

from org_chart.config import (
    ALL_COMPANIES,
    ALL_COMPANIES_LABEL,
    COMPANY_COLORS,
    GRADIENT_ANGLE,
    NO_COMPANY_COLOR,
    UNKNOWN_COMPANY_COLOR,
)

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,;]")


def parse_companies(value) -> list[str]:
    """
    'УК, ДК' -> ['УК', 'ДК']
    'УК,'    -> ['УК', '']
    None     -> []
    """
    if not isinstance(value, str) or not value.strip():
        return []
    return [t.strip() for t in _SEPARATORS.split(value)]


def company_color(token: str) -> str:
    color = COMPANY_COLORS.get(token)
    if color is None:
        logger.debug("Unknown company %r, using fallback color", token)
        return UNKNOWN_COMPANY_COLOR
    return color


def resolve_colors(value) -> list[str]:
    """Ordered display colors for a Company field; more than one means blend."""
    tokens = parse_companies(value)
    if not tokens:
        return [NO_COMPANY_COLOR]
    return [company_color(t) for t in tokens]


def is_blended(colors: list[str]) -> bool:
    return len(colors) > 1


# -------------------------------------------
# RENDERING HELPERS
# -------------------------------------------
def css_background(colors: list[str]) -> str:
    if not is_blended(colors):
        return colors[0]
    return f"linear-gradient({GRADIENT_ANGLE}deg, {', '.join(colors)})"


def graphviz_fill(colors: list[str]) -> tuple[str, str]:
    """
    (style, fillcolor) for a graphviz box.

    Graphviz only blends two colors, so three or more become stripes.
    """
    if not is_blended(colors):
        return "rounded,filled", colors[0]
    if len(colors) == 2:
        return "rounded,filled", ":".join(colors)
    return "striped", ":".join(colors)


def legend_entries() -> list[tuple[str, str]]:
    return list(COMPANY_COLORS.items())


def filter_options() -> list[tuple[str, str]]:
    """(value, label) pairs for the company selector, "all" first."""
    return [(ALL_COMPANIES, ALL_COMPANIES_LABEL)] + [(c, c) for c in COMPANY_COLORS]
