"""Command line entry point: spreadsheet in, org chart out."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import webbrowser
from pathlib import Path

from graphviz import ExecutableNotFound

from org_chart.chart import OrgChart, clamp_scale
from org_chart.companies import filter_options
from org_chart.config import ALL_COMPANIES, DEFAULT_SCALE, INPUT_FILE, OUTPUT_FILE, RANKDIR, SHEET_NAME
from org_chart.graphviz_render import EXPORT_FORMATS, export_chart
from org_chart.hierarchy import forest_to_dicts
from org_chart.html_render import export_html
from org_chart.records import load_records

FORMATS = EXPORT_FORMATS + ("html", "json")


def _sheet(value: str):
    return int(value) if value.isdigit() else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build an org chart from an employee spreadsheet")
    parser.add_argument("input", nargs="?", default=INPUT_FILE, help="Excel (.xlsx) or CSV file")
    parser.add_argument("--sheet", type=_sheet, default=SHEET_NAME, help="Sheet index or name")
    parser.add_argument(
        "--company",
        default=ALL_COMPANIES,
        help="Only show this company and its reporting lines "
             f"(choices: {', '.join(v for v, _ in filter_options())})",
    )
    parser.add_argument("--format", choices=FORMATS, default="png", dest="fmt")
    parser.add_argument("--output", default=OUTPUT_FILE, help="Output file (extension optional)")
    parser.add_argument("--rankdir", choices=("TB", "LR"), default=RANKDIR)
    parser.add_argument("--collapse", nargs="*", default=[], metavar="ID",
                        help="Ids of managers whose teams start collapsed")
    parser.add_argument("--scale", type=float, default=DEFAULT_SCALE, help="Initial zoom for HTML output")
    parser.add_argument("--open", action="store_true", help="Open HTML output in the browser")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def write_json(chart: OrgChart, output: str) -> str:
    path = Path(output).with_suffix(".json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(forest_to_dicts(chart.visible_forest), f, indent=2, ensure_ascii=False)
    return str(path)


def run(args) -> str:
    chart = OrgChart(company=args.company)
    chart.load(load_records(args.input, sheet_name=args.sheet))
    chart.visibility.collapse_all(args.collapse)
    chart.scale = clamp_scale(args.scale)

    if args.fmt == "html":
        output_path = export_html(chart, args.output)
        if args.open:
            webbrowser.open(f"file://{os.path.abspath(output_path)}")
    elif args.fmt == "json":
        output_path = write_json(chart, args.output)
    else:
        output_path = export_chart(chart, args.output, fmt=args.fmt, rankdir=args.rankdir)
    return output_path


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        output_path = run(args)
    except (FileNotFoundError, ValueError, ExecutableNotFound) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Saved {output_path}")


if __name__ == "__main__":
    main()
