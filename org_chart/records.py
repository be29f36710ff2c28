"""Record source and normalization for employee rows."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from org_chart.config import COL_ID, COL_MANAGER_ID, SHEET_NAME

logger = logging.getLogger(__name__)

IDENTIFIER_FIELDS = (COL_ID, COL_MANAGER_ID)


def is_null(x):
    return (
        x is None
        or (isinstance(x, float) and math.isnan(x))
        or (isinstance(x, str) and x.strip() == "")
    )


def clean_identifier(value: Any) -> str | None:
    """
    Identifier cell -> trimmed string, or None when blank.

    Spreadsheets hand back whole numbers as floats, so 7.0 -> "7".
    """
    if is_null(value):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def normalize_record(row: dict) -> dict:
    record = dict(row)
    for field in IDENTIFIER_FIELDS:
        record[field] = clean_identifier(row.get(field))
    return record


def normalize_records(rows: Iterable[dict]) -> list[dict]:
    return [normalize_record(row) for row in rows]


# -------------------------------------------
# LOAD DATA
# -------------------------------------------
def read_table(path: str | Path, sheet_name: str | int = SHEET_NAME) -> pd.DataFrame:
    """Read a workbook sheet or CSV file with every cell kept as text."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in (".xlsx", ".xlsm"):
        return pd.read_excel(path, sheet_name=sheet_name, dtype=str, engine="openpyxl")
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str)
    raise ValueError(f"Unsupported input format: {suffix or path.name}")


def load_records(path: str | Path, sheet_name: str | int = SHEET_NAME) -> list[dict]:
    """Load raw rows from `path`; empty cells come back as None."""
    df = read_table(path, sheet_name=sheet_name)
    df.columns = [str(col).strip() for col in df.columns]
    rows = [
        {col: None if pd.isna(value) else value for col, value in row.items()}
        for row in df.to_dict(orient="records")
    ]
    logger.info("Loaded %d row(s) from %s", len(rows), Path(path).name)
    return rows
