# performance/services/spreadsheet.py
"""
Spreadsheet codec (openpyxl): workbook bytes ⇄ rows of the tabular contract.

- Export writes one sheet with the contract headers.
- Import reads the first sheet; the header row may use the contract labels or
  the Arabic labels of earlier exports.
"""
from __future__ import annotations

import io
from typing import Dict, Iterable, List, Mapping
from zipfile import BadZipFile

import openpyxl
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException

from performance.services.reconcile import (
    COL_EMPLOYEE, COL_GOAL, COL_POSITION, COL_RATING, COL_STATUS, COL_TASK, COL_YEAR,
    COLUMNS, STATUS_APPROVED,
)

SHEET_TITLE = "Performance Data"
CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Arabic headers used by the first version of the report
HEADER_ALIASES = {
    "اسم الموظف": COL_EMPLOYEE,
    "المسمى الوظيفي": COL_POSITION,
    "الهدف": COL_GOAL,
    "السنة": COL_YEAR,
    "المهمة": COL_TASK,
    "التقييم": COL_RATING,
    "الحالة": COL_STATUS,
}
STATUS_ALIASES = {"معتمد": STATUS_APPROVED}


class SpreadsheetFormatError(Exception):
    """The uploaded file is not a readable workbook of the expected shape."""


def export_filename(year) -> str:
    return f"Report_{year}.xlsx"


def _canonical_header(value) -> str:
    label = str(value).strip() if value is not None else ""
    return HEADER_ALIASES.get(label, label)


def write_workbook(rows: Iterable[Mapping]) -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")

    ws.append(list(COLUMNS))
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font

    for row in rows:
        ws.append([row.get(col) for col in COLUMNS])

    for idx, col in enumerate(COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = max(12, len(col) + 4)

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def read_workbook(source) -> List[Dict]:
    """
    `source` is a path, a file object or raw bytes.
    Completely empty rows are dropped; everything else is passed on as-is
    (rows without an employee name are the reconciler's business).
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        wb = openpyxl.load_workbook(source, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as exc:
        raise SpreadsheetFormatError("The file is not a readable .xlsx workbook.") from exc

    try:
        ws = wb.worksheets[0]
        values = ws.iter_rows(values_only=True)
        header = next(values, None)
        if not header:
            raise SpreadsheetFormatError("The workbook has no header row.")
        labels = [_canonical_header(v) for v in header]
        if COL_EMPLOYEE not in labels:
            raise SpreadsheetFormatError(f"Missing required column '{COL_EMPLOYEE}'.")

        rows = []
        for raw in values:
            if raw is None or all(v in (None, "") for v in raw):
                continue
            row = {label: value for label, value in zip(labels, raw) if label}
            status = row.get(COL_STATUS)
            if isinstance(status, str):
                row[COL_STATUS] = STATUS_ALIASES.get(status.strip(), status)
            rows.append(row)
        return rows
    finally:
        wb.close()
