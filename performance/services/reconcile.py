# performance/services/reconcile.py
"""
Import reconciler: rebuilds the full record set from flat rows.

Rows are mappings keyed by the column labels below (the spreadsheet codec
produces them). Employees are matched by exact name among the employees built
in the same run; the previous record set is not consulted and is replaced.
"""
from __future__ import annotations

import logging
import re
from dataclasses import replace
from numbers import Real
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from performance.records import PLACEHOLDER, Employee, Goal, Task, new_identity
from performance.services.scoring import clamp_to_pct

logger = logging.getLogger(__name__)

# Tabular contract
COL_EMPLOYEE = "Employee Name"
COL_POSITION = "Position"
COL_GOAL = "Goal"
COL_YEAR = "Year"
COL_TASK = "Task"
COL_RATING = "Rating"
COL_STATUS = "Status"

COLUMNS = (COL_EMPLOYEE, COL_POSITION, COL_GOAL, COL_YEAR, COL_TASK, COL_RATING, COL_STATUS)

STATUS_APPROVED = "Approved"
STATUS_PENDING = "Under Review"
DEFAULT_POSITION = "Employee"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _text(value) -> str:
    """Cell text as written; names and titles are matched exactly."""
    if value is None:
        return ""
    return str(value)


def _is_blank(value: str) -> bool:
    return not value.strip()


def coerce_year(value, default: int) -> int:
    """Integer year, leading digits of text accepted; anything else (or 0) → default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, Real):
        return int(value) or default
    m = _LEADING_INT.match(_text(value))
    if not m:
        return default
    return int(m.group(1)) or default


def coerce_rating(value) -> Optional[int]:
    """Only numeric cells carry a rating, clamped to 0..100; text cells are ignored."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return clamp_to_pct(value)


def is_approved_status(value) -> bool:
    return _text(value) == STATUS_APPROVED


def _is_given(value: str) -> bool:
    return not _is_blank(value) and value.strip() != PLACEHOLDER


def _position(value) -> str:
    text = _text(value)
    return DEFAULT_POSITION if _is_blank(text) else text


def reconcile_rows(rows: Iterable[Mapping], selected_year: int) -> Tuple[Employee, ...]:
    """
    Walk rows in file order:
    - blank employee name → row skipped
    - first row naming an employee creates it (position or DEFAULT_POSITION)
    - goal matched by (title, year); rating/status captured at creation only
    - every named task is appended (no de-duplication)
    """
    order: List[str] = []
    built: Dict[str, Employee] = {}
    skipped = 0

    for index, row in enumerate(rows, start=1):
        name = _text(row.get(COL_EMPLOYEE))
        if _is_blank(name):
            skipped += 1
            logger.info("Import row %d skipped: no employee name.", index)
            continue

        emp = built.get(name)
        if emp is None:
            emp = Employee(
                id=new_identity("emp"),
                name=name,
                position=_position(row.get(COL_POSITION)),
            )
            order.append(name)

        title = _text(row.get(COL_GOAL))
        if _is_given(title):
            year = coerce_year(row.get(COL_YEAR), selected_year)
            rating = coerce_rating(row.get(COL_RATING))
            approved = is_approved_status(row.get(COL_STATUS))

            goal = next((g for g in emp.goals if g.title == title and g.year == year), None)
            if goal is None:
                goal = Goal(
                    id=new_identity("goal"),
                    title=title,
                    year=year,
                    final_rating=rating,
                    is_approved=approved,
                )
                emp = replace(emp, goals=emp.goals + (goal,))

            task_name = _text(row.get(COL_TASK))
            if _is_given(task_name):
                task = Task(
                    id=new_identity("task"),
                    name=task_name,
                    estimated_days=0,
                    expected_month=PLACEHOLDER,
                    final_rating=rating,
                    is_approved=approved,
                )
                updated_goal = replace(goal, tasks=goal.tasks + (task,))
                emp = replace(emp, goals=tuple(updated_goal if g.id == goal.id else g for g in emp.goals))

        built[name] = emp

    logger.info("Reconciled %d employees from import (%d rows skipped).", len(order), skipped)
    return tuple(built[name] for name in order)
