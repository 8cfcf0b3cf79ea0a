# performance/services/projection.py
"""
Export projector: flattens employees → goals → tasks into rows of the
tabular contract (one row per task, or per goal when it has no tasks).
"""
from typing import Dict, Iterable, List

from performance.records import PLACEHOLDER, Employee
from performance.services.reconcile import (
    COL_EMPLOYEE, COL_GOAL, COL_POSITION, COL_RATING, COL_STATUS, COL_TASK, COL_YEAR,
    STATUS_APPROVED, STATUS_PENDING,
)


def status_label(is_approved) -> str:
    return STATUS_APPROVED if is_approved else STATUS_PENDING


def project_rows(employees: Iterable[Employee]) -> List[Dict]:
    rows = []
    for emp in employees:
        for goal in emp.goals:
            base = {
                COL_EMPLOYEE: emp.name,
                COL_POSITION: emp.position,
                COL_GOAL: goal.title,
                COL_YEAR: goal.year,
            }
            if not goal.tasks:
                rows.append({
                    **base,
                    COL_TASK: PLACEHOLDER,
                    COL_RATING: goal.final_rating or 0,
                    COL_STATUS: status_label(goal.is_approved),
                })
                continue
            for task in goal.tasks:
                rows.append({
                    **base,
                    COL_TASK: task.name,
                    COL_RATING: task.final_rating or 0,
                    COL_STATUS: status_label(task.is_approved),
                })
    return rows
