# performance/services/workflow.py
# ======================================================================
# Evaluation workflow: planning → execution → results → final lock
# ======================================================================
#
# Every operation:
#   - receives the session context + the current snapshot (tuple of Employees)
#   - never mutates the snapshot; it rebuilds the path root → changed node
#   - returns OperationResult; only APPLIED carries a new snapshot
#
# Role/lock violations are result variants, not exceptions. Missing
# required input raises ValidationError before anything is built.
# ======================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Mapping, Optional, Tuple

from django.core.exceptions import ValidationError
from django.db import models, transaction

from base.session_context import SessionContext
from performance import access
from performance.records import Employee, Goal, Task, find_employee, new_identity
from performance.services.reconcile import reconcile_rows
from performance.services.scoring import aggregate_goal_rating
from performance.store import RecordStore, record_store

logger = logging.getLogger(__name__)


class Outcome(models.TextChoices):
    APPLIED = "applied", "Applied"
    PERMISSION_DENIED = "permission_denied", "Permission denied"
    LOCKED = "locked", "Employee file is finally approved"
    NOT_FOUND = "not_found", "Record not found"
    NOT_CONFIRMED = "not_confirmed", "Confirmation required"


@dataclass(frozen=True)
class OperationResult:
    outcome: str
    employees: Tuple[Employee, ...]
    # id of the record created by the operation (employee/goal/task)
    created_id: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.outcome == Outcome.APPLIED


# ======================================================================
# COMMON HELPERS
# ======================================================================

def _required(value, field_name: str) -> str:
    text = (value or "").strip() if isinstance(value, str) else value
    if text in (None, ""):
        raise ValidationError({field_name: "This field is required."})
    return text


def _check_rating(rating: Optional[int]) -> Optional[int]:
    if rating is None:
        return None
    rating = int(rating)
    if not 0 <= rating <= 100:
        raise ValidationError({"rating": "Rating must be between 0 and 100."})
    return rating


def _refuse(outcome: str, employees: Tuple[Employee, ...]) -> OperationResult:
    return OperationResult(outcome=outcome, employees=employees)


def _replace_employee(employees: Tuple[Employee, ...], updated: Employee) -> Tuple[Employee, ...]:
    return tuple(updated if e.id == updated.id else e for e in employees)


def _replace_goal(emp: Employee, updated: Goal) -> Employee:
    return replace(emp, goals=tuple(updated if g.id == updated.id else g for g in emp.goals))


def _replace_task(goal: Goal, updated: Task) -> Goal:
    return replace(goal, tasks=tuple(updated if t.id == updated.id else t for t in goal.tasks))


def _resolve_target(ctx: SessionContext, employees: Tuple[Employee, ...], *, admin_only: bool):
    """
    Resolve the employee the session is working on and check role + lock.
    Returns (employee, None) when allowed, or (None, refusal outcome).
    """
    if not ctx or not ctx.is_authenticated:
        return None, Outcome.PERMISSION_DENIED
    if admin_only and not ctx.is_admin:
        return None, Outcome.PERMISSION_DENIED

    emp = find_employee(employees, ctx.current_employee_id)
    if emp is None:
        return None, Outcome.NOT_FOUND
    if not access.can_view_employee(ctx, emp):
        return None, Outcome.PERMISSION_DENIED
    if access.is_locked(emp):
        return None, Outcome.LOCKED
    return emp, None


# ======================================================================
# OPERATIONS (pure: snapshot in → OperationResult out)
# ======================================================================

def add_employee(ctx: SessionContext, employees: Iterable[Employee], name: str, position: str) -> OperationResult:
    employees = tuple(employees)
    name = _required(name, "name")
    position = _required(position, "position")
    if not ctx or not ctx.is_admin:
        return _refuse(Outcome.PERMISSION_DENIED, employees)

    emp = Employee(id=new_identity("emp"), name=name, position=position)
    return OperationResult(Outcome.APPLIED, employees + (emp,), created_id=emp.id)


def add_goal(ctx: SessionContext, employees: Iterable[Employee], title: str) -> OperationResult:
    employees = tuple(employees)
    title = _required(title, "title")
    emp, refusal = _resolve_target(ctx, employees, admin_only=True)
    if refusal:
        return _refuse(refusal, employees)

    goal = Goal(id=new_identity("goal"), title=title, year=ctx.year)
    updated = replace(emp, goals=emp.goals + (goal,))
    return OperationResult(Outcome.APPLIED, _replace_employee(employees, updated), created_id=goal.id)


def save_task(
    ctx: SessionContext,
    employees: Iterable[Employee],
    goal_id,
    name: str,
    estimated_days,
    expected_month: str,
    task_id=None,
) -> OperationResult:
    """
    Create a task (task_id=None) or edit the scheduling fields of an existing one.
    Editing never touches rating, approval or outcome.
    """
    employees = tuple(employees)
    name = _required(name, "name")
    expected_month = _required(expected_month, "expected_month")
    days = int(estimated_days or 0)
    if days < 0:
        raise ValidationError({"estimated_days": "Estimated days cannot be negative."})

    emp, refusal = _resolve_target(ctx, employees, admin_only=True)
    if refusal:
        return _refuse(refusal, employees)
    goal = emp.find_goal(goal_id)
    if goal is None:
        return _refuse(Outcome.NOT_FOUND, employees)

    if task_id is None:
        task = Task(id=new_identity("task"), name=name, estimated_days=days, expected_month=expected_month)
        goal = replace(goal, tasks=goal.tasks + (task,))
    else:
        task = goal.find_task(task_id)
        if task is None:
            return _refuse(Outcome.NOT_FOUND, employees)
        task = replace(task, name=name, estimated_days=days, expected_month=expected_month)
        goal = _replace_task(goal, task)

    updated = _replace_goal(emp, goal)
    return OperationResult(Outcome.APPLIED, _replace_employee(employees, updated), created_id=task.id)


def evaluate(
    ctx: SessionContext,
    employees: Iterable[Employee],
    goal_id,
    outcome: str,
    task_id=None,
    rating: Optional[int] = None,
    approved: bool = False,
) -> OperationResult:
    """
    Record the execution outcome of a task (task_id given) or of the goal itself.

    Administrator extras:
    - task level: task rating (when given) + approval, then the goal rating is
      recomputed over all of the goal's tasks, replacing whatever it held
    - goal level: goal rating (when given) + approval, tasks untouched
    """
    employees = tuple(employees)
    outcome = _required(outcome, "outcome")
    rating = _check_rating(rating)

    emp, refusal = _resolve_target(ctx, employees, admin_only=False)
    if refusal:
        return _refuse(refusal, employees)
    goal = emp.find_goal(goal_id)
    if goal is None:
        return _refuse(Outcome.NOT_FOUND, employees)

    rates = access.can_rate(ctx, emp)

    if task_id is not None:
        task = goal.find_task(task_id)
        if task is None:
            return _refuse(Outcome.NOT_FOUND, employees)
        changes = {"actual_outcome": outcome}
        if rates:
            changes["is_approved"] = bool(approved)
            if rating is not None:
                changes["final_rating"] = rating
        goal = _replace_task(goal, replace(task, **changes))
        if rates:
            goal = replace(goal, final_rating=aggregate_goal_rating(goal.tasks))
    else:
        changes = {"actual_outcome": outcome}
        if rates:
            changes["is_approved"] = bool(approved)
            if rating is not None:
                changes["final_rating"] = rating
        goal = replace(goal, **changes)

    updated = _replace_goal(emp, goal)
    return OperationResult(Outcome.APPLIED, _replace_employee(employees, updated))


def approve_all(ctx: SessionContext, employees: Iterable[Employee], confirm: bool = False) -> OperationResult:
    """Final, irreversible approval of the whole employee file."""
    employees = tuple(employees)
    emp, refusal = _resolve_target(ctx, employees, admin_only=True)
    if refusal:
        return _refuse(refusal, employees)
    if not confirm:
        return _refuse(Outcome.NOT_CONFIRMED, employees)

    goals = tuple(
        replace(g, is_approved=True, tasks=tuple(replace(t, is_approved=True) for t in g.tasks))
        for g in emp.goals
    )
    updated = replace(emp, final_approved=True, goals=goals)
    return OperationResult(Outcome.APPLIED, _replace_employee(employees, updated))


def delete_goal(ctx: SessionContext, employees: Iterable[Employee], goal_id, confirm: bool = False) -> OperationResult:
    employees = tuple(employees)
    emp, refusal = _resolve_target(ctx, employees, admin_only=True)
    if refusal:
        return _refuse(refusal, employees)
    if emp.find_goal(goal_id) is None:
        return _refuse(Outcome.NOT_FOUND, employees)
    if not confirm:
        return _refuse(Outcome.NOT_CONFIRMED, employees)

    updated = replace(emp, goals=tuple(g for g in emp.goals if g.id != goal_id))
    return OperationResult(Outcome.APPLIED, _replace_employee(employees, updated))


def import_rows(ctx: SessionContext, employees: Iterable[Employee], rows: Iterable[Mapping]) -> OperationResult:
    """Replace the whole record set with what the rows describe (no merge)."""
    employees = tuple(employees)
    if not ctx or not ctx.is_admin:
        return _refuse(Outcome.PERMISSION_DENIED, employees)
    return OperationResult(Outcome.APPLIED, reconcile_rows(rows, selected_year=ctx.year))


# ======================================================================
# STORE-BOUND WORKFLOW
# ======================================================================

class EvaluationWorkflow:
    """
    Runs an operation against the record store:
    load snapshot → compute → replace snapshot (only when applied).
    """

    def __init__(self, store: Optional[RecordStore] = None):
        self.store = store or record_store

    def run(self, operation, ctx: SessionContext, *args, **kwargs) -> OperationResult:
        with transaction.atomic():
            result = operation(ctx, self.store.load(), *args, **kwargs)
            if result.applied:
                self.store.replace_all(result.employees)

        if result.applied:
            logger.info("%s applied by %s.", operation.__name__, ctx.role)
        else:
            logger.warning(
                "%s refused for %s on employee %s: %s.",
                operation.__name__, ctx.role, ctx.current_employee_id, result.outcome,
            )
        return result

    def add_employee(self, ctx, name, position):
        return self.run(add_employee, ctx, name, position)

    def add_goal(self, ctx, title):
        return self.run(add_goal, ctx, title)

    def save_task(self, ctx, goal_id, name, estimated_days, expected_month, task_id=None):
        return self.run(save_task, ctx, goal_id, name, estimated_days, expected_month, task_id=task_id)

    def evaluate(self, ctx, goal_id, outcome, task_id=None, rating=None, approved=False):
        return self.run(evaluate, ctx, goal_id, outcome, task_id=task_id, rating=rating, approved=approved)

    def approve_all(self, ctx, confirm=False):
        return self.run(approve_all, ctx, confirm=confirm)

    def delete_goal(self, ctx, goal_id, confirm=False):
        return self.run(delete_goal, ctx, goal_id, confirm=confirm)

    def import_rows(self, ctx, rows):
        return self.run(import_rows, ctx, rows)


workflow = EvaluationWorkflow()
