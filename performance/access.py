# performance/access.py
# ------------------------------------------------------------
# High-level business rules for the appraisal workspace
# ------------------------------------------------------------
# IMPORTANT:
#   - Two roles only: administrator, and the employee matching the record.
#   - A finally-approved employee is frozen for everyone.
#   - Section 2 adds the phase filter used by the UI; the workflow
#     itself only enforces role + lock (section 1).
# ------------------------------------------------------------

from __future__ import annotations
from typing import Optional

from base.session_context import SessionContext
from performance.records import Employee, Phase


# ============================================================
# 1) Role & lock rules (enforced by the workflow)
# ============================================================

def is_locked(emp: Optional[Employee]) -> bool:
    return bool(emp and emp.final_approved)


def is_own_record(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    """The logged-in employee looking at their own file."""
    if not ctx or not ctx.is_authenticated or not emp:
        return False
    return ctx.employee_id is not None and ctx.employee_id == emp.id


def can_view_employee(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    if not ctx or not ctx.is_authenticated or not emp:
        return False
    return ctx.is_admin or is_own_record(ctx, emp)


def can_manage(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    """
    Planning actions (add goal, add/edit task, delete goal):
    administrator only, and only while the employee is not locked.
    """
    if not ctx or not ctx.is_admin or not emp:
        return False
    return not is_locked(emp)


def can_evaluate(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    """
    Recording outcomes:
    - administrator on any employee
    - employee on their own file
    never after the final approval.
    """
    if not can_view_employee(ctx, emp):
        return False
    return not is_locked(emp)


def can_rate(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    """Ratings and approval flags are administrator-only."""
    return bool(ctx and ctx.is_admin) and can_evaluate(ctx, emp)


def can_approve_all(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    return can_manage(ctx, emp)


# ============================================================
# 2) Phase visibility (UI only)
# ============================================================

def show_add_goal(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    return ctx.phase == Phase.PLANNING and can_manage(ctx, emp)


def show_delete_goal(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    return can_manage(ctx, emp)


def show_task_editing(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    return ctx.phase in (Phase.PLANNING, Phase.EXECUTION) and can_manage(ctx, emp)


def show_evaluate(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    return ctx.phase == Phase.RESULTS and can_evaluate(ctx, emp)


def show_approve_all(ctx: SessionContext, emp: Optional[Employee]) -> bool:
    return ctx.phase == Phase.RESULTS and can_approve_all(ctx, emp)
