# -*- coding: utf-8 -*-
"""
سجلات التقييم (Employee → Goal → Task) كبيانات غير قابلة للتعديل.

- كل عملية تعيد بناء المسار من الجذر حتى العنصر المعدّل (dataclasses.replace)
- التخزين بصيغة JSON بأسماء حقول ثابتة (camelCase) مع حذف الحقول الاختيارية غير المضبوطة
- حالة العنصر (مخطط/قيد التنفيذ/...) مشتقة من الحقول الاختيارية وليست مخزنة
"""
from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from django.db import models

# الأشهر كما تظهر في نموذج المهمة
MONTHS = (
    "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
    "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
)

# قيمة بديلة للحقول غير المتوفرة في الاستيراد (الشهر/اسم المهمة/عنوان الهدف)
PLACEHOLDER = "-"


class Phase(models.TextChoices):
    PLANNING = "planning", "التخطيط"
    EXECUTION = "execution", "التنفيذ"
    RESULTS = "results", "النتائج"


class EntityState(models.TextChoices):
    PLANNED = "planned", "Planned"
    IN_EXECUTION = "in_execution", "In Execution"
    RATED_PENDING = "rated_pending", "Rated (Pending Approval)"
    APPROVED = "approved", "Approved"
    FINAL_LOCKED = "final_locked", "Final Locked"


def new_identity(prefix: str) -> str:
    """طابع زمني بالمللي ثانية + جزء عشوائي لتفادي التصادم عند الإنشاء المتتابع."""
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


# ------------------------------------------------------------
# Records
# ------------------------------------------------------------

@dataclass(frozen=True)
class Task:
    id: str
    name: str
    estimated_days: int = 0
    expected_month: str = PLACEHOLDER
    final_rating: Optional[int] = None
    actual_outcome: Optional[str] = None
    is_approved: Optional[bool] = None


@dataclass(frozen=True)
class Goal:
    id: str
    title: str
    year: int
    tasks: Tuple[Task, ...] = ()
    final_rating: Optional[int] = None
    actual_outcome: Optional[str] = None
    is_approved: Optional[bool] = None

    def find_task(self, task_id) -> Optional[Task]:
        return next((t for t in self.tasks if t.id == task_id), None)


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    position: str
    goals: Tuple[Goal, ...] = ()
    final_approved: bool = False

    def find_goal(self, goal_id) -> Optional[Goal]:
        return next((g for g in self.goals if g.id == goal_id), None)

    def goals_for_year(self, year: int) -> Tuple[Goal, ...]:
        return tuple(g for g in self.goals if g.year == year)


def find_employee(employees: Iterable[Employee], employee_id) -> Optional[Employee]:
    if employee_id is None:
        return None
    return next((e for e in employees if e.id == employee_id), None)


# ------------------------------------------------------------
# Derived state
# ------------------------------------------------------------

def entity_state(item, locked: bool = False) -> str:
    """
    الحالة المشتقة لمهمة أو هدف.
    is_approved بدون تقييم حالة ممكنة (الاستيراد والاعتماد الشامل ينتجانها) وتُعد approved.
    """
    if locked:
        return EntityState.FINAL_LOCKED
    if item.is_approved:
        return EntityState.APPROVED
    if item.actual_outcome and item.final_rating is not None:
        return EntityState.RATED_PENDING
    if item.actual_outcome:
        return EntityState.IN_EXECUTION
    return EntityState.PLANNED


# ------------------------------------------------------------
# JSON layout
# ------------------------------------------------------------

def _put_optional(data: Dict[str, Any], key: str, value) -> None:
    if value is not None:
        data[key] = value


def task_to_dict(task: Task) -> Dict[str, Any]:
    data = {
        "id": task.id,
        "name": task.name,
        "estimatedDays": task.estimated_days,
        "expectedMonth": task.expected_month,
    }
    _put_optional(data, "actualOutcome", task.actual_outcome)
    _put_optional(data, "finalRating", task.final_rating)
    _put_optional(data, "isApproved", task.is_approved)
    return data


def goal_to_dict(goal: Goal) -> Dict[str, Any]:
    data = {
        "id": goal.id,
        "title": goal.title,
        "year": goal.year,
        "tasks": [task_to_dict(t) for t in goal.tasks],
    }
    _put_optional(data, "finalRating", goal.final_rating)
    _put_optional(data, "actualOutcome", goal.actual_outcome)
    _put_optional(data, "isApproved", goal.is_approved)
    return data


def employee_to_dict(emp: Employee) -> Dict[str, Any]:
    data = {
        "id": emp.id,
        "name": emp.name,
        "position": emp.position,
        "goals": [goal_to_dict(g) for g in emp.goals],
    }
    if emp.final_approved:
        data["finalApproved"] = True
    return data


def task_from_dict(data: Dict[str, Any]) -> Task:
    return Task(
        id=str(data["id"]),
        name=data.get("name", ""),
        estimated_days=int(data.get("estimatedDays") or 0),
        expected_month=data.get("expectedMonth") or PLACEHOLDER,
        final_rating=data.get("finalRating"),
        actual_outcome=data.get("actualOutcome"),
        is_approved=data.get("isApproved"),
    )


def goal_from_dict(data: Dict[str, Any]) -> Goal:
    return Goal(
        id=str(data["id"]),
        title=data.get("title", ""),
        year=int(data["year"]),
        tasks=tuple(task_from_dict(t) for t in data.get("tasks") or ()),
        final_rating=data.get("finalRating"),
        actual_outcome=data.get("actualOutcome"),
        is_approved=data.get("isApproved"),
    )


def employee_from_dict(data: Dict[str, Any]) -> Employee:
    # isFinalApproved: اسم الحقل في النسخ الأقدم من المخزن
    approved = data.get("finalApproved", data.get("isFinalApproved", False))
    return Employee(
        id=str(data["id"]),
        name=data.get("name", ""),
        position=data.get("position", ""),
        goals=tuple(goal_from_dict(g) for g in data.get("goals") or ()),
        final_approved=bool(approved),
    )


def dump_employees(employees: Iterable[Employee]) -> list:
    return [employee_to_dict(e) for e in employees]


def load_employees(payload) -> Tuple[Employee, ...]:
    return tuple(employee_from_dict(e) for e in payload or ())
