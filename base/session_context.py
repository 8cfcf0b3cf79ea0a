# base/session_context.py
"""
سياق الجلسة الخاص بالتقييم (بديل للحالة العامة في الواجهة):
- الدور: مدير أو موظف
- هوية الموظف عند الدخول كموظف
- الموظف المختار (للمدير) + السنة المختارة + المرحلة المعروضة

القيم تُحفظ في request.session فقط ولا تُخزَّن دائمًا.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from django.db import models
from django.utils import timezone

SESSION_KEY = "appraisal_context"
DEFAULT_PHASE = "planning"


class Role(models.TextChoices):
    ADMIN = "admin", "Administrator"
    EMPLOYEE = "employee", "Employee"


@dataclass(frozen=True)
class Identity:
    """نتيجة بوابة الدخول."""
    role: str
    display_name: str
    employee_id: Optional[str] = None


@dataclass(frozen=True)
class SessionContext:
    role: Optional[str] = None
    display_name: str = ""
    employee_id: Optional[str] = None
    selected_employee_id: Optional[str] = None
    year: int = 0
    phase: str = DEFAULT_PHASE

    @property
    def is_authenticated(self) -> bool:
        return self.role is not None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def current_employee_id(self) -> Optional[str]:
        """المدير يعمل على الموظف المختار، والموظف على ملفه فقط."""
        if self.is_admin:
            return self.selected_employee_id
        return self.employee_id

    def with_changes(self, **changes) -> "SessionContext":
        return replace(self, **changes)

    def as_session_dict(self) -> dict:
        return {
            "role": self.role,
            "display_name": self.display_name,
            "employee_id": self.employee_id,
            "selected_employee_id": self.selected_employee_id,
            "year": self.year,
            "phase": self.phase,
        }


def current_year() -> int:
    return timezone.localdate().year


def anonymous_context() -> SessionContext:
    return SessionContext(year=current_year())


def get_session_context(request) -> SessionContext:
    data = request.session.get(SESSION_KEY)
    if not data:
        return anonymous_context()
    return SessionContext(
        role=data.get("role"),
        display_name=data.get("display_name", ""),
        employee_id=data.get("employee_id"),
        selected_employee_id=data.get("selected_employee_id"),
        year=int(data.get("year") or current_year()),
        phase=data.get("phase") or DEFAULT_PHASE,
    )


def save_session_context(request, ctx: SessionContext) -> SessionContext:
    request.session[SESSION_KEY] = ctx.as_session_dict()
    request.appraisal = ctx
    return ctx


def start_session(request, identity: Identity) -> SessionContext:
    """
    بدء جلسة بعد نجاح الدخول:
    - الموظف يُثبَّت على ملفه (selected = نفسه)
    - المدير يبدأ بدون موظف مختار (قائمة الموظفين)
    """
    ctx = SessionContext(
        role=identity.role,
        display_name=identity.display_name,
        employee_id=identity.employee_id,
        selected_employee_id=identity.employee_id,
        year=current_year(),
    )
    request.session.cycle_key()
    return save_session_context(request, ctx)


def end_session(request) -> None:
    request.session.pop(SESSION_KEY, None)
    request.appraisal = anonymous_context()
