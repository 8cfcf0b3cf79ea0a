# base/access.py
# ------------------------------------------------------------
# بوابة الدخول الثابتة
# ------------------------------------------------------------
#   - المدير: زوج بيانات ثابت من الإعدادات
#   - الموظف: مطابقة تامة للاسم مع السجلات المخزنة
#   - غير ذلك: AuthFailure بدون أي تغيير في الحالة
# ------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Iterable

from django.conf import settings

from .exceptions import AuthFailure
from .session_context import Identity, Role

logger = logging.getLogger(__name__)


def is_admin_credentials(username: str, password: str) -> bool:
    expected_user = getattr(settings, "APPRAISAL_ADMIN_USERNAME", "")
    expected_pass = getattr(settings, "APPRAISAL_ADMIN_PASSWORD", "")
    if not expected_user:
        return False
    return username == expected_user and password == expected_pass


def authenticate(username: str, password: str, employees: Iterable) -> Identity:
    """
    يحوّل محاولة الدخول إلى هوية مدير أو موظف.
    `employees` أي تسلسل عناصر تملك id و name.
    """
    if is_admin_credentials(username, password):
        return Identity(
            role=Role.ADMIN,
            display_name=getattr(settings, "APPRAISAL_ADMIN_DISPLAY_NAME", "Administrator"),
        )

    for emp in employees:
        if emp.name == username:
            return Identity(role=Role.EMPLOYEE, display_name=emp.name, employee_id=emp.id)

    logger.info("Rejected login attempt for %r.", username)
    raise AuthFailure(username)
