# base/middleware.py
from __future__ import annotations
from .session_context import get_session_context


class AppraisalSessionMiddleware:
    """
    يقرأ سياق التقييم (الدور/الموظف المختار/السنة/المرحلة) من الجلسة
    ويحقنه على request.appraisal لكل طلب.
    يجب وضعه بعد SessionMiddleware.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.appraisal = get_session_context(request)
        return self.get_response(request)
