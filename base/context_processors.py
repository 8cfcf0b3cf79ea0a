# base/context_processors.py
from base.session_context import anonymous_context


def appraisal(request):
    ctx = getattr(request, "appraisal", None) or anonymous_context()
    return {
        "appraisal": ctx,
        "is_admin": ctx.is_admin,
    }
