# performance/views/mixins.py
from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.shortcuts import redirect
from django.utils.functional import cached_property

from base.session_context import save_session_context
from ..records import find_employee
from ..services.workflow import Outcome, workflow
from ..store import record_store


class LoginRequired:
    """Require an appraisal session (admin or employee) for all views."""
    login_url = "base:login"

    def dispatch(self, request, *args, **kwargs):
        if not request.appraisal.is_authenticated:
            return redirect_to_login(request.get_full_path(), self.login_url)
        return super().dispatch(request, *args, **kwargs)


class AdminRequired(LoginRequired):
    """Administrator-only screens; employees get 403."""

    def dispatch(self, request, *args, **kwargs):
        if request.appraisal.is_authenticated and not request.appraisal.is_admin:
            raise PermissionDenied
        return super().dispatch(request, *args, **kwargs)


class SnapshotMixin:
    """Current record set + the employee the session is working on."""

    def dispatch(self, request, *args, **kwargs):
        # المدير بدون موظف مختار يعود لقائمة الموظفين
        if request.appraisal.is_admin and not request.appraisal.selected_employee_id:
            return redirect("performance:employee_list")
        return super().dispatch(request, *args, **kwargs)

    @property
    def appraisal(self):
        return self.request.appraisal

    @cached_property
    def employees(self):
        return record_store.load()

    @cached_property
    def employee(self):
        emp = find_employee(self.employees, self.appraisal.current_employee_id)
        if emp is None:
            raise Http404("Employee not found.")
        return emp

    def get_goal(self, goal_id):
        goal = self.employee.find_goal(goal_id)
        if goal is None:
            raise Http404("Goal not found.")
        return goal

    def update_session(self, **changes):
        return save_session_context(self.request, self.appraisal.with_changes(**changes))

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx.setdefault("employee", self.employee)
        return ctx


class WorkflowMixin:
    """Run a workflow operation and turn its outcome into a flash message."""
    workflow = workflow
    success_message = "تم الحفظ بنجاح"
    success_url_name = "performance:workspace"

    refusal_messages = {
        Outcome.PERMISSION_DENIED: "هذا الإجراء متاح للمدير فقط",
        Outcome.LOCKED: "ملف الموظف معتمد نهائيًا ولا يمكن تعديله",
        Outcome.NOT_FOUND: "السجل المطلوب غير موجود",
        Outcome.NOT_CONFIRMED: "لم يتم تأكيد العملية",
    }

    def report(self, result):
        if result.applied:
            messages.success(self.request, self.success_message)
        else:
            messages.warning(self.request, self.refusal_messages.get(result.outcome, result.outcome))
        return redirect(self.success_url_name)
