# -*- coding: utf-8 -*-
from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import Http404
from django.shortcuts import redirect
from django.views import View
from django.views.generic import FormView, TemplateView

from base.session_context import save_session_context
from .mixins import AdminRequired, LoginRequired, SnapshotMixin, WorkflowMixin
from .. import access
from ..forms import EmployeeForm
from ..records import Phase, entity_state, find_employee
from ..services.scoring import display_goal_rating
from ..store import record_store


class HomeView(LoginRequired, View):
    """المدير بدون موظف مختار → قائمة الموظفين؛ غير ذلك → مساحة العمل"""

    def get(self, request, *args, **kwargs):
        if request.appraisal.is_admin and not request.appraisal.selected_employee_id:
            return redirect("performance:employee_list")
        return redirect("performance:workspace")


class EmployeeListView(AdminRequired, TemplateView):
    """قائمة الموظفين (مدير)"""
    template_name = "performance/employee_list.html"

    def get(self, request, *args, **kwargs):
        # العودة للقائمة تلغي اختيار الموظف
        if request.appraisal.selected_employee_id:
            save_session_context(request, request.appraisal.with_changes(selected_employee_id=None))
        return super().get(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["employees"] = record_store.load()
        return ctx


class EmployeeCreateView(AdminRequired, WorkflowMixin, FormView):
    """إضافة موظف جديد"""
    form_class = EmployeeForm
    template_name = "performance/employee_form.html"
    success_message = "تمت إضافة الموظف"
    success_url_name = "performance:employee_list"

    def form_valid(self, form):
        try:
            result = self.workflow.add_employee(
                self.request.appraisal, form.cleaned_data["name"], form.cleaned_data["position"]
            )
        except ValidationError as exc:
            form.add_error(None, exc.messages)
            return self.form_invalid(form)
        return self.report(result)


class EmployeeSelectView(AdminRequired, View):
    """اختيار موظف للعمل على ملفه"""

    def get(self, request, pk, *args, **kwargs):
        if find_employee(record_store.load(), pk) is None:
            raise Http404("Employee not found.")
        save_session_context(request, request.appraisal.with_changes(selected_employee_id=pk))
        return redirect("performance:workspace")


class WorkspaceView(LoginRequired, SnapshotMixin, TemplateView):
    """
    ملف الموظف: الأهداف والمهام للسنة المختارة
    - ?phase= و ?year= يُحفظان في الجلسة (فلتر عرض فقط)
    """
    template_name = "performance/workspace.html"

    def get(self, request, *args, **kwargs):
        changes = {}
        phase = request.GET.get("phase")
        if phase in Phase.values:
            changes["phase"] = phase
        elif phase:
            messages.warning(request, "مرحلة غير معروفة")
        year = request.GET.get("year")
        if year and year.isdigit():
            changes["year"] = int(year)
        if changes:
            self.update_session(**changes)
        return super().get(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        emp = self.employee
        session = self.appraisal
        locked = access.is_locked(emp)
        goals = []
        for goal in emp.goals_for_year(session.year):
            goals.append({
                "goal": goal,
                "rating": display_goal_rating(goal),
                "state": entity_state(goal, locked),
                "tasks": [{"task": t, "state": entity_state(t, locked)} for t in goal.tasks],
            })
        years = sorted({g.year for g in emp.goals} | {session.year})
        ctx.update({
            "goals": goals,
            "years": years,
            "phases": Phase.choices,
            "locked": locked,
        })
        return ctx
