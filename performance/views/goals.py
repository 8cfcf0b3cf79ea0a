# -*- coding: utf-8 -*-
from django.core.exceptions import ValidationError
from django.views.generic import FormView

from .mixins import AdminRequired, SnapshotMixin, WorkflowMixin
from ..forms import ConfirmForm, GoalForm


class GoalCreateView(AdminRequired, SnapshotMixin, WorkflowMixin, FormView):
    """إضافة هدف استراتيجي للموظف المختار في السنة المختارة"""
    form_class = GoalForm
    template_name = "performance/goal_form.html"
    success_message = "تمت إضافة الهدف"

    def form_valid(self, form):
        try:
            result = self.workflow.add_goal(self.appraisal, form.cleaned_data["title"])
        except ValidationError as exc:
            form.add_error(None, exc.messages)
            return self.form_invalid(form)
        return self.report(result)


class GoalDeleteView(AdminRequired, SnapshotMixin, WorkflowMixin, FormView):
    """حذف هدف مع مهامه بعد التأكيد"""
    form_class = ConfirmForm
    template_name = "performance/confirm.html"
    success_message = "تم حذف الهدف"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        goal = self.get_goal(self.kwargs["goal_id"])
        ctx["question"] = f"حذف الهدف؟ «{goal.title}»"
        return ctx

    def form_valid(self, form):
        result = self.workflow.delete_goal(
            self.appraisal, self.kwargs["goal_id"], confirm=form.cleaned_data["confirm"]
        )
        return self.report(result)
