# -*- coding: utf-8 -*-
from django.core.exceptions import ValidationError
from django.http import Http404
from django.views.generic import FormView

from .mixins import AdminRequired, LoginRequired, SnapshotMixin, WorkflowMixin
from ..forms import ConfirmForm, EvaluationForm


class EvaluateView(LoginRequired, SnapshotMixin, WorkflowMixin, FormView):
    """
    تقييم/تحديث تنفيذ:
    - مع task_id → على مستوى المهمة (ويُعاد حساب تقييم الهدف عند المدير)
    - بدون task_id → على مستوى الهدف نفسه
    """
    form_class = EvaluationForm
    template_name = "performance/evaluation_form.html"

    @property
    def success_message(self):
        return "تم حفظ التقييم والاعتماد" if self.appraisal.is_admin else "تم حفظ تفاصيل التنفيذ"

    def get_target(self):
        goal = self.get_goal(self.kwargs["goal_id"])
        task_id = self.kwargs.get("task_id")
        if task_id is None:
            return goal
        task = goal.find_task(task_id)
        if task is None:
            raise Http404("Task not found.")
        return task

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["is_admin"] = self.appraisal.is_admin
        return kwargs

    def get_initial(self):
        return EvaluationForm.initial_for(self.get_target())

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["goal"] = self.get_goal(self.kwargs["goal_id"])
        ctx["target"] = self.get_target()
        return ctx

    def form_valid(self, form):
        data = form.cleaned_data
        try:
            result = self.workflow.evaluate(
                self.appraisal,
                self.kwargs["goal_id"],
                data["outcome"],
                task_id=self.kwargs.get("task_id"),
                rating=data.get("rating"),
                approved=data.get("approved", False),
            )
        except ValidationError as exc:
            form.add_error(None, exc.messages)
            return self.form_invalid(form)
        return self.report(result)


class ApproveAllView(AdminRequired, SnapshotMixin, WorkflowMixin, FormView):
    """اعتماد كافة نتائج الموظف بشكل نهائي (لا رجعة فيه)"""
    form_class = ConfirmForm
    template_name = "performance/confirm.html"
    success_message = "تم اعتماد ملف الموظف نهائيًا"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["question"] = "هل تريد اعتماد كافة نتائج هذا الموظف بشكل نهائي؟"
        return ctx

    def form_valid(self, form):
        result = self.workflow.approve_all(self.appraisal, confirm=form.cleaned_data["confirm"])
        return self.report(result)
