# -*- coding: utf-8 -*-
from django.core.exceptions import ValidationError
from django.http import Http404
from django.views.generic import FormView

from .mixins import AdminRequired, SnapshotMixin, WorkflowMixin
from ..forms import TaskForm


class TaskCreateView(AdminRequired, SnapshotMixin, WorkflowMixin, FormView):
    """مهمة جديدة تحت هدف"""
    form_class = TaskForm
    template_name = "performance/task_form.html"
    success_message = "تمت إضافة المهمة"

    def get_task_id(self):
        return None

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["goal"] = self.get_goal(self.kwargs["goal_id"])
        return ctx

    def form_valid(self, form):
        data = form.cleaned_data
        try:
            result = self.workflow.save_task(
                self.appraisal,
                self.kwargs["goal_id"],
                data["name"],
                data["estimated_days"],
                data["expected_month"],
                task_id=self.get_task_id(),
            )
        except ValidationError as exc:
            form.add_error(None, exc.messages)
            return self.form_invalid(form)
        return self.report(result)


class TaskUpdateView(TaskCreateView):
    """تحرير الحقول الزمنية لمهمة (لا يمس التقييم)"""
    success_message = "تم تحديث المهمة"

    def get_task_id(self):
        return self.kwargs["task_id"]

    def get_task(self):
        task = self.get_goal(self.kwargs["goal_id"]).find_task(self.get_task_id())
        if task is None:
            raise Http404("Task not found.")
        return task

    def get_initial(self):
        return TaskForm.initial_for(self.get_task())

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["task"] = self.get_task()
        return ctx
