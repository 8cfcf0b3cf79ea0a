# -*- coding: utf-8 -*-
# نقطة تجميع الـ Views ليتم الاستيراد من performance.views مباشرة

from .employees import (
    HomeView,
    EmployeeListView,
    EmployeeCreateView,
    EmployeeSelectView,
    WorkspaceView,
)
from .goals import GoalCreateView, GoalDeleteView
from .tasks import TaskCreateView, TaskUpdateView
from .evaluations import EvaluateView, ApproveAllView
from .transfer import ExportView, ImportView

__all__ = [
    "HomeView",
    "EmployeeListView",
    "EmployeeCreateView",
    "EmployeeSelectView",
    "WorkspaceView",
    "GoalCreateView",
    "GoalDeleteView",
    "TaskCreateView",
    "TaskUpdateView",
    "EvaluateView",
    "ApproveAllView",
    "ExportView",
    "ImportView",
]
