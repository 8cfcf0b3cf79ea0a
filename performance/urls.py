# performance/urls.py
from django.urls import path
from . import views

app_name = "performance"

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),

    # --------------------------------------------------------
    # Employees (admin)
    # --------------------------------------------------------
    path("employees/", views.EmployeeListView.as_view(), name="employee_list"),
    path("employees/new/", views.EmployeeCreateView.as_view(), name="employee_create"),
    path("employees/<str:pk>/select/", views.EmployeeSelectView.as_view(), name="employee_select"),

    # --------------------------------------------------------
    # Workspace (planning / execution / results)
    # --------------------------------------------------------
    path("workspace/", views.WorkspaceView.as_view(), name="workspace"),
    path("workspace/approve-all/", views.ApproveAllView.as_view(), name="approve_all"),

    # --------------------------------------------------------
    # Goals
    # --------------------------------------------------------
    path("goals/new/", views.GoalCreateView.as_view(), name="goal_create"),
    path("goals/<str:goal_id>/delete/", views.GoalDeleteView.as_view(), name="goal_delete"),
    path("goals/<str:goal_id>/evaluate/", views.EvaluateView.as_view(), name="goal_evaluate"),

    # --------------------------------------------------------
    # Tasks
    # --------------------------------------------------------
    path("goals/<str:goal_id>/tasks/new/", views.TaskCreateView.as_view(), name="task_create"),
    path("goals/<str:goal_id>/tasks/<str:task_id>/edit/", views.TaskUpdateView.as_view(), name="task_update"),
    path("goals/<str:goal_id>/tasks/<str:task_id>/evaluate/", views.EvaluateView.as_view(), name="task_evaluate"),

    # --------------------------------------------------------
    # Excel import / export
    # --------------------------------------------------------
    path("export/", views.ExportView.as_view(), name="export"),
    path("import/", views.ImportView.as_view(), name="import"),
]
