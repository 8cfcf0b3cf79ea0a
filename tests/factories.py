"""
factory_boy factories for the appraisal records.

Records are frozen dataclasses, so the factories only *build* them; nothing
touches the database until a test hands a snapshot to the record store.
"""
import factory

from base.session_context import Role, SessionContext
from performance.records import MONTHS, Employee, Goal, Task


class TaskFactory(factory.Factory):
    class Meta:
        model = Task

    id = factory.Sequence(lambda n: f"task_{n}")
    name = factory.Sequence(lambda n: f"Task {n}")
    estimated_days = 3
    expected_month = MONTHS[0]


class GoalFactory(factory.Factory):
    class Meta:
        model = Goal

    id = factory.Sequence(lambda n: f"goal_{n}")
    title = factory.Sequence(lambda n: f"Goal {n}")
    year = 2024
    tasks = ()


class EmployeeFactory(factory.Factory):
    class Meta:
        model = Employee

    id = factory.Sequence(lambda n: f"emp_{n}")
    name = factory.Faker("name")
    position = "Analyst"
    goals = ()
    final_approved = False


def admin_context(employee=None, year=2024, **kwargs):
    return SessionContext(
        role=Role.ADMIN,
        display_name="Admin",
        selected_employee_id=getattr(employee, "id", employee),
        year=year,
        **kwargs,
    )


def employee_context(employee, year=2024, **kwargs):
    return SessionContext(
        role=Role.EMPLOYEE,
        display_name=employee.name,
        employee_id=employee.id,
        selected_employee_id=employee.id,
        year=year,
        **kwargs,
    )
