import pytest

from performance.records import PLACEHOLDER
from performance.services.projection import project_rows
from performance.services.reconcile import (
    DEFAULT_POSITION, coerce_rating, coerce_year, reconcile_rows,
)
from tests.factories import EmployeeFactory, GoalFactory, TaskFactory


def row(name="Sara", position="Analyst", goal="Q1", year=2024, task="Write", rating=None, status=None):
    return {
        "Employee Name": name,
        "Position": position,
        "Goal": goal,
        "Year": year,
        "Task": task,
        "Rating": rating,
        "Status": status,
    }


class TestCoercion:

    @pytest.mark.parametrize("value,expected", [
        (2023, 2023),
        (2023.0, 2023),
        ("2022", 2022),
        ("2021 (H1)", 2021),
        ("", 2024),
        (None, 2024),
        ("next year", 2024),
        (0, 2024),
        (True, 2024),
    ])
    def test_year(self, value, expected):
        assert coerce_year(value, default=2024) == expected

    @pytest.mark.parametrize("value,expected", [
        (80, 80),
        (80.5, 81),
        (0, 0),
        (150, 100),
        (-5, 0),
        ("80", None),
        (None, None),
        (False, None),
    ])
    def test_rating(self, value, expected):
        assert coerce_rating(value) == expected


class TestReconcileRows:

    def test_blank_names_are_skipped(self):
        employees = reconcile_rows([row(name=""), row(name="   "), row(name=None), row()], selected_year=2024)
        assert [e.name for e in employees] == ["Sara"]

    def test_missing_position_gets_default(self):
        (emp,) = reconcile_rows([row(position="")], selected_year=2024)
        assert emp.position == DEFAULT_POSITION

    def test_first_row_fixes_position(self):
        (emp,) = reconcile_rows([row(position="Analyst"), row(position="Manager", task="Other")], 2024)
        assert emp.position == "Analyst"

    def test_year_falls_back_to_selected_year(self):
        (emp,) = reconcile_rows([row(year="")], selected_year=2030)
        assert emp.goals[0].year == 2030

    def test_same_title_different_year_are_two_goals(self):
        (emp,) = reconcile_rows([row(year=2023), row(year=2024)], selected_year=2024)
        assert [(g.title, g.year) for g in emp.goals] == [("Q1", 2023), ("Q1", 2024)]

    def test_goal_fields_are_taken_from_first_row_only(self):
        rows = [
            row(task="A", rating=60, status="Approved"),
            row(task="B", rating=90, status="Under Review"),
        ]
        (emp,) = reconcile_rows(rows, selected_year=2024)
        goal = emp.goals[0]

        assert goal.final_rating == 60
        assert goal.is_approved is True
        assert [(t.name, t.final_rating, t.is_approved) for t in goal.tasks] == [
            ("A", 60, True), ("B", 90, False),
        ]

    def test_tasks_are_appended_without_dedup(self):
        (emp,) = reconcile_rows([row(task="Write"), row(task="Write")], selected_year=2024)
        assert [t.name for t in emp.goals[0].tasks] == ["Write", "Write"]

    def test_imported_tasks_have_placeholder_schedule(self):
        (emp,) = reconcile_rows([row()], selected_year=2024)
        task = emp.goals[0].tasks[0]
        assert task.estimated_days == 0
        assert task.expected_month == PLACEHOLDER
        assert task.actual_outcome is None

    @pytest.mark.parametrize("goal", ["", PLACEHOLDER, None])
    def test_row_without_goal_only_creates_employee(self, goal):
        (emp,) = reconcile_rows([row(goal=goal)], selected_year=2024)
        assert emp.goals == ()

    @pytest.mark.parametrize("task", ["", PLACEHOLDER])
    def test_placeholder_task_only_creates_goal(self, task):
        (emp,) = reconcile_rows([row(task=task, rating=70)], selected_year=2024)
        assert emp.goals[0].tasks == ()
        assert emp.goals[0].final_rating == 70

    def test_non_numeric_rating_is_ignored(self):
        (emp,) = reconcile_rows([row(rating="excellent")], selected_year=2024)
        assert emp.goals[0].final_rating is None
        assert emp.goals[0].tasks[0].final_rating is None

    def test_out_of_range_ratings_are_clamped(self):
        rows = [row(task="A", rating=150), row(task="B", rating=-5)]
        (emp,) = reconcile_rows(rows, selected_year=2024)
        goal = emp.goals[0]
        assert [t.final_rating for t in goal.tasks] == [100, 0]
        assert goal.final_rating == 100

    def test_names_and_titles_match_exactly(self):
        rows = [row(name="Sara"), row(name="Sara "), row(name="Sara", goal="Q1 ")]
        employees = reconcile_rows(rows, selected_year=2024)
        assert [e.name for e in employees] == ["Sara", "Sara "]
        assert [g.title for g in employees[0].goals] == ["Q1", "Q1 "]

    def test_status_must_match_exactly(self):
        (emp,) = reconcile_rows([row(status="approved")], selected_year=2024)
        assert emp.goals[0].is_approved is False

    def test_employees_keep_file_order(self):
        rows = [row(name="B"), row(name="A"), row(name="B", task="More")]
        assert [e.name for e in reconcile_rows(rows, 2024)] == ["B", "A"]

    def test_reimport_resolves_same_identities(self):
        rows = [row(name="Sara", goal="Q1"), row(name="Omar", goal="Q2", year="")]

        def shape(employees):
            return [(e.name, [(g.title, g.year) for g in e.goals]) for e in employees]

        first = reconcile_rows(rows, selected_year=2024)
        second = reconcile_rows(rows, selected_year=2024)
        assert shape(first) == shape(second)
        assert {e.id for e in first}.isdisjoint({e.id for e in second})


def test_export_then_import_reproduces_projection():
    sara = EmployeeFactory(name="Sara", position="Analyst", goals=(
        GoalFactory(title="Q1", year=2024, tasks=(
            TaskFactory(name="Write", final_rating=80, is_approved=True),
            TaskFactory(name="Review", final_rating=None),
        )),
        GoalFactory(title="Solo", year=2023, final_rating=55, is_approved=True),
    ))
    omar = EmployeeFactory(name="Omar", position="Developer", goals=(
        GoalFactory(title="Ship", year=2024, tasks=(TaskFactory(name="Deploy", final_rating=91),)),
    ))
    rows = project_rows([sara, omar])

    rebuilt = reconcile_rows(rows, selected_year=2024)

    assert project_rows(rebuilt) == rows
