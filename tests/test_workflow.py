import pytest
from django.core.exceptions import ValidationError

from performance.records import EntityState, entity_state, find_employee
from performance.services import workflow as wf
from performance.services.workflow import EvaluationWorkflow, Outcome
from tests.factories import (
    EmployeeFactory, GoalFactory, TaskFactory, admin_context, employee_context,
)

pytestmark = pytest.mark.workflow


def _employee(result, emp_id):
    return find_employee(result.employees, emp_id)


@pytest.fixture
def sara():
    task_a = TaskFactory(id="t_a")
    task_b = TaskFactory(id="t_b")
    goal = GoalFactory(id="g_1", title="Q1 Targets", tasks=(task_a, task_b))
    return EmployeeFactory(id="e_sara", name="Sara", position="Analyst", goals=(goal,))


@pytest.fixture
def locked(sara):
    from dataclasses import replace
    return replace(sara, final_approved=True)


class TestAdminScenario:

    def test_build_and_evaluate_from_scratch(self):
        ctx = admin_context()
        res = wf.add_employee(ctx, (), "Sara", "Analyst")
        assert res.applied
        emp_id = res.created_id

        ctx = admin_context(emp_id, year=2024)
        res = wf.add_goal(ctx, res.employees, "Q1 Targets")
        goal_id = res.created_id
        res = wf.save_task(ctx, res.employees, goal_id, "Write report", 5, "يناير")
        task_id = res.created_id
        res = wf.evaluate(ctx, res.employees, goal_id, "Report delivered",
                          task_id=task_id, rating=80, approved=True)

        assert res.applied
        goal = _employee(res, emp_id).find_goal(goal_id)
        task = goal.find_task(task_id)
        assert goal.year == 2024
        assert task.final_rating == 80
        assert task.is_approved is True
        assert goal.final_rating == 80
        assert not goal.is_approved

    def test_goal_rating_is_recomputed_over_all_tasks(self, sara):
        ctx = admin_context(sara)
        res = wf.evaluate(ctx, (sara,), "g_1", "done", task_id="t_a", rating=70)
        res = wf.evaluate(ctx, res.employees, "g_1", "done", task_id="t_b", rating=91)
        assert _employee(res, sara.id).find_goal("g_1").final_rating == 81

    def test_task_evaluation_overwrites_manual_goal_rating(self, sara):
        ctx = admin_context(sara)
        res = wf.evaluate(ctx, (sara,), "g_1", "overall", rating=40)
        assert _employee(res, sara.id).find_goal("g_1").final_rating == 40

        res = wf.evaluate(ctx, res.employees, "g_1", "done", task_id="t_a", rating=90)
        assert _employee(res, sara.id).find_goal("g_1").final_rating == 90

    def test_goal_level_evaluation_leaves_tasks_alone(self, sara):
        res = wf.evaluate(admin_context(sara), (sara,), "g_1", "overall", rating=65, approved=True)
        goal = _employee(res, sara.id).find_goal("g_1")
        assert goal.final_rating == 65
        assert goal.is_approved is True
        assert goal.actual_outcome == "overall"
        assert all(t.final_rating is None for t in goal.tasks)

    def test_admin_rating_is_optional(self, sara):
        res = wf.evaluate(admin_context(sara), (sara,), "g_1", "in progress", task_id="t_a")
        goal = _employee(res, sara.id).find_goal("g_1")
        assert goal.find_task("t_a").final_rating is None
        assert goal.final_rating == 0

    def test_editing_task_keeps_evaluation(self, sara):
        ctx = admin_context(sara)
        res = wf.evaluate(ctx, (sara,), "g_1", "done", task_id="t_a", rating=75, approved=True)
        res = wf.save_task(ctx, res.employees, "g_1", "Renamed", 9, "مارس", task_id="t_a")

        task = _employee(res, sara.id).find_goal("g_1").find_task("t_a")
        assert (task.name, task.estimated_days, task.expected_month) == ("Renamed", 9, "مارس")
        assert (task.final_rating, task.is_approved, task.actual_outcome) == (75, True, "done")

    def test_new_goal_takes_selected_year(self, sara):
        res = wf.add_goal(admin_context(sara, year=2026), (sara,), "Next year")
        goal = _employee(res, sara.id).find_goal(res.created_id)
        assert goal.year == 2026
        assert goal.tasks == ()

    def test_snapshot_is_not_mutated(self, sara):
        before = (sara,)
        wf.evaluate(admin_context(sara), before, "g_1", "done", task_id="t_a", rating=50)
        assert before[0].goals[0].tasks[0].final_rating is None

    def test_other_employees_untouched(self, sara):
        other = EmployeeFactory()
        res = wf.add_goal(admin_context(sara), (other, sara), "X")
        assert res.employees[0] is other


class TestEmployeeRole:

    def test_employee_records_outcome_only(self, sara):
        ctx = employee_context(sara)
        res = wf.evaluate(ctx, (sara,), "g_1", "my notes", task_id="t_a", rating=100, approved=True)

        assert res.applied
        goal = _employee(res, sara.id).find_goal("g_1")
        task = goal.find_task("t_a")
        assert task.actual_outcome == "my notes"
        assert task.final_rating is None
        assert task.is_approved is None
        assert goal.final_rating is None
        assert entity_state(task) == EntityState.IN_EXECUTION

    @pytest.mark.parametrize("operation,args", [
        (wf.add_goal, ("title",)),
        (wf.save_task, ("g_1", "name", 1, "يناير")),
        (wf.delete_goal, ("g_1",)),
        (wf.approve_all, ()),
        (wf.add_employee, ("Omar", "Dev")),
    ])
    def test_planning_is_admin_only(self, sara, operation, args):
        res = operation(employee_context(sara), (sara,), *args)
        assert res.outcome == Outcome.PERMISSION_DENIED
        assert res.employees == (sara,)

    def test_employee_works_on_own_file_only(self, sara):
        other = EmployeeFactory(goals=(GoalFactory(id="g_x"),))
        ctx = employee_context(sara).with_changes(selected_employee_id=other.id)
        res = wf.evaluate(ctx, (sara, other), "g_x", "x")
        assert res.outcome == Outcome.NOT_FOUND
        assert res.employees == (sara, other)

    def test_anonymous_is_denied(self, sara):
        from base.session_context import SessionContext
        res = wf.evaluate(SessionContext(year=2024), (sara,), "g_1", "x")
        assert res.outcome == Outcome.PERMISSION_DENIED


class TestFinalLock:

    @pytest.mark.parametrize("operation,args,kwargs", [
        (wf.add_goal, ("title",), {}),
        (wf.save_task, ("g_1", "name", 1, "يناير"), {}),
        (wf.save_task, ("g_1", "name", 1, "يناير"), {"task_id": "t_a"}),
        (wf.delete_goal, ("g_1",), {"confirm": True}),
        (wf.evaluate, ("g_1", "late"), {"task_id": "t_a", "rating": 10}),
        (wf.evaluate, ("g_1", "late"), {}),
        (wf.approve_all, (), {"confirm": True}),
    ])
    def test_locked_employee_refuses_changes(self, locked, operation, args, kwargs):
        res = operation(admin_context(locked), (locked,), *args, **kwargs)
        assert res.outcome == Outcome.LOCKED
        assert res.employees == (locked,)

    def test_locked_employee_refuses_employee_outcome(self, locked):
        res = wf.evaluate(employee_context(locked), (locked,), "g_1", "late", task_id="t_a")
        assert res.outcome == Outcome.LOCKED

    def test_approve_all_sets_flags_and_keeps_ratings(self, sara):
        ctx = admin_context(sara)
        res = wf.evaluate(ctx, (sara,), "g_1", "done", task_id="t_a", rating=70)
        res = wf.approve_all(ctx, res.employees, confirm=True)

        emp = _employee(res, sara.id)
        goal = emp.find_goal("g_1")
        assert emp.final_approved is True
        assert goal.is_approved is True
        assert all(t.is_approved for t in goal.tasks)
        assert goal.final_rating == 70
        assert goal.find_task("t_a").final_rating == 70
        assert goal.find_task("t_b").final_rating is None
        assert goal.find_task("t_a").actual_outcome == "done"

    def test_approve_all_requires_confirmation(self, sara):
        res = wf.approve_all(admin_context(sara), (sara,))
        assert res.outcome == Outcome.NOT_CONFIRMED
        assert not _employee(res, sara.id).final_approved


class TestDeleteGoal:

    def test_delete_removes_goal_and_tasks(self, sara):
        res = wf.delete_goal(admin_context(sara), (sara,), "g_1", confirm=True)
        assert res.applied
        assert _employee(res, sara.id).goals == ()

    def test_delete_requires_confirmation(self, sara):
        res = wf.delete_goal(admin_context(sara), (sara,), "g_1")
        assert res.outcome == Outcome.NOT_CONFIRMED

    def test_delete_unknown_goal(self, sara):
        res = wf.delete_goal(admin_context(sara), (sara,), "missing", confirm=True)
        assert res.outcome == Outcome.NOT_FOUND


class TestValidationAndLookup:

    @pytest.mark.parametrize("name,position", [("", "Analyst"), ("Sara", "  "), (None, "x")])
    def test_add_employee_requires_fields(self, name, position):
        with pytest.raises(ValidationError):
            wf.add_employee(admin_context(), (), name, position)

    def test_goal_title_required(self, sara):
        with pytest.raises(ValidationError):
            wf.add_goal(admin_context(sara), (sara,), "   ")

    def test_task_month_required(self, sara):
        with pytest.raises(ValidationError):
            wf.save_task(admin_context(sara), (sara,), "g_1", "name", 1, "")

    def test_negative_days_rejected(self, sara):
        with pytest.raises(ValidationError):
            wf.save_task(admin_context(sara), (sara,), "g_1", "name", -1, "يناير")

    def test_outcome_required(self, sara):
        with pytest.raises(ValidationError):
            wf.evaluate(admin_context(sara), (sara,), "g_1", "", task_id="t_a")

    @pytest.mark.parametrize("rating", [-1, 101])
    def test_rating_out_of_range(self, sara, rating):
        with pytest.raises(ValidationError):
            wf.evaluate(admin_context(sara), (sara,), "g_1", "x", rating=rating)

    def test_no_selected_employee(self, sara):
        res = wf.add_goal(admin_context(), (sara,), "x")
        assert res.outcome == Outcome.NOT_FOUND

    def test_unknown_task(self, sara):
        res = wf.evaluate(admin_context(sara), (sara,), "g_1", "x", task_id="nope")
        assert res.outcome == Outcome.NOT_FOUND

    def test_unknown_goal_for_task(self, sara):
        res = wf.save_task(admin_context(sara), (sara,), "nope", "n", 1, "يناير")
        assert res.outcome == Outcome.NOT_FOUND


class TestImportRows:

    def test_import_replaces_everything(self, sara):
        rows = [{"Employee Name": "Omar", "Goal": "G", "Task": "T", "Rating": 50}]
        res = wf.import_rows(admin_context(year=2025), (sara,), rows)
        assert res.applied
        assert [e.name for e in res.employees] == ["Omar"]
        assert res.employees[0].goals[0].year == 2025

    def test_import_is_admin_only(self, sara):
        res = wf.import_rows(employee_context(sara), (sara,), [])
        assert res.outcome == Outcome.PERMISSION_DENIED


@pytest.mark.django_db
class TestEvaluationWorkflow:

    def test_applied_result_is_persisted(self, store, sara):
        store.replace_all((sara,))
        flow = EvaluationWorkflow(store)

        result = flow.evaluate(admin_context(sara), "g_1", "done", task_id="t_a", rating=88)

        assert result.applied
        assert store.load() == result.employees
        assert store.load()[0].find_goal("g_1").final_rating == 88

    def test_refused_result_leaves_store_untouched(self, store, locked):
        store.replace_all((locked,))
        flow = EvaluationWorkflow(store)

        result = flow.add_goal(admin_context(locked), "blocked")

        assert result.outcome == Outcome.LOCKED
        assert store.load() == (locked,)

    def test_validation_error_propagates(self, store):
        with pytest.raises(ValidationError):
            EvaluationWorkflow(store).add_employee(admin_context(), "", "")
        assert store.load() == ()
