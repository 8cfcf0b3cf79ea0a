import pytest

from base.access import authenticate, is_admin_credentials
from base.exceptions import AuthFailure
from base.session_context import Role
from tests.factories import EmployeeFactory


@pytest.fixture
def staff():
    return [EmployeeFactory(id="e1", name="Sara"), EmployeeFactory(id="e2", name="Omar")]


def test_admin_credentials(staff):
    identity = authenticate("admin", "123", staff)
    assert identity.role == Role.ADMIN
    assert identity.employee_id is None


def test_wrong_admin_password(staff):
    with pytest.raises(AuthFailure):
        authenticate("admin", "wrong", staff)


def test_employee_by_exact_name(staff):
    identity = authenticate("Omar", "", staff)
    assert identity.role == Role.EMPLOYEE
    assert identity.employee_id == "e2"
    assert identity.display_name == "Omar"


def test_employee_password_is_ignored(staff):
    assert authenticate("Sara", "anything", staff).employee_id == "e1"


@pytest.mark.parametrize("username", ["sara", "Sara ", "Nobody", ""])
def test_unknown_names_fail(staff, username):
    with pytest.raises(AuthFailure) as exc:
        authenticate(username, "", staff)
    assert exc.value.username == username


def test_admin_gate_disabled_without_username(settings):
    settings.APPRAISAL_ADMIN_USERNAME = ""
    assert not is_admin_credentials("", "123")
