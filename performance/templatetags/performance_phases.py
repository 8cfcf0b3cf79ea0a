from django import template

from performance import access
from performance.records import EntityState

register = template.Library()


# -------------------------------------------------
# Actions per phase (role + lock + phase)
# -------------------------------------------------
@register.simple_tag
def can_add_goal(appraisal, employee):
    return access.show_add_goal(appraisal, employee)


@register.simple_tag
def can_delete_goal(appraisal, employee):
    return access.show_delete_goal(appraisal, employee)


@register.simple_tag
def can_edit_tasks(appraisal, employee):
    return access.show_task_editing(appraisal, employee)


@register.simple_tag
def can_evaluate(appraisal, employee):
    return access.show_evaluate(appraisal, employee)


@register.simple_tag
def can_approve_all(appraisal, employee):
    return access.show_approve_all(appraisal, employee)


# -------------------------------------------------
# Display helpers
# -------------------------------------------------
@register.filter
def state_label(state):
    try:
        return EntityState(state).label
    except ValueError:
        return state


@register.filter
def rating_display(value):
    return "---" if value is None else f"{value}%"
