# app/utils/policy.py
"""Authorization and task-lifecycle rules.

Every predicate here is pure: it looks only at its arguments. Role gates that
need nothing but the caller's credential run in the routers; the checks below
need the loaded target entity and run in the services. Both must pass.
"""
from typing import Any

from app.models.enums import TaskStatus, UserRole

VALID_STATUSES = frozenset(status.value for status in TaskStatus)
VALID_ROLES = frozenset(role.value for role in UserRole)

MIN_RATING = 1
MAX_RATING = 5


def is_manager(role: str) -> bool:
    return role == UserRole.MANAGER.value


def is_employee(role: str) -> bool:
    return role == UserRole.EMPLOYEE.value


def is_valid_role(value: Any) -> bool:
    """Exact match against Employee/Manager"""
    return isinstance(value, str) and value in VALID_ROLES


def is_valid_status(value: Any) -> bool:
    """Exact, case-sensitive match against Pending/InProgress/Done"""
    return isinstance(value, str) and value in VALID_STATUSES


def rating_in_range(value: Any) -> bool:
    # bool is an int subclass; True must not pass as a rating of 1
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_RATING <= value <= MAX_RATING


def can_view_task(actor_role: str, actor_id: int, task) -> bool:
    """Managers see every task, employees only the ones assigned to them"""
    if is_manager(actor_role):
        return True
    return actor_id == task.assigned_to


def can_create_task_for(actor_role: str, actor_id: int, assignee_id: int) -> bool:
    """Managers assign to anyone, employees only to themselves"""
    if is_manager(actor_role):
        return True
    return assignee_id == actor_id


def can_update_task_status(actor_id: int, task) -> bool:
    """Only the assignee moves a task between statuses, whatever their role"""
    return actor_id == task.assigned_to


def can_add_update(actor_id: int, task) -> bool:
    return actor_id == task.assigned_to


def can_review(task) -> bool:
    """A task is reviewable once it is Done"""
    return task.status == TaskStatus.DONE.value


def can_view_user(actor_role: str, actor_id: int, user_id: int) -> bool:
    """Employees may only look up their own profile"""
    if is_manager(actor_role):
        return True
    return actor_id == user_id
