# app/utils/validation.py
"""Input-shape checks, one per request body.

Each validator returns a list of human readable, field-level error strings.
An empty list means the body may be handed to a service.
"""
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from app.schemas.task import TaskCreate, TaskEdit, TaskStatusUpdate
from app.schemas.task_review import TaskReviewCreate, TaskReviewEdit
from app.schemas.task_update import TaskUpdateCreate
from app.schemas.user import UserCreate, UserLogin
from app.utils.policy import MAX_RATING, MIN_RATING, rating_in_range

FULL_NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6
TITLE_MAX_LENGTH = 200
ATTACHMENT_URL_MAX_LENGTH = 500


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _require(errors: List[str], field: str, value) -> bool:
    if value is None or (isinstance(value, str) and _is_blank(value)):
        errors.append(f"The {field} field is required.")
        return False
    return True


def _max_length(errors: List[str], field: str, value: Optional[str], limit: int) -> None:
    if value is not None and len(value) > limit:
        errors.append(f"The field {field} must be a string with a maximum length of {limit}.")


def _check_email(errors: List[str], email: Optional[str]) -> None:
    if not _require(errors, "email", email):
        return
    _max_length(errors, "email", email, EMAIL_MAX_LENGTH)
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        errors.append("The email field is not a valid e-mail address.")


def _check_rating(errors: List[str], rating) -> None:
    if not _require(errors, "rating", rating):
        return
    if not rating_in_range(rating):
        errors.append(f"The field rating must be between {MIN_RATING} and {MAX_RATING}.")


def validate_register(payload: UserCreate) -> List[str]:
    errors: List[str] = []
    if _require(errors, "full_name", payload.full_name):
        _max_length(errors, "full_name", payload.full_name, FULL_NAME_MAX_LENGTH)
    _check_email(errors, payload.email)
    if _require(errors, "password", payload.password) and len(payload.password) < PASSWORD_MIN_LENGTH:
        errors.append(f"The field password must be a string with a minimum length of {PASSWORD_MIN_LENGTH}.")
    _require(errors, "role", payload.role)
    return errors


def validate_login(payload: UserLogin) -> List[str]:
    errors: List[str] = []
    _check_email(errors, payload.email)
    _require(errors, "password", payload.password)
    return errors


def validate_task_create(payload: TaskCreate) -> List[str]:
    errors: List[str] = []
    if _require(errors, "title", payload.title):
        _max_length(errors, "title", payload.title, TITLE_MAX_LENGTH)
    _require(errors, "description", payload.description)
    _require(errors, "assigned_to", payload.assigned_to)
    return errors


def validate_task_edit(payload: TaskEdit) -> List[str]:
    errors: List[str] = []
    if _require(errors, "title", payload.title):
        _max_length(errors, "title", payload.title, TITLE_MAX_LENGTH)
    _require(errors, "description", payload.description)
    _require(errors, "assigned_to", payload.assigned_to)
    _require(errors, "status", payload.status)
    return errors


def validate_status_update(payload: TaskStatusUpdate) -> List[str]:
    errors: List[str] = []
    _require(errors, "status", payload.status)
    return errors


def validate_task_update_create(payload: TaskUpdateCreate) -> List[str]:
    errors: List[str] = []
    _require(errors, "update_text", payload.update_text)
    _max_length(errors, "attachment_url", payload.attachment_url, ATTACHMENT_URL_MAX_LENGTH)
    return errors


def validate_review(payload) -> List[str]:
    """Shared by review creation and review edits"""
    errors: List[str] = []
    _check_rating(errors, payload.rating)
    return errors


def validate_review_create(payload: TaskReviewCreate) -> List[str]:
    return validate_review(payload)


def validate_review_edit(payload: TaskReviewEdit) -> List[str]:
    return validate_review(payload)
