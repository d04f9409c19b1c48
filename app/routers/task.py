# app/routers/task.py
from fastapi import APIRouter, Depends, status

from app.schemas.task import TaskCreate, TaskEdit, TaskStatusUpdate
from app.schemas.task_review import TaskReviewCreate
from app.schemas.task_update import TaskUpdateCreate
from app.services.providers import get_task_review_service, get_task_service, get_task_update_service
from app.services.task_review_service import TaskReviewService
from app.services.task_service import TaskService
from app.services.task_update_service import TaskUpdateService
from app.utils.auth import CurrentUser, get_current_user, require_employee, require_manager
from app.utils.responses import to_response, validation_failed
from app.utils.validation import (
    validate_review_create,
    validate_status_update,
    validate_task_create,
    validate_task_edit,
    validate_task_update_create,
)

router = APIRouter()

@router.post("")
def create_task(
    task: TaskCreate,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Create a new task (Manager can assign to anyone, Employee can create for themselves)"""
    errors = validate_task_create(task)
    if errors:
        return validation_failed(errors)
    result = service.create_task(task, current_user.id, current_user.role)
    return to_response(result, success_status=status.HTTP_201_CREATED)

@router.get("")
def get_all_tasks(
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Get all tasks (Manager sees all, Employee sees only their tasks)"""
    return to_response(service.get_all_tasks(current_user.id, current_user.role))

@router.get("/{task_id}")
def get_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    return to_response(service.get_task_by_id(task_id, current_user.id, current_user.role))

@router.put("/{task_id}")
def update_task(
    task_id: int,
    task_update: TaskEdit,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(require_manager),
):
    """Update every field of a task (Manager only)"""
    errors = validate_task_edit(task_update)
    if errors:
        return validation_failed(errors)
    return to_response(service.update_task(task_id, task_update))

@router.delete("/{task_id}")
def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(require_manager),
):
    """Delete a task with its updates and reviews (Manager only)"""
    return to_response(service.delete_task(task_id))

@router.patch("/{task_id}/status")
def update_task_status(
    task_id: int,
    status_update: TaskStatusUpdate,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Update task status (only the assignee)"""
    errors = validate_status_update(status_update)
    if errors:
        return validation_failed(errors)
    return to_response(service.update_task_status(task_id, status_update, current_user.id))

# ---------- Updates ----------

@router.post("/{task_id}/updates")
def add_task_update(
    task_id: int,
    update: TaskUpdateCreate,
    service: TaskUpdateService = Depends(get_task_update_service),
    current_user: CurrentUser = Depends(require_employee),
):
    """Add an update to a task (Employee only - for their own tasks)"""
    errors = validate_task_update_create(update)
    if errors:
        return validation_failed(errors)
    result = service.create_task_update(task_id, update, current_user.id)
    return to_response(result, success_status=status.HTTP_201_CREATED)

@router.get("/{task_id}/updates")
def get_task_updates(
    task_id: int,
    service: TaskUpdateService = Depends(get_task_update_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    return to_response(service.get_task_updates(task_id))

# ---------- Reviews ----------

@router.post("/{task_id}/reviews")
def add_task_review(
    task_id: int,
    review: TaskReviewCreate,
    service: TaskReviewService = Depends(get_task_review_service),
    current_user: CurrentUser = Depends(require_manager),
):
    """Add a review to a task (Manager only - for completed tasks)"""
    errors = validate_review_create(review)
    if errors:
        return validation_failed(errors)
    result = service.create_task_review(task_id, review, current_user.id)
    return to_response(result, success_status=status.HTTP_201_CREATED)

@router.get("/{task_id}/reviews")
def get_task_reviews(
    task_id: int,
    service: TaskReviewService = Depends(get_task_review_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    return to_response(service.get_task_reviews(task_id))
