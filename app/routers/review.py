# app/routers/review.py
from fastapi import APIRouter, Depends

from app.schemas.task_review import TaskReviewEdit
from app.services.providers import get_task_review_service
from app.services.task_review_service import TaskReviewService
from app.utils.auth import CurrentUser, require_manager
from app.utils.responses import to_response, validation_failed
from app.utils.validation import validate_review_edit

router = APIRouter()

@router.put("/{review_id}")
def update_review(
    review_id: int,
    review: TaskReviewEdit,
    service: TaskReviewService = Depends(get_task_review_service),
    current_user: CurrentUser = Depends(require_manager),
):
    """Update a task review (Manager only)"""
    errors = validate_review_edit(review)
    if errors:
        return validation_failed(errors)
    return to_response(service.update_task_review(review_id, review))

@router.delete("/{review_id}")
def delete_review(
    review_id: int,
    service: TaskReviewService = Depends(get_task_review_service),
    current_user: CurrentUser = Depends(require_manager),
):
    """Delete a task review (Manager only)"""
    return to_response(service.delete_task_review(review_id))
