# app/services/task_review_service.py
import logging
from typing import List

from app.models.task import TaskReview
from app.repositories.task_repository import TaskRepository
from app.repositories.task_review_repository import TaskReviewRepository
from app.schemas.response import ApiResponse, ErrorKind
from app.schemas.task_review import TaskReviewCreate, TaskReviewEdit, TaskReviewOut
from app.utils.policy import MAX_RATING, MIN_RATING, can_review, rating_in_range

logger = logging.getLogger(__name__)

RATING_OUT_OF_RANGE = f"Rating must be between {MIN_RATING} and {MAX_RATING}."
REVIEW_NOT_FOUND = "Review not found."


def to_task_review_out(review: TaskReview) -> TaskReviewOut:
    return TaskReviewOut(
        id=review.id,
        task_id=review.task_id,
        reviewed_by=review.reviewed_by,
        reviewer_name=review.reviewer.full_name if review.reviewer else None,
        comments=review.comments,
        rating=review.rating,
        review_date=review.review_date,
    )


class TaskReviewService:

    def __init__(self, reviews: TaskReviewRepository, tasks: TaskRepository):
        self.reviews = reviews
        self.tasks = tasks

    def create_task_review(self, task_id: int, payload: TaskReviewCreate, reviewer_id: int) -> ApiResponse[TaskReviewOut]:
        task = self.tasks.get_by_id(task_id)
        if task is None:
            return ApiResponse[TaskReviewOut].fail(ErrorKind.NOT_FOUND, "Task not found.")

        # Only allow review if task is Done
        if not can_review(task):
            logger.warning(f"Review of task {task_id} rejected, status is {task.status}")
            return ApiResponse[TaskReviewOut].fail(ErrorKind.CONFLICT, "You can only review completed tasks.")

        if not rating_in_range(payload.rating):
            return ApiResponse[TaskReviewOut].fail(ErrorKind.VALIDATION_FAILED, RATING_OUT_OF_RANGE)

        created = self.reviews.create(
            TaskReview(
                task_id=task_id,
                reviewed_by=reviewer_id,
                comments=payload.comments,
                rating=payload.rating,
            )
        )
        logger.info(f"Review {created.id} ({created.rating}/5) added to task {task_id} by user {reviewer_id}")
        return ApiResponse[TaskReviewOut].ok(to_task_review_out(created), "Task review added successfully.")

    def get_task_reviews(self, task_id: int) -> ApiResponse[List[TaskReviewOut]]:
        if self.tasks.get_by_id(task_id) is None:
            return ApiResponse[List[TaskReviewOut]].fail(ErrorKind.NOT_FOUND, "Task not found.")

        reviews = self.reviews.get_by_task_id(task_id)
        return ApiResponse[List[TaskReviewOut]].ok([to_task_review_out(r) for r in reviews])

    def update_task_review(self, review_id: int, payload: TaskReviewEdit) -> ApiResponse[TaskReviewOut]:
        review = self.reviews.get_by_id(review_id)
        if review is None:
            return ApiResponse[TaskReviewOut].fail(ErrorKind.NOT_FOUND, REVIEW_NOT_FOUND)

        if not rating_in_range(payload.rating):
            return ApiResponse[TaskReviewOut].fail(ErrorKind.VALIDATION_FAILED, RATING_OUT_OF_RANGE)

        review.comments = payload.comments
        review.rating = payload.rating
        updated = self.reviews.update(review)
        if updated is None:
            return ApiResponse[TaskReviewOut].fail(ErrorKind.NOT_FOUND, REVIEW_NOT_FOUND)
        return ApiResponse[TaskReviewOut].ok(to_task_review_out(updated), "Review updated successfully.")

    def delete_task_review(self, review_id: int) -> ApiResponse[bool]:
        if not self.reviews.delete(review_id):
            return ApiResponse[bool].fail(ErrorKind.NOT_FOUND, REVIEW_NOT_FOUND)
        logger.info(f"Review {review_id} deleted")
        return ApiResponse[bool].ok(True, "Review deleted successfully.")
