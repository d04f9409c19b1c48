# app/repositories/task_review_repository.py
from typing import List, Optional

from sqlalchemy.orm import joinedload

from app.models.task import TaskReview
from app.repositories.base import SessionRepository


class TaskReviewRepository(SessionRepository):

    def get_by_id(self, review_id: int) -> Optional[TaskReview]:
        return (
            self.db.query(TaskReview)
            .options(joinedload(TaskReview.reviewer))
            .filter(TaskReview.id == review_id)
            .first()
        )

    def get_by_task_id(self, task_id: int) -> List[TaskReview]:
        """Newest first"""
        return (
            self.db.query(TaskReview)
            .options(joinedload(TaskReview.reviewer))
            .filter(TaskReview.task_id == task_id)
            .order_by(TaskReview.review_date.desc(), TaskReview.id.desc())
            .all()
        )

    def create(self, review: TaskReview) -> Optional[TaskReview]:
        self.db.add(review)
        self._commit()
        return self.get_by_id(review.id)

    def update(self, review: TaskReview) -> Optional[TaskReview]:
        self._commit()
        return self.get_by_id(review.id)

    def delete(self, review_id: int) -> bool:
        deleted = (
            self.db.query(TaskReview)
            .filter(TaskReview.id == review_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return deleted > 0
