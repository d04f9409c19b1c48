# app/repositories/task_update_repository.py
from typing import List, Optional

from sqlalchemy.orm import joinedload

from app.models.task import TaskUpdate
from app.repositories.base import SessionRepository


class TaskUpdateRepository(SessionRepository):

    def get_by_id(self, update_id: int) -> Optional[TaskUpdate]:
        return (
            self.db.query(TaskUpdate)
            .options(joinedload(TaskUpdate.author))
            .filter(TaskUpdate.id == update_id)
            .first()
        )

    def get_by_task_id(self, task_id: int) -> List[TaskUpdate]:
        """Newest first"""
        return (
            self.db.query(TaskUpdate)
            .options(joinedload(TaskUpdate.author))
            .filter(TaskUpdate.task_id == task_id)
            .order_by(TaskUpdate.update_date.desc(), TaskUpdate.id.desc())
            .all()
        )

    def create(self, task_update: TaskUpdate) -> Optional[TaskUpdate]:
        self.db.add(task_update)
        self._commit()
        return self.get_by_id(task_update.id)
