# app/repositories/task_repository.py
from typing import List, Optional

from sqlalchemy.orm import joinedload

from app.models.task import Task
from app.repositories.base import SessionRepository


class TaskRepository(SessionRepository):
    """Task reads always join the creator and assignee so their names are available"""

    def _query(self):
        return self.db.query(Task).options(
            joinedload(Task.creator),
            joinedload(Task.assignee),
        )

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self._query().filter(Task.id == task_id).first()

    def get_all(self) -> List[Task]:
        return self._query().order_by(Task.id).all()

    def get_by_assignee(self, user_id: int) -> List[Task]:
        return self._query().filter(Task.assigned_to == user_id).order_by(Task.id).all()

    def create(self, task: Task) -> Optional[Task]:
        self.db.add(task)
        self._commit()
        return self.reload(task.id)

    def update(self, task: Task) -> Optional[Task]:
        self._commit()
        return self.reload(task.id)

    def update_status(self, task_id: int, status: str) -> bool:
        """Write the status column only. False when the row no longer exists."""
        updated = (
            self.db.query(Task)
            .filter(Task.id == task_id)
            .update({Task.status: status}, synchronize_session=False)
        )
        self._commit()
        return updated > 0

    def delete(self, task_id: int) -> bool:
        """Updates and reviews go with the task through ON DELETE CASCADE"""
        deleted = (
            self.db.query(Task)
            .filter(Task.id == task_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return deleted > 0

    def reload(self, task_id: int) -> Optional[Task]:
        self.db.expire_all()
        return self.get_by_id(task_id)
