# app/services/task_update_service.py
import logging
from typing import List

from app.models.task import TaskUpdate
from app.repositories.task_repository import TaskRepository
from app.repositories.task_update_repository import TaskUpdateRepository
from app.schemas.response import ApiResponse, ErrorKind
from app.schemas.task_update import TaskUpdateCreate, TaskUpdateOut
from app.utils.policy import can_add_update

logger = logging.getLogger(__name__)


def to_task_update_out(update: TaskUpdate) -> TaskUpdateOut:
    return TaskUpdateOut(
        id=update.id,
        task_id=update.task_id,
        updated_by=update.updated_by,
        updated_by_name=update.author.full_name if update.author else None,
        update_text=update.update_text,
        attachment_url=update.attachment_url,
        update_date=update.update_date,
    )


class TaskUpdateService:
    """Progress notes posted by a task's assignee"""

    def __init__(self, updates: TaskUpdateRepository, tasks: TaskRepository):
        self.updates = updates
        self.tasks = tasks

    def create_task_update(self, task_id: int, payload: TaskUpdateCreate, actor_id: int) -> ApiResponse[TaskUpdateOut]:
        task = self.tasks.get_by_id(task_id)
        if task is None:
            return ApiResponse[TaskUpdateOut].fail(ErrorKind.NOT_FOUND, "Task not found.")

        if not can_add_update(actor_id, task):
            logger.warning(f"User {actor_id} tried to post an update on task {task_id}")
            return ApiResponse[TaskUpdateOut].fail(
                ErrorKind.FORBIDDEN, "You can only add updates to your own tasks."
            )

        created = self.updates.create(
            TaskUpdate(
                task_id=task_id,
                updated_by=actor_id,
                update_text=payload.update_text,
                attachment_url=payload.attachment_url,
            )
        )
        logger.info(f"Update {created.id} added to task {task_id}")
        return ApiResponse[TaskUpdateOut].ok(to_task_update_out(created), "Task update added successfully.")

    def get_task_updates(self, task_id: int) -> ApiResponse[List[TaskUpdateOut]]:
        if self.tasks.get_by_id(task_id) is None:
            return ApiResponse[List[TaskUpdateOut]].fail(ErrorKind.NOT_FOUND, "Task not found.")

        updates = self.updates.get_by_task_id(task_id)
        return ApiResponse[List[TaskUpdateOut]].ok([to_task_update_out(u) for u in updates])
