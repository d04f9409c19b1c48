# app/services/task_service.py
import logging
from typing import List

from app.models.enums import TaskStatus
from app.models.task import Task
from app.repositories.task_repository import TaskRepository
from app.repositories.user_repository import UserRepository
from app.schemas.response import ApiResponse, ErrorKind
from app.schemas.task import TaskCreate, TaskEdit, TaskOut, TaskStatusUpdate
from app.utils.policy import (
    can_create_task_for,
    can_update_task_status,
    can_view_task,
    is_manager,
    is_valid_status,
)

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found."
ASSIGNEE_NOT_FOUND = "Assigned user not found."
INVALID_STATUS = "Invalid status. Must be 'Pending', 'InProgress', or 'Done'."


def to_task_out(task: Task) -> TaskOut:
    return TaskOut(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        created_at=task.created_at,
        due_date=task.due_date,
        created_by=task.created_by,
        creator_name=task.creator.full_name if task.creator else None,
        assigned_to=task.assigned_to,
        assigned_to_name=task.assignee.full_name if task.assignee else None,
    )


class TaskService:

    def __init__(self, tasks: TaskRepository, users: UserRepository):
        self.tasks = tasks
        self.users = users

    def create_task(self, payload: TaskCreate, actor_id: int, actor_role: str) -> ApiResponse[TaskOut]:
        if not can_create_task_for(actor_role, actor_id, payload.assigned_to):
            logger.warning(f"User {actor_id} tried to create a task for user {payload.assigned_to}")
            return ApiResponse[TaskOut].fail(ErrorKind.FORBIDDEN, "You can only create tasks for yourself.")

        if self.users.get_by_id(payload.assigned_to) is None:
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, ASSIGNEE_NOT_FOUND)

        task = self.tasks.create(
            Task(
                title=payload.title,
                description=payload.description,
                assigned_to=payload.assigned_to,
                due_date=payload.due_date,
                created_by=actor_id,
                status=TaskStatus.PENDING.value,
            )
        )
        logger.info(f"Task {task.id} created by user {actor_id} for user {task.assigned_to}")
        return ApiResponse[TaskOut].ok(to_task_out(task), "Task created successfully.")

    def get_all_tasks(self, actor_id: int, actor_role: str) -> ApiResponse[List[TaskOut]]:
        # Manager can see all tasks, Employee only their assigned tasks
        if is_manager(actor_role):
            tasks = self.tasks.get_all()
        else:
            tasks = self.tasks.get_by_assignee(actor_id)
        return ApiResponse[List[TaskOut]].ok([to_task_out(t) for t in tasks])

    def get_task_by_id(self, task_id: int, actor_id: int, actor_role: str) -> ApiResponse[TaskOut]:
        task = self.tasks.get_by_id(task_id)
        if task is None:
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, TASK_NOT_FOUND)

        if not can_view_task(actor_role, actor_id, task):
            return ApiResponse[TaskOut].fail(
                ErrorKind.FORBIDDEN, "You don't have permission to view this task."
            )
        return ApiResponse[TaskOut].ok(to_task_out(task))

    def update_task(self, task_id: int, payload: TaskEdit) -> ApiResponse[TaskOut]:
        task = self.tasks.get_by_id(task_id)
        if task is None:
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, TASK_NOT_FOUND)

        if self.users.get_by_id(payload.assigned_to) is None:
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, ASSIGNEE_NOT_FOUND)

        if not is_valid_status(payload.status):
            return ApiResponse[TaskOut].fail(ErrorKind.CONFLICT, INVALID_STATUS)

        task.title = payload.title
        task.description = payload.description
        task.assigned_to = payload.assigned_to
        task.due_date = payload.due_date
        task.status = payload.status

        updated = self.tasks.update(task)
        if updated is None:
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, TASK_NOT_FOUND)
        logger.info(f"Task {task_id} updated")
        return ApiResponse[TaskOut].ok(to_task_out(updated), "Task updated successfully.")

    def delete_task(self, task_id: int) -> ApiResponse[bool]:
        if not self.tasks.delete(task_id):
            return ApiResponse[bool].fail(ErrorKind.NOT_FOUND, TASK_NOT_FOUND)
        logger.info(f"Task {task_id} deleted")
        return ApiResponse[bool].ok(True, "Task deleted successfully.")

    def update_task_status(self, task_id: int, payload: TaskStatusUpdate, actor_id: int) -> ApiResponse[TaskOut]:
        task = self.tasks.get_by_id(task_id)
        if task is None:
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, TASK_NOT_FOUND)

        if not is_valid_status(payload.status):
            return ApiResponse[TaskOut].fail(ErrorKind.CONFLICT, INVALID_STATUS)

        if not can_update_task_status(actor_id, task):
            logger.warning(f"User {actor_id} tried to change the status of task {task_id}")
            return ApiResponse[TaskOut].fail(
                ErrorKind.FORBIDDEN, "You can only update the status of your own tasks."
            )

        old_status = task.status
        # The task may have been deleted since it was read
        if not self.tasks.update_status(task_id, payload.status):
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, TASK_NOT_FOUND)

        updated = self.tasks.reload(task_id)
        if updated is None:
            return ApiResponse[TaskOut].fail(ErrorKind.NOT_FOUND, TASK_NOT_FOUND)
        logger.info(f"Task {task_id} status {old_status} -> {updated.status} by user {actor_id}")
        return ApiResponse[TaskOut].ok(to_task_out(updated), "Task status updated successfully.")
