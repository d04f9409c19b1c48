from .user_repository import UserRepository
from .task_repository import TaskRepository
from .task_update_repository import TaskUpdateRepository
from .task_review_repository import TaskReviewRepository
