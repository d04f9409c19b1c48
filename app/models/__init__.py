from .user import User
from .task import Task, TaskUpdate, TaskReview
from .enums import UserRole, TaskStatus
