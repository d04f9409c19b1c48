# app/services/providers.py
# FastAPI dependencies that build repositories and services from the request's session
from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories import TaskRepository, TaskReviewRepository, TaskUpdateRepository, UserRepository
from app.services.auth_service import AuthService
from app.services.task_review_service import TaskReviewService
from app.services.task_service import TaskService
from app.services.task_update_service import TaskUpdateService
from app.services.user_service import UserService


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db), UserRepository(db))


def get_task_update_service(db: Session = Depends(get_db)) -> TaskUpdateService:
    return TaskUpdateService(TaskUpdateRepository(db), TaskRepository(db))


def get_task_review_service(db: Session = Depends(get_db)) -> TaskReviewService:
    return TaskReviewService(TaskReviewRepository(db), TaskRepository(db))
