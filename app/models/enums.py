# app/models/enums.py
import enum


class UserRole(enum.Enum):
    EMPLOYEE = "Employee"
    MANAGER = "Manager"


class TaskStatus(enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    DONE = "Done"
