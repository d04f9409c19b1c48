from .user import UserCreate, UserLogin, UserOut
from .tokens import LoginResponse, TokenClaims
from .task import TaskCreate, TaskEdit, TaskStatusUpdate, TaskOut
from .task_update import TaskUpdateCreate, TaskUpdateOut
from .task_review import TaskReviewCreate, TaskReviewEdit, TaskReviewOut
from .response import ApiResponse, ErrorKind
