from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    assigned_to: Optional[int] = None
    due_date: Optional[datetime] = None

class TaskEdit(BaseModel):
    """Full update: every mutable field is replaced"""
    title: Optional[str] = None
    description: Optional[str] = None
    assigned_to: Optional[int] = None
    due_date: Optional[datetime] = None
    status: Optional[str] = None

class TaskStatusUpdate(BaseModel):
    status: Optional[str] = None  # Pending, InProgress, Done

class TaskOut(BaseModel):
    id: int
    title: str
    description: str
    status: str
    created_at: datetime
    due_date: Optional[datetime] = None

    # Who created it…
    created_by: int
    creator_name: Optional[str] = None

    # …and who it's assigned to
    assigned_to: int
    assigned_to_name: Optional[str] = None

    model_config = {
        "from_attributes": True
    }
