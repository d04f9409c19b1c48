from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class TaskReviewCreate(BaseModel):
    rating: Optional[int] = None
    comments: Optional[str] = None

class TaskReviewEdit(BaseModel):
    rating: Optional[int] = None
    comments: Optional[str] = None

class TaskReviewOut(BaseModel):
    id: int
    task_id: int
    reviewed_by: int
    reviewer_name: Optional[str] = None
    comments: Optional[str] = None
    rating: int
    review_date: datetime

    model_config = {
        "from_attributes": True
    }
