from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class TaskUpdateCreate(BaseModel):
    update_text: Optional[str] = None
    attachment_url: Optional[str] = None

class TaskUpdateOut(BaseModel):
    id: int
    task_id: int
    updated_by: int
    updated_by_name: Optional[str] = None
    update_text: str
    attachment_url: Optional[str] = None
    update_date: datetime

    model_config = {
        "from_attributes": True
    }
