from datetime import datetime
from typing import Any, Dict
from pydantic import BaseModel

class ActivityRead(BaseModel):
    id: int
    action: str
    type: str
    entry: Dict[str, Any]
    created_at: datetime

    class Config:
        from_attributes = True
