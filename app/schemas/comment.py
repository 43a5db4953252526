from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from app.schemas.activity import ActivityRead

class CommentCreate(BaseModel):
    text: str

class CommentRead(BaseModel):
    id: str
    text: str
    user_id: Optional[str] = None
    created_at: datetime

class CommentWithActivity(CommentRead):
    activity: ActivityRead
