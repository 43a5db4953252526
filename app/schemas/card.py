from typing import List, Optional
from pydantic import BaseModel

from app.schemas.activity import ActivityRead
from app.schemas.comment import CommentRead

class CardCreate(BaseModel):
    text: str

class CardUpdate(BaseModel):
    text: str

class CardColor(BaseModel):
    color: str

class CardMove(BaseModel):
    card_id: str
    list_id: str
    position: Optional[int] = None  # appended to the end of the list when omitted

class CardRead(BaseModel):
    id: str
    text: str
    colors: List[str]
    link: str
    list_id: str
    board_id: str
    comments: List[CommentRead]

class CardColors(BaseModel):
    id: str
    colors: List[str]

class CardMoved(BaseModel):
    id: str
    list_id: str
    position: int
    link: str

class CardWithActivity(BaseModel):
    id: str
    text: str
    link: str
    activity: ActivityRead
