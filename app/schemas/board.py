from typing import List, Optional
from pydantic import BaseModel

from app.schemas.activity import ActivityRead

class BoardCreate(BaseModel):
    title: str

class BoardUpdate(BaseModel):
    title: Optional[str] = None

class CardPreview(BaseModel):
    id: str
    text: str
    link: str

class ListPreview(BaseModel):
    id: str
    title: str
    link: str
    cards: List[CardPreview]

class BoardRead(BaseModel):
    id: str
    title: str
    link: str
    lists: List[ListPreview]

class BoardSummary(BaseModel):
    id: str
    title: str
    link: str
    lists_length: int
    cards_length: int
    starred: bool

class BoardWithActivity(BaseModel):
    id: str
    title: str
    link: str
    activity: ActivityRead
