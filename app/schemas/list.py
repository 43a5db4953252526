from pydantic import BaseModel

from app.schemas.activity import ActivityRead

class ListCreate(BaseModel):
    title: str

class ListUpdate(BaseModel):
    title: str

class ListWithActivity(BaseModel):
    id: str
    title: str
    link: str
    activity: ActivityRead
