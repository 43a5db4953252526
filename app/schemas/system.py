from pydantic import BaseModel

class SystemStats(BaseModel):
    boards: int
    lists: int
    cards: int
    activity: int
