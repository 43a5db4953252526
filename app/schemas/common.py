from pydantic import BaseModel

class EntityRef(BaseModel):
    id: str
