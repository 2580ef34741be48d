from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class PostIn(BaseModel):
    title: str
    content: str
    author: str

class PostPatch(BaseModel):
    # Only truthy values are applied; see crud.update_post
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None

class PostOut(BaseModel):
    id: int
    title: str
    content: str
    author: str
    date: datetime

    model_config = ConfigDict(from_attributes=True)

class MessageOut(BaseModel):
    message: str
