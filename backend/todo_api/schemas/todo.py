from pydantic import BaseModel, Field
from typing import Any, List, Optional
import uuid

from todo_api.models import TodoStatus

class TodoCreate(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    description: Optional[str] = Field(default=None, max_length=500)

class TodoUpdate(BaseModel):
    # empty strings are accepted here and dropped from the patch
    name: Optional[str] = Field(default=None, max_length=120)
    description: Optional[str] = Field(default=None, max_length=500)
    # any value sent here, null included, is checked against TodoStatus by the route
    status: Optional[Any] = None

class TodoItem(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    status: TodoStatus

class TodoDetail(BaseModel):
    name: str
    description: Optional[str] = None
    status: TodoStatus

class MessageOut(BaseModel):
    success: bool
    message: str

class TodoListOut(BaseModel):
    success: bool = True
    data: List[TodoItem]
    message: str

class TodoDetailOut(BaseModel):
    success: bool = True
    data: TodoDetail
