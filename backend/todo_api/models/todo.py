from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone
import enum
import uuid

class TodoStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"

class Todo(SQLModel, table=True):
    __tablename__ = "todos"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    # owner, fixed at creation
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True)

    name: str
    description: Optional[str] = None
    status: TodoStatus = Field(default=TodoStatus.active)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
