import logging
import uuid
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from todo_api import crud
from todo_api.api.deps import get_current_user_id, get_settings
from todo_api.api.guard import authorize_todo
from todo_api.core.config import Settings
from todo_api.core.database import get_session
from todo_api.core.errors import NotFoundError, ValidationError
from todo_api.models import TodoStatus
from todo_api.schemas.todo import (
    MessageOut,
    TodoCreate,
    TodoDetail,
    TodoDetailOut,
    TodoItem,
    TodoListOut,
    TodoUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["todos"])


def build_patch(data: TodoUpdate) -> Dict[str, Any]:
    patch: Dict[str, Any] = {}

    if data.name is not None and data.name != "":
        patch["name"] = data.name
    if data.description is not None and data.description != "":
        patch["description"] = data.description

    if "status" in data.model_fields_set:
        try:
            patch["status"] = TodoStatus(data.status)
        except (ValueError, TypeError):
            raise ValidationError(
                "Invalid status value, expected 'active' or 'inactive'.",
                status_code=422,
            )

    if not patch:
        raise ValidationError(
            "No valid fields provided for update.",
            status_code=422,
        )
    return patch


@router.get("/todo", response_model=TodoListOut)
def list_todos(
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    todos = crud.list_todos_by_owner(session, user_id)
    data = [
        TodoItem(id=t.id, name=t.name, description=t.description, status=t.status)
        for t in todos
    ]
    return TodoListOut(data=data, message="Todos retrieved Successfully")


@router.post("/todo", response_model=MessageOut)
def create_todo(
    data: TodoCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    if settings.validate_owner_exists and crud.get_user(session, user_id) is None:
        raise ValidationError("User not found")

    todo = crud.create_todo(session, user_id, data.name, data.description)
    logger.info("User %s created todo %s", user_id, todo.id)
    return MessageOut(success=True, message="Todo Added Successfully")


@router.get("/todo/{todo_id}", response_model=TodoDetailOut)
def get_todo(
    todo_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    todo = authorize_todo(session, todo_id, user_id, "view")
    return TodoDetailOut(
        data=TodoDetail(name=todo.name, description=todo.description, status=todo.status)
    )


@router.patch("/todos/{todo_id}", response_model=MessageOut)
def update_todo(
    todo_id: str,
    data: TodoUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    target = authorize_todo(session, todo_id, user_id, "edit").id
    patch = build_patch(data)

    # filtered by id and owner, so a concurrent delete shows up as zero rows
    if crud.update_todo_owned(session, target, user_id, patch) == 0:
        raise NotFoundError("Todo not found")

    logger.info("User %s updated todo %s (%s)", user_id, target, ", ".join(sorted(patch)))
    return MessageOut(success=True, message="Todo updated successfully")


@router.delete("/todos/{todo_id}", response_model=MessageOut)
def delete_todo(
    todo_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: Session = Depends(get_session),
):
    target = authorize_todo(session, todo_id, user_id, "delete").id

    if crud.delete_todo_owned(session, target, user_id) == 0:
        raise NotFoundError("Todo not found")

    logger.info("User %s deleted todo %s", user_id, target)
    return MessageOut(success=True, message="Todo deleted successfully")
