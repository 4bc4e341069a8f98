import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from todo_api.core.errors import StorageError, ValidationError
from todo_api.models import Todo, User

logger = logging.getLogger(__name__)


@contextmanager
def _storage(session: Session, action: str):
    try:
        yield
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Storage failure while trying to %s", action)
        raise StorageError()


def create_user(session: Session, username: str, password_hash: str) -> User:
    user = User(username=username, password_hash=password_hash)
    try:
        session.add(user)
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ValidationError("Username already taken")
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Storage failure while trying to create user")
        raise StorageError()
    session.refresh(user)
    return user


def get_user_by_username(session: Session, username: str) -> Optional[User]:
    with _storage(session, "find user"):
        return session.exec(select(User).where(User.username == username)).first()


def get_user(session: Session, user_id: uuid.UUID) -> Optional[User]:
    with _storage(session, "load user"):
        return session.get(User, user_id)


def create_todo(session: Session, user_id: uuid.UUID, name: str, description: Optional[str]) -> Todo:
    todo = Todo(user_id=user_id, name=name, description=description)
    with _storage(session, "create todo"):
        session.add(todo)
        session.commit()
        session.refresh(todo)
    return todo


def list_todos_by_owner(session: Session, user_id: uuid.UUID) -> List[Todo]:
    with _storage(session, "list todos"):
        return list(
            session.exec(
                select(Todo).where(Todo.user_id == user_id).order_by(Todo.created_at)
            ).all()
        )


def get_todo(session: Session, todo_id: uuid.UUID) -> Optional[Todo]:
    with _storage(session, "load todo"):
        return session.get(Todo, todo_id)


def update_todo_owned(
    session: Session, todo_id: uuid.UUID, user_id: uuid.UUID, patch: Dict[str, Any]
) -> int:
    """Apply `patch` only if the todo still exists and belongs to `user_id`.

    Returns the number of rows changed (0 or 1).
    """
    stmt = (
        update(Todo)
        .where(Todo.id == todo_id, Todo.user_id == user_id)
        .values(**patch)
    )
    with _storage(session, "update todo"):
        result = session.exec(stmt)
        session.commit()
    return result.rowcount


def delete_todo_owned(session: Session, todo_id: uuid.UUID, user_id: uuid.UUID) -> int:
    stmt = delete(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
    with _storage(session, "delete todo"):
        result = session.exec(stmt)
        session.commit()
    return result.rowcount
