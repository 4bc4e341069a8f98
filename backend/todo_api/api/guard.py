import enum
import logging
import uuid
from typing import Optional, Union

from sqlmodel import Session

from todo_api import crud
from todo_api.core.errors import AuthorizationError, NotFoundError
from todo_api.models import Todo

logger = logging.getLogger(__name__)


class Access(enum.Enum):
    AUTHORIZED = "authorized"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


def parse_todo_id(raw: Union[str, uuid.UUID]) -> Optional[uuid.UUID]:
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(raw)
    except ValueError:
        return None


def check_access(todo: Optional[Todo], user_id: uuid.UUID) -> Access:
    # existence is checked before ownership
    if todo is None:
        return Access.NOT_FOUND
    if todo.user_id != user_id:
        return Access.FORBIDDEN
    return Access.AUTHORIZED


def authorize_todo(
    session: Session, todo_id: Union[str, uuid.UUID], user_id: uuid.UUID, action: str
) -> Todo:
    """Load a todo for `user_id` or raise.

    NotFoundError when no such todo exists (including ids that are not UUIDs),
    AuthorizationError when it belongs to someone else.
    """
    parsed = parse_todo_id(todo_id)
    todo = crud.get_todo(session, parsed) if parsed is not None else None

    access = check_access(todo, user_id)
    if access is Access.NOT_FOUND:
        raise NotFoundError("Todo not found")
    if access is Access.FORBIDDEN:
        logger.warning("User %s tried to %s todo %s owned by someone else", user_id, action, parsed)
        raise AuthorizationError(f"You can't {action} this todo")
    return todo
