from .user import User
from .todo import Todo, TodoStatus

__all__ = ["User", "Todo", "TodoStatus"]
