from app.models.Todo import Todo
from app.models.TodoCreate import TodoCreate
from app.models.TodoUpdate import TodoUpdate, TodoUpdateRequest
from app.models.TodoResponse import TodoResponse, TodoListResponse

__all__ = [
    "Todo",
    "TodoCreate",
    "TodoUpdate",
    "TodoUpdateRequest",
    "TodoResponse",
    "TodoListResponse",
]
