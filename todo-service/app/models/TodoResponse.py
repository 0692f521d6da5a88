from typing import List
from pydantic import BaseModel
from app.models.Todo import Todo


class TodoResponse(BaseModel):
    todo: Todo


class TodoListResponse(BaseModel):
    todos: List[Todo]
