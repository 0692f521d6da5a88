from pydantic import BaseModel


class TodoUpdate(BaseModel):
    task: str
    completed: bool


class TodoUpdateRequest(BaseModel):
    todo: TodoUpdate
