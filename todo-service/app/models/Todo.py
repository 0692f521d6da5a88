from pydantic import BaseModel


class Todo(BaseModel):
    id: str
    task: str
    completed: bool = False
