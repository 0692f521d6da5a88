"""In-memory todo storage.

All records live in a single list guarded by one lock. Callers only ever
see copies, so nothing outside the lock can mutate a stored record.
"""

import threading
import uuid
from typing import List

from app.errors import TodoNotFound
from app.models import Todo


class TodoStore:
    def __init__(self):
        self._todos: List[Todo] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> List[Todo]:
        """Return a snapshot of every todo in insertion order."""
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def get(self, todo_id: str) -> Todo:
        with self._lock:
            return self._find(todo_id).model_copy()

    def create(self, task: str) -> Todo:
        todo = Todo(id=str(uuid.uuid4()), task=task, completed=False)
        with self._lock:
            self._todos.append(todo)
            return todo.model_copy()

    def update(self, todo_id: str, task: str, completed: bool) -> Todo:
        """Overwrite task and completed in place. The id never changes."""
        with self._lock:
            todo = self._find(todo_id)
            todo.task = task
            todo.completed = completed
            return todo.model_copy()

    def delete(self, todo_id: str) -> None:
        with self._lock:
            for index, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[index]
                    return
        raise TodoNotFound(todo_id)

    def _find(self, todo_id: str) -> Todo:
        # caller must hold _lock
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise TodoNotFound(todo_id)
