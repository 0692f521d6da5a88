class TodoNotFound(Exception):
    """Raised when an id does not resolve to a live todo."""

    def __init__(self, todo_id: str):
        super().__init__(f"Todo not found: {todo_id}")
        self.todo_id = todo_id
