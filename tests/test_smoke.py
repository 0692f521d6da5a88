# tests/test_smoke.py
import uuid


def test_smoke_happy_path(client):
    assert client.get("/health").status_code == 200

    # Create a todo
    created = client.post("/todos", json={"task": "buy milk"})
    assert created.status_code == 201
    todo = created.json()["todo"]
    todo_id = todo["id"]
    assert uuid.UUID(todo_id)
    assert todo == {"id": todo_id, "task": "buy milk", "completed": False}

    # Fetch it back
    fetched = client.get(f"/todos/{todo_id}")
    assert fetched.status_code == 200
    assert fetched.json() == created.json()

    # Update task and mark it completed
    upd = client.put(f"/todos/{todo_id}",
                     json={"todo": {"task": "buy oat milk", "completed": True}})
    assert upd.status_code == 200
    assert upd.json() == {"todo": {"id": todo_id, "task": "buy oat milk", "completed": True}}

    # Delete it
    d = client.delete(f"/todos/{todo_id}")
    assert d.status_code == 204
    assert d.content == b""

    # Gone for good
    gone = client.get(f"/todos/{todo_id}")
    assert gone.status_code == 404
    assert gone.text == "Todo not found"
