import logging
import re
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from app.config import load_settings
from app.errors import TodoNotFound
from app.models import TodoCreate, TodoListResponse, TodoResponse, TodoUpdateRequest
from app.store import TodoStore

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


@router.get("/health")
async def health():
    return {"status": "healthy"}


@router.get("/todos", response_model=TodoListResponse)
async def list_todos(store: TodoStore = Depends(get_store)):
    return TodoListResponse(todos=store.list())


@router.get("/todos/{todo_id}", response_model=TodoResponse)
async def get_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    return TodoResponse(todo=store.get(todo_id))


@router.post("/todos", status_code=201, response_model=TodoResponse)
async def create_todo(new_todo: TodoCreate, store: TodoStore = Depends(get_store)):
    todo = store.create(new_todo.task)
    logger.info("created todo %s (%d total)", todo.id, len(store))
    return TodoResponse(todo=todo)


@router.put("/todos/{todo_id}", response_model=TodoResponse)
async def update_todo(todo_id: str, updates: TodoUpdateRequest,
                      store: TodoStore = Depends(get_store)):
    todo = store.update(todo_id, updates.todo.task, updates.todo.completed)
    logger.info("updated todo %s (completed=%s)", todo.id, todo.completed)
    return TodoResponse(todo=todo)


@router.delete("/todos/{todo_id}", status_code=204)
async def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
    store.delete(todo_id)
    logger.info("deleted todo %s", todo_id)
    return Response(status_code=204)


async def todo_not_found(request: Request, exc: TodoNotFound):
    logger.debug("%s %s: no todo with id %s", request.method, request.url.path, exc.todo_id)
    return PlainTextResponse("Todo not found", status_code=404)


async def normalize_path(request: Request, call_next):
    path = re.sub(r"/{2,}", "/", request.scope["path"])
    if path != "/" and path.endswith("/"):
        path = path.rstrip("/") or "/"
    request.scope["path"] = path
    return await call_next(request)


def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    app = FastAPI(title="Todo Service", redirect_slashes=False)
    app.state.store = store if store is not None else TodoStore()
    app.add_exception_handler(TodoNotFound, todo_not_found)
    app.middleware("http")(normalize_path)
    app.include_router(router)
    return app


def run():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("listening on %s:%s", settings.host, settings.port)
    uvicorn.run("app.main:create_app", factory=True, host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())
