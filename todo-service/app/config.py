import os
from typing import Literal
from pydantic import BaseModel

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


class Settings(BaseModel):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"


def load_settings() -> Settings:
    return Settings(
        host=os.getenv("TODO_HOST", DEFAULT_HOST),
        port=os.getenv("TODO_PORT", DEFAULT_PORT),
        log_level=os.getenv("TODO_LOG_LEVEL", "INFO").upper(),
    )
