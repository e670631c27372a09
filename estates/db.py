# estates/db.py
from pathlib import Path

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from .config import Settings

# Register the tables with SQLModel.metadata
from .models import Property  # noqa: F401


def make_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        # Sync handlers run in the threadpool
        connect_args["check_same_thread"] = False
        _, _, db_path = settings.database_url.partition(":///")
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(settings.database_url, pool_pre_ping=True, connect_args=connect_args)


def init_db(engine: Engine):
    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
