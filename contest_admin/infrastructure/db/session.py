from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from contest_admin.infrastructure.config import DATABASE_URL, SQL_ECHO
from .base import Base  # noqa: F401


def build_engine(url: str, echo: bool = False):
    connect_args = {}
    if url.startswith("sqlite"):
        # Store writes run in the threadpool, not on the thread that opened the connection
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = build_engine(DATABASE_URL, echo=SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
