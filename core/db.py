from __future__ import annotations

import os
from dotenv import load_dotenv
load_dotenv()  # this will read .env into os.environ

from contextlib import contextmanager
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")


def _make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # one shared connection so an in-memory database survives across requests
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        url,
        pool_pre_ping=True,   # checks connections before use
        pool_size=5,          # max open connections
        max_overflow=5,       # extra if burst needed
        pool_recycle=1800,    # recycle every 30 mins
    )


engine: Engine = _make_engine(DATABASE_URL)


@contextmanager
def get_conn():
    """Get a database connection with proper transaction support.

    Uses engine.begin() which auto-commits on successful exit
    and rolls back on exception.
    """
    with engine.begin() as conn:
        yield conn



def like_pattern(term: str) -> str:
    """Lower-cased `%term%` with LIKE wildcards escaped. Use with `ESCAPE '\\'`."""
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
