from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Build an engine that holds exactly one DBAPI connection.

    ``StaticPool`` hands the same connection to every checkout, so callers
    must serialize access themselves (see ``PasteStore``).
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        # the single connection is shared by the server's worker threads
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=echo,
        future=True,
        poolclass=StaticPool,
        connect_args=connect_args,
    )


def init_db(engine: Engine):
    """Create missing tables; safe to call on every startup."""
    from . import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine)
