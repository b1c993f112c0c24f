from __future__ import annotations

import threading
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .models import Paste
from .session import init_db, make_engine


class StorageError(RuntimeError):
    """The paste database could not be opened, read or written."""


class DuplicateTokenError(StorageError):
    """A paste with this token is already stored."""

    def __init__(self, token: str):
        super().__init__(f"paste token already in use: {token}")
        self.token = token


class PasteStore:
    """Owns the one database connection and serializes every use of it.

    Insert and lookup each run start to finish under ``self._lock``; nothing
    else touches the connection.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._lock = threading.Lock()
        self._session = sessionmaker(bind=engine, autoflush=False)

    @classmethod
    def open(cls, database_url: str) -> "PasteStore":
        engine = None
        try:
            engine = make_engine(database_url)
            init_db(engine)
        except (SQLAlchemyError, ImportError) as exc:
            # ImportError: the URL names a dialect whose DBAPI driver is not installed
            if engine is not None:
                engine.dispose()
            raise StorageError(f"cannot open paste database {database_url}: {exc}") from exc
        return cls(engine)

    # ------------------------------------------------------------------
    def insert(self, token: str, content: str) -> None:
        with self._lock, self._session() as session:
            try:
                session.add(Paste(token=token, content=content))
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateTokenError(token) from exc
            except SQLAlchemyError as exc:
                session.rollback()
                raise StorageError(str(exc)) from exc

    def lookup(self, token: str) -> Optional[str]:
        with self._lock, self._session() as session:
            try:
                paste = session.get(Paste, token)
            except SQLAlchemyError as exc:
                raise StorageError(str(exc)) from exc
            if paste is None:
                return None
            return paste.content

    def close(self) -> None:
        with self._lock:
            self.engine.dispose()
