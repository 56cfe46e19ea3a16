# movie_catalog_db.py
from __future__ import annotations
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from movieCatalog.settings import SCHEMA_PATH as _SCHEMA_PATH
from movieCatalog.metadata.errors import PersistenceError
from movieCatalog.utils import log_debug


class CatalogDB:
    """
    The one sqlite3 connection the app holds for its whole lifetime.

    Opened once at startup and handed to `MovieRepo`; nothing else in the
    package keeps a connection around.
    """

    def __init__(self, path: str | Path, schema_path: Path = _SCHEMA_PATH) -> None:
        self.path = str(path)
        try:
            self._conn = sqlite3.connect(self.path, isolation_level="DEFERRED")
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e

        self._conn.row_factory = sqlite3.Row
        try:
            self._conn.executescript(schema_path.read_text())
            self._conn.commit()
        except (sqlite3.Error, OSError) as e:
            self._conn.close()
            raise PersistenceError(str(e)) from e

    # ─── public helpers ──────────────────────────────────────────────────
    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Like `sqlite3.Connection.execute(...)`, returns the cursor."""
        return self._conn.cursor().execute(sql, params)

    @contextmanager
    def transaction(self) -> Iterator[CatalogDB]:
        """
        Commit on success, roll back on any exception.

        sqlite3 errors and integers too wide for a column are re-raised as
        `PersistenceError`; everything else propagates unchanged.
        """
        try:
            yield self
            self._conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            log_debug(f"storage fault on {self.path}: {e}")
            self._rollback_after_fault(e)
            raise PersistenceError(str(e)) from e
        except BaseException:
            self._conn.rollback()
            raise

    def _rollback_after_fault(self, cause: Exception) -> None:
        # a lost connection cannot roll back either; the original fault wins
        try:
            self._conn.rollback()
        except sqlite3.Error as e:
            log_debug(f"rollback after \"{cause}\" failed: {e}")

    # ─── cleanup ─────────────────────────────────────────────────────────
    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> CatalogDB:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
