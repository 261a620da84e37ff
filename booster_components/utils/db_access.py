import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from booster_components.config import DB_PATH, STORAGE_KEY
from booster_components.session_classes import SessionState
from booster_logs.base import Logger
from booster_logs.loggers import storage_logger


def get_db_connection(db_path: Path = DB_PATH):
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row  # Allows accessing columns by name
    return conn


def init_db(db_path: Path = DB_PATH):
    """
    Create the SessionStore table. One row per storage key, the whole
    session serialized as JSON in `state`.
    """
    db_path = Path(db_path)
    if not db_path.parent.exists():
        db_path.parent.mkdir(parents=True)

    conn = get_db_connection(db_path)
    try:
        conn.execute("""
        CREATE TABLE IF NOT EXISTS SessionStore (
            storage_key TEXT NOT NULL PRIMARY KEY,
            state TEXT NOT NULL,
            updated_at TEXT DEFAULT CURRENT_TIMESTAMP
        );
        """)
        conn.commit()
    finally:
        conn.close()


def read_session_record(storage_key: str, db_path: Path = DB_PATH) -> Optional[str]:
    conn = get_db_connection(db_path)
    try:
        row = conn.execute(
            "SELECT state FROM SessionStore WHERE storage_key = ?", (storage_key,)
        ).fetchone()
        return row['state'] if row else None
    finally:
        conn.close()


def write_session_record(storage_key: str, state_json: str, db_path: Path = DB_PATH):
    conn = get_db_connection(db_path)
    try:
        conn.execute("""
            INSERT INTO SessionStore (storage_key, state, updated_at)
            VALUES (?, ?, CURRENT_TIMESTAMP)
            ON CONFLICT(storage_key) DO UPDATE
            SET state = excluded.state, updated_at = excluded.updated_at
        """, (storage_key, state_json))
        conn.commit()
    finally:
        conn.close()


class SessionPersistence(ABC):
    """Where the booster store keeps its single session record.

    `load` returns None when there is nothing usable to restore; the store
    then starts from defaults. `save` never raises.
    """

    @abstractmethod
    def load(self) -> Optional[SessionState]: ...

    @abstractmethod
    def save(self, state: SessionState) -> None: ...


def _decode(raw: Optional[str], storage_key: str, logger: Logger) -> Optional[SessionState]:
    if raw is None:
        logger.info("session_state_absent", storage_key=storage_key)
        return None
    try:
        return SessionState.from_json(raw)
    except ValidationError as e:
        logger.warning(
            "session_state_corrupt",
            storage_key=storage_key,
            errors=e.error_count()
        )
        return None


class InMemorySessionPersistence(SessionPersistence):
    """Keeps the serialized record in memory. Used by tests and throwaway sessions."""

    def __init__(self, raw: Optional[str] = None, storage_key: str = STORAGE_KEY,
                 logger: Logger = storage_logger):
        self.raw = raw
        self.storage_key = storage_key
        self.logger = logger
        self.saves = 0

    def load(self):
        return _decode(self.raw, self.storage_key, self.logger)

    def save(self, state):
        self.raw = state.to_json()
        self.saves += 1


class SqliteSessionPersistence(SessionPersistence):
    def __init__(self, db_path: Path = DB_PATH, storage_key: str = STORAGE_KEY,
                 logger: Logger = storage_logger):
        self.db_path = Path(db_path)
        self.storage_key = storage_key
        self.logger = logger
        self._ready = False

    def _ensure_db(self):
        if not self._ready:
            init_db(self.db_path)
            self._ready = True

    def load(self):
        try:
            self._ensure_db()
            raw = read_session_record(self.storage_key, self.db_path)
        except (sqlite3.Error, OSError) as e:
            self.logger.error(
                "session_state_load_failed",
                storage_key=self.storage_key,
                db_path=str(self.db_path),
                error=str(e)
            )
            return None
        return _decode(raw, self.storage_key, self.logger)

    def save(self, state):
        try:
            self._ensure_db()
            write_session_record(self.storage_key, state.to_json(), self.db_path)
        except (sqlite3.Error, OSError) as e:
            self.logger.error(
                "session_state_save_failed",
                storage_key=self.storage_key,
                db_path=str(self.db_path),
                error=str(e)
            )
