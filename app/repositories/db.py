"""
Pool de conexões SQLite (QueuePool do SQLAlchemy sobre sqlite3).

O pool é criado explicitamente no startup da aplicação, injetado nos
repositórios e fechado no shutdown. Os repositórios continuam com SQL
direto no sqlite3.
"""
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import exc as sa_exc
from sqlalchemy.pool import QueuePool

from app.core.logging import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS chats (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  phone TEXT NOT NULL,
  status TEXT NOT NULL DEFAULT 'awaiting_barber', -- awaiting_barber, attended
  last_message TEXT NULL,
  last_interaction TEXT NULL,
  created_at TEXT NOT NULL DEFAULT (datetime('now'))
);

CREATE INDEX IF NOT EXISTS idx_chats_phone ON chats(phone);

CREATE TABLE IF NOT EXISTS clients (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  phone TEXT NOT NULL UNIQUE,
  created_at TEXT NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS barbers (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE,
  specialty TEXT NULL,
  is_active INTEGER NOT NULL DEFAULT 1
);

CREATE TABLE IF NOT EXISTS services (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE,
  description TEXT NULL,
  price_cents INTEGER NULL,
  is_active INTEGER NOT NULL DEFAULT 1
);
"""


class PoolError(sqlite3.OperationalError):
    """Pool fechado ou sem conexões livres dentro do timeout."""


class Database:
    def __init__(self, path: str | Path, pool_size: int = 5, timeout: float = 5.0):
        if pool_size < 1:
            raise ValueError("pool_size deve ser >= 1")
        self.path = str(path)
        self.pool_size = pool_size
        self.timeout = timeout
        self._closed = False
        self._pool = QueuePool(
            self._connect,
            pool_size=pool_size,
            max_overflow=0,
            timeout=timeout,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path, timeout=self.timeout, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Empresta uma conexão do pool.

        Transação aberta e não confirmada é desfeita se o bloco levantar exceção.
        """
        if self._closed:
            raise PoolError("pool de conexões fechado")
        try:
            conn = self._pool.connect()
        except sa_exc.TimeoutError:
            raise PoolError(f"nenhuma conexão livre após {self.timeout}s") from None

        try:
            yield conn
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()  # devolve ao pool

    def init_schema(self) -> None:
        with self.connection() as conn:
            conn.executescript(SCHEMA_SQL)
            conn.commit()

    def ping(self) -> bool:
        try:
            with self.connection() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except sqlite3.Error as e:
            logger.error(f"Falha ao conectar no banco {self.path}: {e}")
            return False

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pool.dispose()
        logger.info("Pool de conexões fechado")
