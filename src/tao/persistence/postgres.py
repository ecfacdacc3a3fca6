"""PostgreSQL backend implementing IDatabase with psycopg2."""

from __future__ import annotations

import logging
from typing import Any

import psycopg2
from psycopg2.extensions import QuotedString, encodings
from psycopg2.extras import RealDictCursor

from tao.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

PDO_PREFIX = "pgsql:"


def libpq_dsn(dsn: str) -> str:
    """Accept PDO-style ``pgsql:host=..;dbname=..`` DSNs as well as libpq ones."""
    if not dsn.startswith(PDO_PREFIX):
        return dsn
    parts = [part.strip() for part in dsn[len(PDO_PREFIX):].split(";")]
    return " ".join(part for part in parts if part)


class PostgresDatabase:
    """Production IDatabase backed by a single lazily-opened psycopg2 connection."""

    def __init__(self, dsn: str, username: str | None = None,
                 password: str | None = None, connect_timeout: int = 5) -> None:
        self._dsn = libpq_dsn(dsn)
        self._username = username
        self._password = password
        self._connect_timeout = connect_timeout
        self._conn: Any = None

    @property
    def connection(self) -> Any:
        if self._conn is None:
            kwargs: dict = {
                "connect_timeout": self._connect_timeout,
                "cursor_factory": RealDictCursor,
            }
            if self._username:
                kwargs["user"] = self._username
            if self._password:
                kwargs["password"] = self._password
            try:
                conn = psycopg2.connect(self._dsn, **kwargs)
            except psycopg2.Error as exc:
                raise DatabaseError(f"PostgreSQL connect failed: {exc}") from exc
            conn.autocommit = True
            logger.debug("Opened PostgreSQL connection")
            self._conn = conn
        return self._conn

    def query(self, sql: str) -> list[dict[str, Any]]:
        conn = self.connection
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                rows = cur.fetchall() if cur.description is not None else []
        except psycopg2.Error as exc:
            raise DatabaseError(f"PostgreSQL query failed: {exc}") from exc
        return [dict(row) for row in rows]

    def quote(self, value: str) -> str:
        conn = self.connection
        adapted = QuotedString(value)
        adapted.prepare(conn)
        return adapted.getquoted().decode(encodings.get(conn.encoding, "utf-8"))

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
