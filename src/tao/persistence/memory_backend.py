"""In-memory database for unit tests."""

from __future__ import annotations

from typing import Any


class MemoryDatabase:
    """Canned-response IDatabase for unit tests.

    Responses are keyed by the exact SQL text; every executed statement is
    recorded in ``queries``. Set ``error`` to make every query raise it.
    """

    def __init__(self, responses: dict[str, list[dict[str, Any]]] | None = None,
                 error: Exception | None = None) -> None:
        self._responses: dict[str, list[dict[str, Any]]] = dict(responses or {})
        self.error = error
        self.queries: list[str] = []
        self.closed = False

    def respond(self, sql: str, rows: list[dict[str, Any]]) -> None:
        self._responses[sql] = rows

    def query(self, sql: str) -> list[dict[str, Any]]:
        self.queries.append(sql)
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self._responses.get(sql, [])]

    def quote(self, value: str) -> str:
        return "'" + value.replace("'", "''") + "'"

    def close(self) -> None:
        self.closed = True
