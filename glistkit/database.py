"""A small SQLite wrapper that queues selected rows as delimited strings."""

from __future__ import annotations

import os
import sqlite3
from collections import deque
from typing import Any, Union

PathLike = Union[str, os.PathLike]


class DatabaseError(Exception):
    """Raised when a database cannot be opened or a statement fails."""


def _split_statements(script: str) -> list[str]:
    statements: list[str] = []
    buffer = ""
    pieces = script.split(";")
    for index, piece in enumerate(pieces):
        buffer += piece
        if index < len(pieces) - 1:
            buffer += ";"
        if sqlite3.complete_statement(buffer):
            statements.append(buffer)
            buffer = ""
    if buffer.strip():
        statements.append(buffer)
    return [s for s in statements if s.strip().strip(";").strip()]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class Database:
    """An SQLite database whose query results are queued as text rows.

    Each row is the statement id followed by the column values, every part
    preceded by the delimiter.
    """

    def __init__(self) -> None:
        self._connection: sqlite3.Connection | None = None
        self._path = ""
        self._rows: deque[str] = deque()
        self.delimiter = "|"

    def open(self, full_path: PathLike) -> bool:
        """Open or create the database at ``full_path``."""
        self._path = os.fspath(full_path)
        try:
            self._connection = sqlite3.connect(self._path, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Can't open database! errormsg:{exc}") from exc
        return True

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    @property
    def path(self) -> str:
        return self._path

    def execute(self, statement: str, statement_id: str = "0") -> None:
        """Run one or more SQL statements, queueing every returned row."""
        if self._connection is None:
            raise DatabaseError("database is not open")
        cursor = self._connection.cursor()
        try:
            for single in _split_statements(statement):
                try:
                    cursor.execute(single)
                    rows = cursor.fetchall()
                except sqlite3.Error as exc:
                    raise DatabaseError(f"SQL error: {exc}") from exc
                for row in rows:
                    self._rows.append(
                        str(statement_id)
                        + "".join(self.delimiter + _as_text(v) for v in row)
                    )
        finally:
            cursor.close()

    def select_data(self) -> str:
        """Take the oldest queued row, or return an empty string."""
        if not self._rows:
            return ""
        return self._rows.popleft()

    def has_select_data(self) -> bool:
        return bool(self._rows)

    def select_data_count(self) -> int:
        return len(self._rows)

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()