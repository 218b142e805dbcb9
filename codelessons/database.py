"""Prepared SQLite statements with positional bindings and typed column retrieval."""

from __future__ import annotations

import re
import sqlite3
from typing import Any, Callable, Optional, Sequence, Tuple, Union

Value = Union[None, int, float, str, bytes]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Database:
    """An open SQLite database whose changes are committed as each statement runs."""

    def __init__(self, path: str) -> None:
        try:
            self._connection: Optional[sqlite3.Connection] = sqlite3.connect(
                path, isolation_level=None
            )
        except sqlite3.Error as error:
            raise DatabaseError(
                f'Couldn\'t open the database file: "{path}"'
            ) from error

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise DatabaseError("the database has been closed")
        return self._connection

    def _scalar(self, sql: str) -> int:
        try:
            return self.connection.execute(sql).fetchone()[0]
        except sqlite3.Error as error:
            raise DatabaseError(str(error)) from error

    def last_inserted_id(self) -> int:
        """The row id of the most recent successful insert."""
        return self._scalar("select last_insert_rowid()")

    def changes(self) -> int:
        """The number of rows changed by the most recent insert, update or delete."""
        return self._scalar("select changes()")

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _bindable(value: Any) -> Value:
    if value is None or isinstance(value, (float, str)):
        return value
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise OverflowError(f"{value} does not fit in a 64-bit integer")
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"cannot bind a value of type {type(value).__name__}")


def _number_prefix(text: str) -> Optional[str]:
    match = _LEADING_NUMBER.match(text)
    return match.group(1) if match else None


def _column(value: Value, kind: type) -> Value:
    if kind is int:
        if value is None:
            return 0
        if isinstance(value, (str, bytes)):
            text = value.decode("utf-8", "replace") if isinstance(value, bytes) else value
            number = _number_prefix(text)
            if number is None:
                return 0
            try:
                return int(number)
            except ValueError:
                return int(float(number))
        return int(value)
    if kind is float:
        if value is None:
            return 0.0
        if isinstance(value, (str, bytes)):
            text = value.decode("utf-8", "replace") if isinstance(value, bytes) else value
            number = _number_prefix(text)
            return float(number) if number is not None else 0.0
        return float(value)
    if kind is str:
        if value is None:
            return ""
        if isinstance(value, bytes):
            return value.decode("utf-8", "replace")
        return str(value)
    if kind is bytes:
        if value is None:
            return b""
        if isinstance(value, bytes):
            return value
        return str(value).encode("utf-8")
    raise TypeError(f"unknown type for an output column: {kind!r}")


class Statement:
    """A query that is bound, stepped through row by row, reset and run again."""

    def __init__(self, database: Database, query: str) -> None:
        if not isinstance(query, str):
            raise TypeError("the query must be a string")
        self._database = database
        self._query = query
        self._parameters: Tuple[Value, ...] = ()
        self._cursor: Optional[sqlite3.Cursor] = None
        self._row: Optional[tuple] = None
        self._finalized = False

    @property
    def query(self) -> str:
        return self._query

    def _check_open(self) -> None:
        if self._finalized:
            raise DatabaseError("the statement has been finalized")

    def bind(self, *args: Any) -> None:
        """Bind args to the statement's parameters, in order from the first."""
        self._check_open()
        if self._cursor is not None:
            raise DatabaseError(
                "cannot bind while the statement is running; reset it first"
            )
        self._parameters = tuple(_bindable(arg) for arg in args)

    def step(self) -> Optional[tuple]:
        """Run to the next row and return it, or None once the statement is done.

        Stepping a finished statement runs it again from the start.
        """
        self._check_open()
        try:
            if self._cursor is None:
                self._cursor = self._database.connection.execute(
                    self._query, self._parameters
                )
            row = self._cursor.fetchone()
        except sqlite3.Error as error:
            self._close_cursor()
            raise DatabaseError(str(error)) from error
        if row is None:
            self._close_cursor()
        self._row = row
        return row

    def _close_cursor(self) -> None:
        if self._cursor is not None:
            self._cursor.close()
            self._cursor = None
        self._row = None

    def reset(self) -> None:
        """Stop any run in progress; the bound values are kept."""
        self._check_open()
        self._close_cursor()

    def finalize(self) -> None:
        self._close_cursor()
        self._finalized = True

    def retrieve_columns(self, *args: type) -> tuple:
        """The current row's leading columns converted to the given types
        (int, float, str or bytes)."""
        self._check_open()
        if self._row is None:
            raise DatabaseError("no row is available; step to a row first")
        if len(args) > len(self._row):
            raise DatabaseError(
                f"asked for {len(args)} columns but the row has {len(self._row)}"
            )
        return tuple(_column(value, kind) for value, kind in zip(self._row, args))

    def foreach_row(self, callback: Callable[..., Any], *args: type) -> bool:
        """Call callback with each row's converted columns; return False as soon
        as it returns a false value, True after the last row."""
        while self.step() is not None:
            if not callback(*self.retrieve_columns(*args)):
                return False
        return True

    def __enter__(self) -> "Statement":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finalize()


def update(database: Database, query: str, *args: Any) -> None:
    """Run a single statement once with args bound to it."""
    with Statement(database, query) as statement:
        statement.bind(*args)
        statement.step()


def insert(database: Database, query: str, *args: Any) -> int:
    """Run an insert once with args bound to it and return the new row id."""
    update(database, query, *args)
    return database.last_inserted_id()