"""One-shot SELECT queries whose first row is read into declared column types."""

from __future__ import annotations

import sqlite3
from enum import IntEnum
from typing import Any, Iterable, Optional, Union

from codelessons.database import Database, DatabaseError, _bindable, _column


class ColumnType(IntEnum):
    """The storage class an output column is read as."""

    UNKNOWN = 0
    BLOB = 1
    INTEGER = 2
    REAL = 3
    TEXT = 4


_PYTHON_TYPES = {
    ColumnType.BLOB: bytes,
    ColumnType.INTEGER: int,
    ColumnType.REAL: float,
    ColumnType.TEXT: str,
}


def _python_type(column_type: Union[ColumnType, int]) -> type:
    try:
        kind = ColumnType(column_type)
    except ValueError:
        raise TypeError(f"unknown type for an output column: {column_type!r}") from None
    if kind is ColumnType.UNKNOWN:
        raise TypeError("unknown type for an output column")
    return _PYTHON_TYPES[kind]


def convert_value(value: Any, column_type: Union[ColumnType, int]) -> Any:
    """Convert a value read from SQLite the way the column's type reads it.

    NULL becomes 0, 0.0, an empty string or empty bytes; text read as a
    number keeps only its leading numeric part.
    """
    return _column(value, _python_type(column_type))


def select(
    connection: Union[sqlite3.Connection, Database],
    query: str,
    column_types: Iterable[Union[ColumnType, int]],
    *args: Any,
) -> Optional[tuple]:
    """Run query with args bound and return the first row's leading columns
    converted to column_types, or None if the query returns no row."""
    kinds = [_python_type(column_type) for column_type in column_types]
    if isinstance(connection, Database):
        connection = connection.connection
    parameters = tuple(_bindable(arg) for arg in args)
    cursor: Optional[sqlite3.Cursor] = None
    try:
        cursor = connection.execute(query, parameters)
        row = cursor.fetchone()
    except sqlite3.Error as error:
        raise DatabaseError(str(error)) from error
    finally:
        if cursor is not None:
            cursor.close()
    if row is None:
        return None
    if len(kinds) > len(row):
        raise DatabaseError(
            f"asked for {len(kinds)} columns but the row has {len(row)}"
        )
    return tuple(_column(value, kind) for value, kind in zip(row, kinds))