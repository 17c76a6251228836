"""Result sets and their materialization into typed rows.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

from typing import Any, Callable, Iterator, List, Optional, Tuple  # pylint: disable=unused-import

from . import datatype
from . import protocol
from .exception import InterfaceError, DatabaseError  # pylint: disable=unused-import

Row = Tuple[Any, ...]


class Column(object):
    """Metadata of one result column."""

    def __init__(self, field):
        """
        :type field driver.Field
        """
        self.name = field.name
        self.table = field.table
        self.type_code = field.type
        self.length = field.length
        self.flags = field.flags
        self.decimals = field.decimals

    @property
    def nullable(self):
        # type: () -> bool
        return not self.flags & protocol.NOT_NULL_FLAG

    @property
    def unsigned(self):
        # type: () -> bool
        return bool(self.flags & protocol.UNSIGNED_FLAG)

    def describe(self):
        # type: () -> Tuple[Any, ...]
        """Return the PEP 249 description of this column."""
        return (self.name, self.type_code, self.length, self.length,
                self.length, self.decimals, self.nullable)

    def __repr__(self):
        return 'Column(%r, type=%d)' % (self.name, self.type_code)


def describe(columns):
    # type: (List[Column]) -> Optional[List[Tuple[Any, ...]]]
    if not columns:
        return None
    return [col.describe() for col in columns]


class Rows(list):
    """The materialized rows of one result set."""

    description = None  # type: Optional[List[Tuple[Any, ...]]]


class ResultSet(object):
    """A stored result set owned by the connection that produced it."""

    def __init__(self, connection, handle):
        """
        :type connection connection.Connection
        :type handle Any
        """
        self.connection = connection
        self.handle = handle
        self.__columns = None  # type: Optional[List[Column]]

    def _check_handle(self, func):
        # type: (str) -> Any
        if self.handle is None:
            raise InterfaceError(func + " called with NULL result set.")
        return self.handle

    @property
    def columns(self):
        # type: () -> List[Column]
        """Column metadata, read from the driver once per result set."""
        handle = self._check_handle('fetch_fields')
        if self.__columns is None:
            fields = self.connection.driver.fetch_fields(handle)
            self.__columns = [Column(f) for f in fields]
        return self.__columns

    @property
    def description(self):
        # type: () -> Optional[List[Tuple[Any, ...]]]
        return describe(self.columns)

    def num_rows(self):
        # type: () -> int
        return self.connection.driver.num_rows(self._check_handle('num_rows'))

    def fetch_row(self):
        # type: () -> Optional[Row]
        """Return the next row, or None when the result is exhausted."""
        columns = self.columns
        raw = self.connection.driver.fetch_row(self._check_handle('fetch_row'))
        if raw is None:
            return None
        if len(raw) != len(columns):
            raise InterfaceError("fetch_row returned %d values for %d columns."
                                 % (len(raw), len(columns)))
        return tuple(datatype.from_text(col.type_code, value, col.flags)
                     for col, value in zip(columns, raw))

    def __iter__(self):
        # type: () -> Iterator[Row]
        while True:
            row = self.fetch_row()
            if row is None:
                return
            yield row

    def close(self):
        # type: () -> None
        """Release the result set.  Closing twice is a no-op."""
        if self.handle is not None:
            handle, self.handle = self.handle, None
            self.connection.driver.free_result(handle)


def materialize(result):
    # type: (ResultSet) -> Rows
    """Convert every row of a result set into a tuple of typed values."""
    rows = Rows(result)
    rows.description = result.description
    return rows


def check_row_count(count, error):
    # type: (int, Callable[[], DatabaseError]) -> int
    """Return count, or raise error() if count is the failure sentinel.

    The driver reports "could not obtain a count" as the largest unsigned
    64-bit value; it is never a real row count.
    """
    if count == protocol.AFFECTED_ROWS_ERROR:
        raise error()
    return count
