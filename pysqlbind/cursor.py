"""A module for housing the Cursor class.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Cursor -- Class for representing a database cursor.
"""

from typing import Any, Iterator, List, Optional, Sequence, Tuple  # pylint: disable=unused-import

from .binder import Nullable
from .datatype import type_for_value
from .exception import Error, InterfaceError, ProgrammingError
from .exception import NotSupportedError
from .result_set import Rows
from .statement import UNINITIALIZED, CLOSED


def _param_type(value):
    # type: (Any) -> int
    if isinstance(value, Nullable):
        value = value.value
    return type_for_value(value)


class Cursor(object):
    """Class for representing a database cursor.

    Public Functions:
    close -- Closes the cursor into the database.
    callproc -- Currently not supported.
    execute -- Executes an SQL operation.
    executemany -- Executes the operation for each list of parameters passed in.
    fetchone -- Fetches the first row of results generated by the previous execute.
    fetchmany -- Fetches the number of rows that are passed in.
    fetchall -- Fetches everything generated by the previous execute.
    nextset -- Moves to the results of the next statement of a batch.
    setinputsizes -- Currently not supported.
    setoutputsize -- Currently not supported.

    Private Functions:
    _check_closed -- Checks if the cursor is closed.
    _reset -- Resets the cursor's results.
    _next_outcome -- Makes the next statement's outcome current.
    """

    def __init__(self, connection):
        """
        :type connection connection.Connection
        """
        self.connection = connection
        self.closed = False
        self.arraysize = 1
        self.query = None  # type: Optional[str]

        self.description = None  # type: Optional[List[Tuple[Any, ...]]]
        self.rowcount = -1
        self.lastrowid = None  # type: Optional[int]
        self._outcomes = []    # type: List[Any]
        self._rows = None      # type: Optional[Rows]
        self._pos = 0

    def close(self):
        # type: () -> None
        """Close this cursor."""
        self._check_closed()
        self.closed = True
        self._reset()

    def _check_closed(self):
        # type: () -> None
        """Check if the cursor or the connection is closed."""
        if self.closed:
            raise InterfaceError("cursor is closed")
        if self.connection.closed:
            raise InterfaceError("connection is closed")

    def _reset(self):
        # type: () -> None
        """Reset the cursor's results."""
        self.description = None
        self.rowcount = -1
        self.lastrowid = None
        self._outcomes = []
        self._rows = None
        self._pos = 0

    def _next_outcome(self):
        # type: () -> None
        outcome = self._outcomes.pop(0)
        self._pos = 0
        if isinstance(outcome, Rows):
            self._rows = outcome
            self.description = outcome.description
            self.rowcount = len(outcome)
        else:
            self._rows = None
            self.description = None
            self.rowcount = outcome

    def callproc(self, procname, parameters=None):
        # type: (str, Optional[Sequence[Any]]) -> None
        """Currently not supported."""
        raise NotSupportedError("callproc is not supported")

    def execute(self, operation, parameters=None):
        # type: (str, Optional[Sequence[Any]]) -> None
        """Execute a SQL operation.

        Without parameters the operation may hold several statements; the
        results of the first are current and nextset() moves to the others.
        With parameters the operation is run as a prepared statement using
        "?" placeholders.
        """
        self._check_closed()
        self._reset()
        self.query = operation

        if parameters is None:
            self._outcomes = self.connection.execute(operation, unwrap=False)
            self.lastrowid = self.connection.insert_id()
        else:
            self._outcomes = [self._execute_prepared(operation, parameters)]
        self._next_outcome()

    def _execute_prepared(self, operation, parameters):
        # type: (str, Sequence[Any]) -> Any
        stmt = self.connection.statement
        if stmt is None or stmt.sql != operation or stmt.state in (UNINITIALIZED, CLOSED):
            stmt = self.connection.prepare(operation)

        values = list(parameters)
        if stmt.param_count != len(values):
            raise ProgrammingError("Incorrect number of parameters specified,"
                                   " expected %d, got %d"
                                   % (stmt.param_count, len(values)))
        outcome = stmt.run([_param_type(v) for v in values], values)
        self.lastrowid = stmt.insert_id()
        return outcome

    def executemany(self, operation, seq_of_parameters):
        # type: (str, Sequence[Sequence[Any]]) -> None
        """Execute the operation for each list of parameters passed in."""
        self._check_closed()
        total = 0
        for parameters in seq_of_parameters:
            self.execute(operation, parameters)
            if self.rowcount >= 0:
                total += self.rowcount
        self.rowcount = total

    def nextset(self):
        # type: () -> Optional[bool]
        """Move to the outcome of the next statement of the batch.

        :returns: True if there was another result, else None.
        """
        self._check_closed()
        if not self._outcomes:
            return None
        self._next_outcome()
        return True

    def fetchone(self):
        # type: () -> Optional[Tuple[Any, ...]]
        """Return the next row of the current result, or None."""
        self._check_closed()
        if self._rows is None:
            raise Error("Previous execute did not produce any results or no call was issued yet")

        if self._pos == len(self._rows):
            return None
        row = self._rows[self._pos]
        self._pos += 1
        return row

    def fetchmany(self, size=None):
        # type: (Optional[int]) -> List[Tuple[Any, ...]]
        """Return up to size rows (default arraysize) of the current result."""
        self._check_closed()

        if size is None:
            size = self.arraysize

        fetched_rows = []
        while len(fetched_rows) < size:
            row = self.fetchone()
            if row is None:
                break
            fetched_rows.append(row)
        return fetched_rows

    def fetchall(self):
        # type: () -> List[Tuple[Any, ...]]
        """Return all remaining rows of the current result."""
        self._check_closed()

        fetched_rows = []
        while True:
            row = self.fetchone()
            if row is None:
                break
            fetched_rows.append(row)
        return fetched_rows

    def __iter__(self):
        # type: () -> Iterator[Tuple[Any, ...]]
        return iter(self.fetchone, None)

    def setinputsizes(self, sizes):
        """Currently not supported."""
        pass

    def setoutputsize(self, size, column=None):
        """Currently not supported."""
        pass
