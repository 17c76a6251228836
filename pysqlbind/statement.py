"""Prepared statement lifecycle.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
from typing import Any, Iterator, List, Optional, Sequence, Tuple, Union  # pylint: disable=unused-import

from . import datatype
from .binder import NativeBinding, bind_array
from .exception import InterfaceError, internal_error, statement_error
from .result_set import Column, Rows, check_row_count, describe

_log = logging.getLogger("pysqlbind")

UNINITIALIZED = 'uninitialized'
PREPARED = 'prepared'
BOUND = 'bound'
EXECUTED = 'executed'
FETCHABLE = 'fetchable'
CLOSED = 'closed'

_LIVE = (PREPARED, BOUND, EXECUTED, FETCHABLE)
_RESULTS = (EXECUTED, FETCHABLE)


class PreparedStatement(object):
    """A SQL prepared statement.

    The statement uses the statement slot of the connection that created it;
    there is one PreparedStatement per connection.

    States: uninitialized -> prepared -> bound -> executed -> fetchable ->
    closed.  A failed prepare leaves the statement uninitialized, but error()
    still returns the driver's diagnostics.
    """

    def __init__(self, connection):
        """
        :type connection connection.Connection
        """
        self.connection = connection
        self.state = UNINITIALIZED
        self.sql = None            # type: Optional[str]
        self.param_count = 0
        self.columns = None        # type: Optional[List[Column]]
        self._params = None        # type: Optional[List[NativeBinding]]
        self._results = None       # type: Optional[List[NativeBinding]]

    @property
    def driver(self):
        return self.connection.driver

    def _check_handle(self, func):
        # type: (str) -> Any
        handle = self.connection._statement_handle()
        if handle is None:
            raise InterfaceError(func + " called with NULL statement handle.")
        return handle

    def _check_state(self, func, allowed):
        # type: (str, Sequence[str]) -> None
        if self.state not in allowed:
            raise InterfaceError("%s called on a statement that is %s."
                                 % (func, self.state))

    def _reset_results(self, handle):
        # type: (Any) -> None
        if self._results is not None:
            self._results = None
            if self.driver.stmt_free_result(handle) != 0:
                raise statement_error(self.driver, handle)

    @property
    def description(self):
        # type: () -> Optional[List[Tuple[Any, ...]]]
        return describe(self.columns or [])

    def prepare(self, sql):
        # type: (str) -> None
        """Prepare the SQL text on the statement handle.

        :raises StatementError: If the driver rejects the statement.
        """
        handle = self._check_handle('stmt_prepare')
        if self.state in _RESULTS:
            self._reset_results(handle)
        self._params = None
        self.columns = None

        if self.driver.stmt_prepare(handle, sql) != 0:
            self.state = UNINITIALIZED
            self.sql = None
            self.param_count = 0
            raise statement_error(self.driver, handle)

        self.sql = sql
        self.param_count = self.driver.stmt_param_count(handle)
        fields = self.driver.stmt_result_metadata(handle)
        if fields:
            self.columns = [Column(f) for f in fields]
        self.state = PREPARED
        _log.debug("prepared statement with %d parameters: %s",
                   self.param_count, sql)

    def bind_params(self, bindings):
        # type: (Sequence[NativeBinding]) -> None
        """Bind parameter buffers produced by bind_array()."""
        handle = self._check_handle('stmt_bind_param')
        self._check_state('stmt_bind_param', _LIVE)
        if len(bindings) != self.param_count:
            raise InterfaceError("length mismatch: statement takes %d"
                                 " parameters, %d given"
                                 % (self.param_count, len(bindings)))
        if self.state in _RESULTS:
            self._reset_results(handle)

        params = list(bindings)
        if self.driver.stmt_bind_param(handle, params) != 0:
            raise statement_error(self.driver, handle)
        self._params = params
        self.state = BOUND

    def bind(self, types, values):
        # type: (Sequence[int], Sequence[Any]) -> None
        """Convert the typed values and bind them to the statement."""
        self._check_handle('stmt_bind_param')
        self._check_state('stmt_bind_param', _LIVE)
        self.bind_params(bind_array(types, values,
                                    self.connection.timezone_info))

    def execute(self):
        # type: () -> None
        """Execute the statement with its bound parameters.

        If the statement produces rows its result buffers are bound and the
        result is stored on the client, ready for fetch().
        """
        handle = self._check_handle('stmt_execute')
        self._check_state('stmt_execute', _LIVE)
        if self.param_count and self._params is None:
            raise InterfaceError("stmt_execute called before the %d"
                                 " parameters were bound." % self.param_count)
        if self.state in _RESULTS:
            self._reset_results(handle)

        if self.driver.stmt_execute(handle) != 0:
            raise statement_error(self.driver, handle)
        self.state = EXECUTED

        fields = self.driver.stmt_result_metadata(handle)
        if not fields:
            _log.debug("executed statement: %s", self.sql)
            return

        self.columns = [Column(f) for f in fields]
        results = [NativeBinding(col.type_code, None,
                                 is_unsigned=col.unsigned,
                                 buffer_length=col.length)
                   for col in self.columns]
        if self.driver.stmt_bind_result(handle, results) != 0:
            raise statement_error(self.driver, handle)
        if self.driver.stmt_store_result(handle) != 0:
            raise statement_error(self.driver, handle)
        self._results = results
        _log.debug("executed statement with %d result columns: %s",
                   len(results), self.sql)

    def fetch(self):
        # type: () -> Optional[Tuple[Any, ...]]
        """Return the next row, or None when there are no more rows."""
        handle = self._check_handle('stmt_fetch')
        self._check_state('stmt_fetch', _RESULTS)
        if self._results is None or self.columns is None:
            raise InterfaceError("stmt_fetch called on a statement without"
                                 " a result set.")

        status = self.driver.stmt_fetch(handle)
        self.state = FETCHABLE
        if status == self.driver.fetch_no_data:
            return None
        if status != 0:
            raise statement_error(self.driver, handle)

        return tuple(None if res.is_null
                     else datatype.from_wire(col.type_code,
                                             res.buffer[:res.length],
                                             col.flags)
                     for col, res in zip(self.columns, self._results))

    def rows(self):
        # type: () -> Iterator[Tuple[Any, ...]]
        """Iterate over the remaining rows of the executed statement."""
        while True:
            row = self.fetch()
            if row is None:
                return
            yield row

    def affected_rows(self):
        # type: () -> int
        handle = self._check_handle('stmt_affected_rows')
        return check_row_count(
            self.driver.stmt_affected_rows(handle),
            lambda: internal_error(self.driver, handle, statement=True))

    def num_rows(self):
        # type: () -> int
        return self.driver.stmt_num_rows(self._check_handle('stmt_num_rows'))

    def insert_id(self):
        # type: () -> int
        return self.driver.stmt_insert_id(self._check_handle('stmt_insert_id'))

    def errno(self):
        # type: () -> int
        return self.driver.stmt_errno(self._check_handle('stmt_errno'))

    def error(self):
        # type: () -> str
        return self.driver.stmt_error(self._check_handle('stmt_error'))

    def run(self, types=None, values=None):
        # type: (Optional[Sequence[int]], Optional[Sequence[Any]]) -> Union[int, Rows]
        """Bind (optionally), execute and collect the outcome.

        :returns: The affected-row count if the statement produces no result
                  set, otherwise the materialized rows.
        """
        if types is not None or values is not None:
            self.bind(types or [], values or [])
        self.execute()
        if self._results is None:
            return self.affected_rows()
        rows = Rows(self.rows())
        rows.description = self.description
        return rows

    def close(self):
        # type: () -> None
        """Close the statement and release its handle.

        Closing a closed statement does nothing.
        """
        if self.state == CLOSED:
            return
        self.state = CLOSED
        self.sql = None
        self.param_count = 0
        self.columns = None
        self._params = None
        self._results = None
        self.connection._release_statement()
