"""The native client primitives the engine is built on.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Driver -- Interface implemented by a native client library binding.
Field -- Column metadata reported by the driver.

Handles passed to and returned from a Driver are opaque to the engine;
None stands for the native NULL pointer.  Functions documented as returning
a status return 0 on success and nonzero on failure, in which case the
diagnostics are available through errno()/error() (connection primitives)
or stmt_errno()/stmt_error() (statement primitives).
"""

__all__ = ['Driver', 'Field']

import abc
import collections
from typing import Any, List, Optional, Sequence  # pylint: disable=unused-import

from . import protocol

Field = collections.namedtuple('Field', ['name', 'table', 'type', 'length',
                                         'flags', 'decimals'])


class Driver(abc.ABC):
    """A native client library binding.

    Every primitive the engine calls is listed here once.
    """

    # Status returned by stmt_fetch() when there are no more rows
    fetch_no_data = protocol.FETCH_NO_DATA

    # Connection primitives

    @abc.abstractmethod
    def init(self):
        # type: () -> Any
        """Allocate a connection handle, or return None."""

    @abc.abstractmethod
    def options(self, conn, option, value):
        # type: (Any, int, Any) -> int
        """Set one connection option before connecting.  Returns a status."""

    @abc.abstractmethod
    def real_connect(self, conn, host, user, passwd, db, port, unix_socket,
                     client_flag):
        # type: (Any, str, str, str, str, int, Optional[str], int) -> Any
        """Connect the handle; return it, or None on failure."""

    @abc.abstractmethod
    def close(self, conn):
        # type: (Any) -> None
        """Close the connection and release the handle."""

    @abc.abstractmethod
    def query(self, conn, sql):
        # type: (Any, str) -> int
        """Send SQL text to the server.  Returns a status."""

    @abc.abstractmethod
    def store_result(self, conn):
        # type: (Any) -> Any
        """Return the current result set, or None if there is none."""

    @abc.abstractmethod
    def next_result(self, conn):
        # type: (Any) -> int
        """Advance to the next result: 0 more, -1 none left, >0 error."""

    @abc.abstractmethod
    def field_count(self, conn):
        # type: (Any) -> int
        """Number of columns of the most recent statement."""

    @abc.abstractmethod
    def affected_rows(self, conn):
        # type: (Any) -> int
        """Rows changed by the most recent statement, or 2**64 - 1."""

    @abc.abstractmethod
    def insert_id(self, conn):
        # type: (Any) -> int
        """Value generated for an AUTO_INCREMENT column."""

    @abc.abstractmethod
    def errno(self, conn):
        # type: (Any) -> int
        """Error code of the last connection-level failure."""

    @abc.abstractmethod
    def error(self, conn):
        # type: (Any) -> str
        """Error message of the last connection-level failure."""

    @abc.abstractmethod
    def real_escape_string(self, conn, to, from_):
        # type: (Any, bytearray, bytes) -> int
        """Escape from_ into to; return the length written or 2**32 - 1."""

    # Result set primitives

    @abc.abstractmethod
    def num_rows(self, res):
        # type: (Any) -> int
        """Number of rows in a stored result set."""

    @abc.abstractmethod
    def fetch_fields(self, res):
        # type: (Any) -> List[Field]
        """Column metadata of a result set."""

    @abc.abstractmethod
    def fetch_row(self, res):
        # type: (Any) -> Optional[Sequence[Optional[bytes]]]
        """Next row as text-protocol column values, or None at the end."""

    @abc.abstractmethod
    def free_result(self, res):
        # type: (Any) -> None
        """Release a result set."""

    # Statement primitives

    @abc.abstractmethod
    def stmt_init(self, conn):
        # type: (Any) -> Any
        """Allocate a statement handle, or return None."""

    @abc.abstractmethod
    def stmt_prepare(self, stmt, sql):
        # type: (Any, str) -> int
        """Prepare SQL on the statement.  Returns a status."""

    @abc.abstractmethod
    def stmt_param_count(self, stmt):
        # type: (Any) -> int
        """Number of parameter markers in the prepared statement."""

    @abc.abstractmethod
    def stmt_bind_param(self, stmt, bindings):
        # type: (Any, Sequence[Any]) -> int
        """Bind parameter buffers.  Returns a status."""

    @abc.abstractmethod
    def stmt_execute(self, stmt):
        # type: (Any) -> int
        """Execute the prepared statement.  Returns a status."""

    @abc.abstractmethod
    def stmt_result_metadata(self, stmt):
        # type: (Any) -> Optional[List[Field]]
        """Column metadata of the statement's result, or None."""

    @abc.abstractmethod
    def stmt_bind_result(self, stmt, bindings):
        # type: (Any, Sequence[Any]) -> int
        """Bind result buffers filled by stmt_fetch().  Returns a status."""

    @abc.abstractmethod
    def stmt_store_result(self, stmt):
        # type: (Any) -> int
        """Buffer the complete result on the client.  Returns a status."""

    @abc.abstractmethod
    def stmt_fetch(self, stmt):
        # type: (Any) -> int
        """Fill the result bindings with the next row.  Returns a status."""

    @abc.abstractmethod
    def stmt_affected_rows(self, stmt):
        # type: (Any) -> int
        """Rows changed by the last execution, or 2**64 - 1."""

    @abc.abstractmethod
    def stmt_num_rows(self, stmt):
        # type: (Any) -> int
        """Rows in the stored result."""

    @abc.abstractmethod
    def stmt_insert_id(self, stmt):
        # type: (Any) -> int
        """Value generated for an AUTO_INCREMENT column."""

    @abc.abstractmethod
    def stmt_errno(self, stmt):
        # type: (Any) -> int
        """Error code of the last statement-level failure."""

    @abc.abstractmethod
    def stmt_error(self, stmt):
        # type: (Any) -> str
        """Error message of the last statement-level failure."""

    @abc.abstractmethod
    def stmt_free_result(self, stmt):
        # type: (Any) -> int
        """Release the stored result of the statement.  Returns a status."""

    @abc.abstractmethod
    def stmt_close(self, stmt):
        # type: (Any) -> int
        """Close the statement and release the handle.  Returns a status."""
