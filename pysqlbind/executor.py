"""Execution of SQL text that may hold several statements.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Functions:
execute_batch -- Run SQL text and collect one outcome per statement.
unwrap -- Return the sole outcome of a single-statement batch.
"""

__all__ = ['execute_batch', 'unwrap']

import logging
from typing import Any, List, Union  # pylint: disable=unused-import

from . import protocol
from .exception import InterfaceError, internal_error
from .result_set import ResultSet, Rows, check_row_count, materialize

_log = logging.getLogger("pysqlbind")

Outcome = Union[int, Rows]


def execute_batch(connection, sql):
    # type: (Any, str) -> List[Outcome]
    """Execute SQL text and collect the outcome of every statement in it.

    Several semicolon-separated statements are accepted when the connection
    was opened with CLIENT_MULTI_STATEMENTS.  Each statement contributes
    either its materialized rows (statements producing a result set) or its
    affected-row count, in submission order.  The first failure aborts the
    batch; no partial outcome is returned.

    :type connection connection.Connection
    :raises InterfaceError: If the connection is closed, or the driver
                            reports columns but produces no result set.
    :raises InternalError: If the driver reports a failure.
    """
    driver = connection.driver
    conn = connection._connection_handle('query')

    if driver.query(conn, sql) != 0:
        raise internal_error(driver, conn)

    outcome = []  # type: List[Outcome]
    while True:
        handle = driver.store_result(conn)
        if handle is not None:
            result = connection._track(ResultSet(connection, handle))
            try:
                outcome.append(materialize(result))
            finally:
                result.close()
        elif driver.field_count(conn) == 0:
            outcome.append(check_row_count(driver.affected_rows(conn),
                                           lambda: internal_error(driver, conn)))
        else:
            raise InterfaceError("Query expected to produce results but did not.")

        status = driver.next_result(conn)
        if status == protocol.NO_MORE_RESULTS:
            break
        if status > 0:
            raise internal_error(driver, conn)
        if status != protocol.STATUS_OK:
            raise InterfaceError("next_result returned unexpected status %d"
                                 % status)

    _log.debug("batch produced %d results", len(outcome))
    return outcome


def unwrap(outcome):
    # type: (List[Outcome]) -> Union[Outcome, List[Outcome]]
    """Return the only entry of a single-statement outcome, else the list."""
    if len(outcome) == 1:
        return outcome[0]
    return outcome
