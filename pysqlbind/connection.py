"""A module for connecting to a database through a native client driver.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Connection -- Class for a connection handle and its statement slot.

Exported Functions:
connect -- Creates a connection object.
"""

__all__ = ['apilevel', 'threadsafety', 'paramstyle', 'connect', 'Connection']

import copy
import logging
import weakref
from datetime import tzinfo  # pylint: disable=unused-import
from typing import Any, Dict, List, Mapping, Optional, Union  # pylint: disable=unused-import
from zoneinfo import ZoneInfo

from . import __version__
from . import protocol
from . import cursor
from . import executor
from .datatype import LOCALZONE_NAME
from .driver import Driver  # pylint: disable=unused-import
from .exception import InterfaceError, internal_error
from .result_set import ResultSet, Rows, check_row_count  # pylint: disable=unused-import
from .statement import PreparedStatement

_log = logging.getLogger("pysqlbind")

apilevel = "2.0"
threadsafety = 1
paramstyle = "qmark"


def connect(host=None,                                # type: Optional[str]
            user=None,                                # type: Optional[str]
            password=None,                            # type: Optional[str]
            database='',                              # type: str
            port=protocol.DEFAULT_PORT,               # type: int
            unix_socket=protocol.DEFAULT_SOCKET,      # type: Optional[str]
            client_flag=protocol.CLIENT_MULTI_STATEMENTS,  # type: int
            options=None,                             # type: Optional[Mapping[int, Any]]
            timezone=None,                            # type: Optional[str]
            driver=None                               # type: Optional[Driver]
            ):
    # type: (...) -> Connection
    """Return a new Connection object.

    :param host: Hostname of the database server.
    :param user: Username to connect with.
    :param password: Password to connect with.
    :param database: Name of the default database.
    :param port: TCP port of the server.
    :param unix_socket: Path of a local socket, or None.
    :param client_flag: Client capability flags; multi-statement SQL is
                        enabled by default.
    :param options: Mapping of option tag to value, applied before connecting.
    :param timezone: Name of the session time zone; defaults to local time.
    :param driver: The native client Driver to use.
    :returns: A new Connection object.
    """
    return Connection(host=host, user=user, password=password,
                      database=database, port=port, unix_socket=unix_socket,
                      client_flag=client_flag, options=options,
                      timezone=timezone, driver=driver)


class _Open(object):
    """State of an open connection: native handles and their metadata."""

    __slots__ = ('conn', 'stmt', 'host', 'user', 'database')

    def __init__(self, conn, stmt, host, user, database):
        # type: (Any, Any, str, str, str) -> None
        self.conn = conn
        self.stmt = stmt
        self.host = host
        self.user = user
        self.database = database


class _Closed(object):
    """State of a closed connection: holds nothing."""

    __slots__ = ()


CLOSED = _Closed()


class Connection(object):
    """An established connection with a database server.

    Public Functions:
    query -- Send SQL text without collecting its results.
    store_result -- Return the current result set of the connection.
    next_result -- Advance to the next result of a multi-statement query.
    execute -- Run SQL text and collect every result.
    prepare -- Prepare a statement in the connection's statement slot.
    execute_prepared -- Bind and run the prepared statement.
    escape -- Escape a string for use in a SQL literal.
    cursor -- Return a new Cursor object using the connection.
    commit -- Commit the current transaction.
    rollback -- Rollback any uncommitted changes.
    close -- Release the statement and the connection.

    Private Functions:
    _connection_handle -- Return the native connection or raise.
    _statement_handle -- Return the native statement or None.
    """

    # PEP 249 recommends that all exceptions be exposed as attributes in the
    # Connection object.
    from .exception import Warning, Error, InterfaceError, DatabaseError
    from .exception import OperationalError, IntegrityError, InternalError
    from .exception import ProgrammingError, NotSupportedError, StatementError

    __state = CLOSED   # type: Union[_Open, _Closed]
    __config = None    # type: Dict[str, Any]
    __statement = None  # type: Optional[PreparedStatement]

    def __init__(self, host=None,                            # type: Optional[str]
                 user=None,                                  # type: Optional[str]
                 password=None,                              # type: Optional[str]
                 database='',                                # type: str
                 port=protocol.DEFAULT_PORT,                 # type: int
                 unix_socket=protocol.DEFAULT_SOCKET,        # type: Optional[str]
                 client_flag=protocol.CLIENT_MULTI_STATEMENTS,  # type: int
                 options=None,                               # type: Optional[Mapping[int, Any]]
                 timezone=None,                              # type: Optional[str]
                 driver=None                                 # type: Optional[Driver]
                 ):
        # type: (...) -> None
        """Construct a Connection object and connect it.

        :raises InterfaceError: For missing arguments or an unknown time zone.
        :raises InternalError: If an option, the connection or the statement
                               allocation is refused by the driver.
        """
        if driver is None:
            raise InterfaceError("No driver provided.")
        if user is None:
            raise InterfaceError("No user provided.")
        if password is None:
            raise InterfaceError("No password provided.")
        if host is None:
            host = 'localhost'

        self.driver = driver
        self.__results = weakref.WeakSet()  # type: weakref.WeakSet[ResultSet]
        self.__timezone_name = self._init_local_timezone(timezone)
        self.__timezone_info = ZoneInfo(self.__timezone_name)
        self.__config = {'driver_version': __version__,
                         'host': host,
                         'user': user,
                         'database': database,
                         'port': port,
                         'unix_socket': unix_socket,
                         'client_flag': client_flag,
                         'options': copy.deepcopy(dict(options or {})),
                         'timezone': self.__timezone_name}

        conn = driver.init()
        if conn is None:
            raise InterfaceError("Failed to initialize the database client.")
        try:
            self._apply_options(conn, options)
            connected = driver.real_connect(conn, host, user, password,
                                            database, port, unix_socket,
                                            client_flag)
            if connected is None:
                raise internal_error(driver, conn)
            stmt = driver.stmt_init(connected)
            if stmt is None:
                raise internal_error(driver, connected)
        except Exception:
            driver.close(conn)
            raise

        self.__state = _Open(connected, stmt, host, user, database)
        _log.debug("connected to %s@%s:%d/%s", user, host, port, database)

    @staticmethod
    def _init_local_timezone(timezone):
        # type: (Optional[str]) -> str
        name = timezone if timezone is not None else LOCALZONE_NAME
        try:
            # fails if name is bad
            ZoneInfo(name)
        except (KeyError, LookupError, ValueError):
            raise InterfaceError('Invalid TimeZone ' + name)
        return name

    def _apply_options(self, conn, options):
        # type: (Any, Optional[Mapping[int, Any]]) -> None
        """Set each connection option; the first refusal raises."""
        for option, value in (options or {}).items():
            if self.driver.options(conn, option, value) != 0:
                raise internal_error(self.driver, conn)

    @property
    def closed(self):
        # type: () -> bool
        return isinstance(self.__state, _Closed)

    @property
    def host(self):
        # type: () -> str
        state = self.__state
        return state.host if isinstance(state, _Open) else ''

    @property
    def user(self):
        # type: () -> str
        state = self.__state
        return state.user if isinstance(state, _Open) else ''

    @property
    def database(self):
        # type: () -> str
        state = self.__state
        return state.database if isinstance(state, _Open) else ''

    @property
    def timezone_info(self):
        # type: () -> tzinfo
        """The session time zone used for timezone-aware values."""
        return self.__timezone_info

    @property
    def statement(self):
        # type: () -> Optional[PreparedStatement]
        """The statement using this connection's statement slot, if any."""
        return self.__statement

    def connection_config(self):
        # type: () -> Dict[str, Any]
        """Returns a copy of the connection configuration.

        Configuration:
          client_flag    :int:  Client capability flags
          connected      :bool: True if the connection is open
          database       :str:  Name of the default database
          driver_version :str:  Version of this package
          host           :str:  Address of the server
          options        :dict: Option tags and values applied at connect
          port           :int:  TCP port of the server
          timezone       :str:  Name of the session time zone
          unix_socket    :str:  Path of the local socket, or None
          user           :str:  Name of the connected user

        :returns: Copy of the connection config names and values.
                  Modifying these values has no effect on the connection.
        """
        config = copy.deepcopy(self.__config)
        config['connected'] = not self.closed
        return config

    def _open_state(self, func):
        # type: (str) -> _Open
        state = self.__state
        if not isinstance(state, _Open) or state.conn is None:
            raise InterfaceError(func + " called with NULL connection.")
        return state

    def _connection_handle(self, func):
        # type: (str) -> Any
        return self._open_state(func).conn

    def _statement_handle(self):
        # type: () -> Any
        state = self.__state
        return state.stmt if isinstance(state, _Open) else None

    def _release_statement(self):
        # type: () -> None
        state = self.__state
        if isinstance(state, _Open) and state.stmt is not None:
            handle, state.stmt = state.stmt, None
            # the statement handle is invalid after stmt_close, even on failure
            if self.driver.stmt_close(handle) != 0:
                _log.warning("closing statement failed: %d: %s",
                             self.driver.errno(state.conn),
                             self.driver.error(state.conn))

    def _track(self, result):
        # type: (ResultSet) -> ResultSet
        self.__results.add(result)
        return result

    def query(self, sql):
        # type: (str) -> int
        """Send SQL text to the server.

        This does not collect results or affected-row counts; use execute()
        for that.
        """
        conn = self._connection_handle('query')
        status = self.driver.query(conn, sql)
        if status != 0:
            raise internal_error(self.driver, conn)
        return status

    def store_result(self):
        # type: () -> ResultSet
        """Return the ResultSet of the statement run by query()."""
        conn = self._connection_handle('store_result')
        handle = self.driver.store_result(conn)
        if handle is None:
            raise internal_error(self.driver, conn)
        return self._track(ResultSet(self, handle))

    def next_result(self):
        # type: () -> int
        """Advance to the next result: 0 if there is one, -1 if not."""
        conn = self._connection_handle('next_result')
        status = self.driver.next_result(conn)
        if status > 0:
            raise internal_error(self.driver, conn)
        return status

    def field_count(self):
        # type: () -> int
        return self.driver.field_count(self._connection_handle('field_count'))

    def affected_rows(self):
        # type: () -> int
        conn = self._connection_handle('affected_rows')
        return check_row_count(self.driver.affected_rows(conn),
                               lambda: internal_error(self.driver, conn))

    def insert_id(self):
        # type: () -> int
        """Return the value generated for an AUTO_INCREMENT column by the
        previous INSERT or UPDATE statement.
        """
        return self.driver.insert_id(self._connection_handle('insert_id'))

    def errno(self):
        # type: () -> int
        return self.driver.errno(self._connection_handle('errno'))

    def error(self):
        # type: () -> str
        return self.driver.error(self._connection_handle('error'))

    def escape(self, value):
        # type: (str) -> str
        """Escape a string for use inside a quoted SQL literal."""
        conn = self._connection_handle('real_escape_string')
        data = value.encode('utf-8')
        output = bytearray(len(data) * 2 + 1)
        length = self.driver.real_escape_string(conn, output, data)
        if length == protocol.ESCAPE_ERROR:
            raise internal_error(self.driver, conn)
        return bytes(output[:length]).decode('utf-8')

    def execute(self, sql, unwrap=True):
        # type: (str, bool) -> Any
        """Run SQL text and collect its results.

        For multi-statement text this returns a list holding the
        affected-row count of each non-SELECT statement and the rows of
        each SELECT statement.  A single statement returns its entry alone
        unless unwrap is False.
        """
        outcome = executor.execute_batch(self, sql)
        return executor.unwrap(outcome) if unwrap else outcome

    def prepare(self, sql):
        # type: (str) -> PreparedStatement
        """Prepare SQL text in the connection's statement slot."""
        state = self._open_state('stmt_init')
        if state.stmt is None:
            stmt = self.driver.stmt_init(state.conn)
            if stmt is None:
                raise internal_error(self.driver, state.conn)
            state.stmt = stmt
        if self.__statement is None:
            self.__statement = PreparedStatement(self)
        self.__statement.prepare(sql)
        return self.__statement

    def execute_prepared(self, types=None, values=None):
        # type: (Optional[List[int]], Optional[List[Any]]) -> Union[int, Rows]
        """Execute the statement prepared with prepare().

        Parameters are passed in values; their type tags in types.
        """
        self._connection_handle('stmt_execute')
        if self.__statement is None:
            raise InterfaceError("stmt_execute called with NULL statement handle.")
        return self.__statement.run(types, values)

    def cursor(self):
        # type: () -> cursor.Cursor
        """Return a new Cursor object using the connection."""
        self._connection_handle('cursor')
        return cursor.Cursor(self)

    def commit(self):
        # type: () -> None
        """Commit the current transaction."""
        self.query('COMMIT')

    def rollback(self):
        # type: () -> None
        """Rollback any uncommitted changes."""
        self.query('ROLLBACK')

    def close(self):
        # type: () -> None
        """Release the result sets, the statement and the connection.

        Closing a closed connection does nothing.
        """
        state = self.__state
        if not isinstance(state, _Open):
            return
        try:
            for result in list(self.__results):
                result.close()
            if self.__statement is not None:
                self.__statement.close()
            self._release_statement()
        finally:
            self.__state = CLOSED
            self.__results = weakref.WeakSet()
            self.driver.close(state.conn)
            _log.debug("closed connection to %s", state.host)

    def __enter__(self):
        # Return self to allow use within the 'with' block
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # type: (Any, Any, Any) -> None
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            # Always close the connection!
            self.close()
