"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

from typing import Any, Optional  # pylint: disable=unused-import

from . import protocol

__all__ = ['Warning', 'Error', 'InterfaceError', 'TypeMappingError',
           'DatabaseError', 'DataError', 'OperationalError', 'IntegrityError',
           'InternalError', 'StatementError', 'ProgrammingError',
           'NotSupportedError', 'internal_error', 'statement_error']


class Warning(Exception):  # pylint: disable=redefined-builtin
    def __init__(self, value):
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class Error(Exception):
    def __init__(self, value):
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class InterfaceError(Error):
    """Raised for misuse of the engine.

    These are detected before any driver primitive is called and never carry
    driver diagnostics.
    """

    def __init__(self, value):
        Error.__init__(self, value)


class TypeMappingError(InterfaceError):
    def __init__(self, value):
        InterfaceError.__init__(self, value)


class DatabaseError(Error):
    errno = None  # type: Optional[int]

    def __init__(self, value, errno=None):
        # type: (Any, Optional[int]) -> None
        Error.__init__(self, value)
        self.errno = errno


class DataError(DatabaseError):
    def __init__(self, value, errno=None):
        DatabaseError.__init__(self, value, errno)


class OperationalError(DatabaseError):
    def __init__(self, value, errno=None):
        DatabaseError.__init__(self, value, errno)


class IntegrityError(DatabaseError):
    def __init__(self, value, errno=None):
        DatabaseError.__init__(self, value, errno)


class InternalError(DatabaseError):
    """Raised when a connection-level driver primitive reports failure."""

    def __init__(self, value, errno=None):
        DatabaseError.__init__(self, value, errno)


class StatementError(DatabaseError):
    """Raised when a statement-level driver primitive reports failure."""

    def __init__(self, value, errno=None):
        DatabaseError.__init__(self, value, errno)


class ProgrammingError(DatabaseError):
    def __init__(self, value, errno=None):
        DatabaseError.__init__(self, value, errno)


class NotSupportedError(DatabaseError):
    def __init__(self, value, errno=None):
        DatabaseError.__init__(self, value, errno)


def _diagnostic(error_code, error_string):
    # type: (int, str) -> str
    return '%s (%d): %s' % (protocol.lookup_code(error_code),
                            error_code, error_string)


def internal_error(driver, handle, statement=False):
    # type: (Any, Any, bool) -> InternalError
    """Build an InternalError from the handle's current diagnostics.

    :param driver: The driver that owns the handle.
    :param handle: The native handle that reported the failure.
    :param statement: True if handle is a statement handle.
    """
    if statement:
        error_code = driver.stmt_errno(handle)
        error_string = driver.stmt_error(handle)
    else:
        error_code = driver.errno(handle)
        error_string = driver.error(handle)
    return InternalError(_diagnostic(error_code, error_string), error_code)


def statement_error(driver, handle):
    # type: (Any, Any) -> StatementError
    """Build a StatementError from the statement's current diagnostics.

    :param driver: The driver that owns the handle.
    :param handle: The native statement handle that reported the failure.
    """
    error_code = driver.stmt_errno(handle)
    return StatementError(_diagnostic(error_code, driver.stmt_error(handle)),
                          error_code)
