"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime
from contextlib import closing

import pytest

from pysqlbind import protocol
from pysqlbind.binder import Nullable
from pysqlbind.exception import Error, InterfaceError, ProgrammingError
from pysqlbind.exception import NotSupportedError

from . import sqlbind_base


class TestSqlBindCursor(sqlbind_base.SqlBindBase):

    def test_fetchone(self):
        with closing(self._connect()) as con:
            cursor = con.cursor()
            cursor.execute("SELECT 1")
            assert cursor.rowcount == 1
            assert cursor.description[0][0] == '1'
            assert cursor.fetchone() == (1,)
            assert cursor.fetchone() is None

    def test_nextset(self):
        with closing(self._connect()) as con:
            cursor = con.cursor()
            cursor.execute("SELECT 1; UPDATE t SET x=1; SELECT 2")
            assert cursor.fetchall() == [(1,)]

            assert cursor.nextset()
            assert cursor.rowcount == 1
            assert cursor.description is None
            with pytest.raises(Error):
                cursor.fetchone()

            assert cursor.nextset()
            assert list(cursor) == [(2,)]
            assert cursor.nextset() is None

    def test_parameters(self):
        when = datetime.datetime(2024, 1, 15, 10, 30)
        with closing(self._connect()) as con:
            cursor = con.cursor()
            cursor.execute("SELECT ?, ?, ?, ?", (5, 'x', when, Nullable()))
            assert cursor.fetchone() == (5, 'x', when, None)
            assert cursor.description[1][1] == protocol.TYPE_VAR_STRING

    def test_statement_reused(self):
        with closing(self._connect()) as con:
            cursor = con.cursor()
            cursor.execute("SELECT ?", (1,))
            cursor.execute("SELECT ?", (2,))
            assert cursor.fetchall() == [(2,)]
            assert self.driver.calls.count('stmt_prepare') == 1

            cursor.execute("SELECT ?, ?", (1, 2))
            assert self.driver.calls.count('stmt_prepare') == 2

    def test_wrong_parameter_count(self):
        with closing(self._connect()) as con:
            cursor = con.cursor()
            with pytest.raises(ProgrammingError):
                cursor.execute("SELECT ?, ?", (1,))
            assert 'stmt_execute' not in self.driver.calls

    def test_executemany(self):
        with closing(self._connect()) as con:
            cursor = con.cursor()
            cursor.executemany("INSERT INTO t VALUES (?)", [(1,), (2,), (3,)])
            assert cursor.rowcount == 3
            assert cursor.lastrowid == 3

    def test_fetchmany(self):
        with closing(self._connect()) as con:
            cursor = con.cursor()
            cursor.execute("SELECT 1")
            cursor.arraysize = 5
            assert cursor.fetchmany() == [(1,)]
            assert cursor.fetchmany(2) == []

    def test_no_results(self):
        with closing(self._connect()) as con:
            cursor = con.cursor()
            with pytest.raises(Error):
                cursor.fetchone()
            cursor.execute("UPDATE t SET x=1")
            assert cursor.rowcount == 1
            with pytest.raises(Error):
                cursor.fetchall()

    def test_callproc(self):
        with closing(self._connect()) as con:
            with pytest.raises(NotSupportedError):
                con.cursor().callproc('p')

    def test_closed(self):
        con = self._connect()
        cursor = con.cursor()
        cursor.close()
        with pytest.raises(InterfaceError):
            cursor.execute("SELECT 1")
        with pytest.raises(InterfaceError):
            cursor.close()

        cursor = con.cursor()
        con.close()
        with pytest.raises(InterfaceError):
            cursor.execute("SELECT 1")
        with pytest.raises(InterfaceError):
            cursor.fetchone()
