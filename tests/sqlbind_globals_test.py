"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import pysqlbind

from . import sqlbind_base


class TestSqlBindGlobals(sqlbind_base.SqlBindBase):
    def test_module_globals(self):
        assert pysqlbind.apilevel == '2.0'
        assert pysqlbind.threadsafety == 1
        assert pysqlbind.paramstyle == 'qmark'

    def test_connection_exceptions(self):
        con = self._connect()
        try:
            assert con.InterfaceError is pysqlbind.InterfaceError
            assert con.InternalError is pysqlbind.InternalError
            assert con.StatementError is pysqlbind.StatementError
            assert issubclass(con.StatementError, con.DatabaseError)
            assert issubclass(con.InternalError, con.Error)
        finally:
            con.close()

    def test_error_hierarchy(self):
        assert issubclass(pysqlbind.TypeMappingError, pysqlbind.InterfaceError)
        assert not issubclass(pysqlbind.InterfaceError, pysqlbind.DatabaseError)
        err = pysqlbind.StatementError('bad', 1064)
        assert err.errno == 1064
        assert str(err) == repr('bad')
