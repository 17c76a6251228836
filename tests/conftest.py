"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

import pytest

try:
    from typing import Any, Dict  # pylint: disable=unused-import

    CONNECT_FIXTURE = Dict[str, Any]
except ImportError:
    pass

from .fakedriver import FakeDriver

_log = logging.getLogger("pysqlbindtest")

DATABASE_NAME = 'sqlbind_test'
DBA_USER      = 'dba'
DBA_PASSWORD  = 'dba_password'


@pytest.fixture
def driver():
    # type: () -> FakeDriver
    """A fresh scripted driver for every test."""
    return FakeDriver()


@pytest.fixture
def connect_args():
    # type: () -> CONNECT_FIXTURE
    _log.info("Connecting to %s as user %s", DATABASE_NAME, DBA_USER)
    return {'database': DATABASE_NAME,
            'host': 'localhost',
            'user': DBA_USER,
            'password': DBA_PASSWORD,
            'timezone': 'UTC'}
