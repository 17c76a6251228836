# -*- coding: utf-8 -*-
"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime
import decimal
import struct

import pytest

from pysqlbind import datatype, protocol
from pysqlbind.exception import DataError, InterfaceError, TypeMappingError

from .mock_tzs import localize, pytz_localize, UTC, TimeZoneInfo


class TestSqlBindDataTypes(object):
    """Test the type mapping table"""

    def test_every_tag_is_mapped(self):
        for tag in (protocol.TYPE_TINY, protocol.TYPE_SHORT, protocol.TYPE_LONG,
                    protocol.TYPE_LONGLONG, protocol.TYPE_FLOAT,
                    protocol.TYPE_DOUBLE, protocol.TYPE_DATE,
                    protocol.TYPE_TIME, protocol.TYPE_DATETIME,
                    protocol.TYPE_TIMESTAMP, protocol.TYPE_NEWDECIMAL,
                    protocol.TYPE_VAR_STRING, protocol.TYPE_BLOB,
                    protocol.TYPE_NULL):
            assert datatype.native_type(tag) is datatype.TYPEMAP[tag]

    def test_unmapped_tag(self):
        with pytest.raises(TypeMappingError):
            datatype.native_type(9999)
        # A mapping failure is a misuse of the interface
        with pytest.raises(InterfaceError):
            datatype.wire_value(9999, 1)

    def test_representations(self):
        assert datatype.native_type(protocol.TYPE_LONG).fmt == 'i'
        assert datatype.native_type(protocol.TYPE_LONGLONG).fmt == 'q'
        assert datatype.native_type(protocol.TYPE_DOUBLE).kind == datatype.FLOAT
        assert datatype.native_type(protocol.TYPE_DATETIME).pytype is datetime.datetime
        assert datatype.native_type(protocol.TYPE_NEWDECIMAL).pytype is decimal.Decimal
        assert datatype.native_type(protocol.TYPE_BLOB).kind == datatype.BINARY_KIND

    def test_wire_integers(self):
        assert datatype.wire_value(protocol.TYPE_LONG, 5) == struct.pack('<i', 5)
        assert datatype.wire_value(protocol.TYPE_TINY, 200, unsigned=True) == b'\xc8'
        with pytest.raises(InterfaceError):
            datatype.wire_value(protocol.TYPE_TINY, 300)
        with pytest.raises(InterfaceError):
            datatype.wire_value(protocol.TYPE_LONG, 1.5)

    def test_wire_text(self):
        assert datatype.wire_value(protocol.TYPE_VAR_STRING, u'café') == b'caf\xc3\xa9'
        assert datatype.wire_value(protocol.TYPE_NEWDECIMAL,
                                   decimal.Decimal('12.50')) == b'12.50'
        with pytest.raises(InterfaceError):
            datatype.wire_value(protocol.TYPE_VAR_STRING, 12)

    def test_from_wire_unsigned(self):
        assert datatype.from_wire(protocol.TYPE_TINY, b'\xff') == -1
        assert datatype.from_wire(protocol.TYPE_TINY, b'\xff',
                                  protocol.UNSIGNED_FLAG) == 255
        assert datatype.from_wire(protocol.TYPE_DOUBLE,
                                  struct.pack('<d', 2.5)) == 2.5
        assert datatype.from_wire(protocol.TYPE_LONG, None) is None

    def test_from_text(self):
        assert datatype.from_text(protocol.TYPE_LONGLONG, b'42') == 42
        assert datatype.from_text(protocol.TYPE_NEWDECIMAL, b'1.50') == decimal.Decimal('1.50')
        assert datatype.from_text(protocol.TYPE_VAR_STRING, b'abc') == 'abc'
        assert datatype.from_text(protocol.TYPE_VAR_STRING, b'abc',
                                  protocol.BINARY_FLAG) == b'abc'
        assert isinstance(datatype.from_text(protocol.TYPE_BLOB, b'\x00\x01'), bytes)

    def test_from_text_temporal(self):
        assert datatype.from_text(protocol.TYPE_DATE, b'2024-01-15') == datetime.date(2024, 1, 15)
        assert datatype.from_text(protocol.TYPE_DATETIME, b'2024-01-15 10:30:00.5') == \
            datetime.datetime(2024, 1, 15, 10, 30, 0, 500000)
        assert datatype.from_text(protocol.TYPE_TIME, b'10:30:00') == datetime.time(10, 30)
        assert datatype.from_text(protocol.TYPE_TIME, b'838:59:59') == \
            datetime.timedelta(hours=838, minutes=59, seconds=59)
        assert datatype.from_text(protocol.TYPE_TIME, b'-01:02:03') == \
            -datetime.timedelta(hours=1, minutes=2, seconds=3)

    def test_zero_date(self):
        assert datatype.from_text(protocol.TYPE_DATE, b'0000-00-00') is None
        assert datatype.from_text(protocol.TYPE_DATETIME, b'0000-00-00 00:00:00') is None

    def test_invalid_temporal_text(self):
        with pytest.raises(InterfaceError):
            datatype.from_text(protocol.TYPE_DATE, b'yesterday')

    def test_invalid_calendar_dates(self):
        # zero parts and invalid days are stored by the server
        for raw in (b"2024-01-00", b"2024-00-15", b"2024-02-30"):
            with pytest.raises(DataError):
                datatype.from_text(protocol.TYPE_DATE, raw)
        with pytest.raises(DataError):
            datatype.from_text(protocol.TYPE_DATETIME, b"2024-02-30 10:30:00")
        record = datatype.NativeTime(2024, 2, 30, 0, 0, 0, 0, False,
                                     protocol.TIMESTAMP_DATE)
        with pytest.raises(DataError):
            datatype.from_wire(protocol.TYPE_DATE, datatype._TIME_RECORD.pack(*record))
        with pytest.raises(InterfaceError):
            datatype.to_native_time("10:75:00", protocol.TYPE_TIME)

    def test_native_time_naive(self):
        dt = datetime.datetime(2024, 1, 15, 10, 30)
        record = datatype.to_native_time(dt, protocol.TYPE_DATETIME)
        assert (record.year, record.month, record.day) == (2024, 1, 15)
        assert (record.hour, record.minute, record.second) == (10, 30, 0)
        assert record.time_type == protocol.TIMESTAMP_DATETIME
        assert datatype.from_native_time(record, protocol.TYPE_DATETIME) == dt

    def test_native_time_aware(self):
        dt = localize(datetime.datetime(2024, 1, 15, 10, 30), UTC)
        record = datatype.to_native_time(dt, protocol.TYPE_DATETIME,
                                         TimeZoneInfo('America/New_York'))
        assert (record.hour, record.minute) == (5, 30)

    def test_native_time_pytz(self):
        # zones built by pytz are converted the same way
        dt = pytz_localize(datetime.datetime(2024, 1, 15, 4, 30), 'America/Chicago')
        record = datatype.to_native_time(dt, protocol.TYPE_DATETIME, UTC)
        assert (record.day, record.hour, record.minute) == (15, 10, 30)

    def test_native_time_conversions(self):
        record = datatype.to_native_time('2024-01-15', protocol.TYPE_DATE)
        assert record.time_type == protocol.TIMESTAMP_DATE
        record = datatype.to_native_time(datetime.timedelta(hours=-2), protocol.TYPE_TIME)
        assert record.neg and record.hour == 2
        with pytest.raises(InterfaceError):
            datatype.to_native_time(datetime.time(1, 2), protocol.TYPE_DATE)
        with pytest.raises(InterfaceError):
            datatype.to_native_time(12, protocol.TYPE_DATETIME)

    def test_type_for_value(self):
        assert datatype.type_for_value(None) == protocol.TYPE_NULL
        assert datatype.type_for_value(True) == protocol.TYPE_TINY
        assert datatype.type_for_value(1) == protocol.TYPE_LONGLONG
        assert datatype.type_for_value(2 ** 70) == protocol.TYPE_NEWDECIMAL
        assert datatype.type_for_value(1.0) == protocol.TYPE_DOUBLE
        assert datatype.type_for_value('x') == protocol.TYPE_VAR_STRING
        assert datatype.type_for_value(b'x') == protocol.TYPE_BLOB
        assert datatype.type_for_value(datetime.datetime.now()) == protocol.TYPE_DATETIME
        assert datatype.type_for_value(datetime.date.today()) == protocol.TYPE_DATE
        assert datatype.type_for_value(datetime.time()) == protocol.TYPE_TIME
        with pytest.raises(TypeMappingError):
            datatype.type_for_value(object())

    def test_type_objects(self):
        assert datatype.STRING == protocol.TYPE_VAR_STRING
        assert datatype.NUMBER == protocol.TYPE_LONG
        assert datatype.NUMBER != protocol.TYPE_BLOB
        assert datatype.TypeObjectFromTag(protocol.TYPE_DATETIME) is datatype.DATETIME
        with pytest.raises(TypeMappingError):
            datatype.TypeObjectFromTag(9999)

    def test_binary(self):
        assert datatype.Binary('abc') == b'abc'
        assert datatype.Binary(bytearray(b'\x00\xff')) == b'\x00\xff'
