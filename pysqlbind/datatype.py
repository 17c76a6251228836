"""A module for housing the type mapping table and the datatype classes.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Binary -- Class for a Binary object
NativeTime -- The fixed temporal record exchanged with the driver.
Representation -- How values of one type tag are held natively.

Exported Functions:
native_type -- Return the Representation of a type tag.
wire_value -- Convert a value to the bytes bound for a type tag.
from_wire -- Convert a binary-protocol column buffer to a Python value.
from_text -- Convert a text-protocol column value to a Python value.
to_native_time -- Convert a date/time value to a NativeTime record.
from_native_time -- Convert a NativeTime record to a date/time value.
type_for_value -- Guess the type tag for a Python value.
DateFromTicks -- Converts ticks to a Date object.
TimeFromTicks -- Converts ticks to a Time object.
TimestampFromTicks -- Converts ticks to a Timestamp object.
TypeObjectFromTag -- Converts a column type tag to a TypeObject variable.

TypeObject Variables:
STRING -- TypeObject(character type tags)
BINARY -- TypeObject(blob type tags)
NUMBER -- TypeObject(numeric type tags)
DATETIME -- TypeObject(temporal type tags)
ROWID -- TypeObject()
"""

__all__ = ['Date', 'Time', 'Timestamp', 'DateFromTicks', 'TimeFromTicks',
           'TimestampFromTicks', 'Binary', 'STRING', 'BINARY', 'NUMBER',
           'DATETIME', 'ROWID', 'TypeObjectFromTag']

import collections
import decimal
import re
import struct
from datetime import datetime as Timestamp, date as Date, time as Time
from datetime import timedelta as TimeDelta
from datetime import tzinfo  # pylint: disable=unused-import
from typing import Any, Optional, Union  # pylint: disable=unused-import

import tzlocal

from . import protocol
from .exception import DataError, InterfaceError, TypeMappingError

LOCALZONE = tzlocal.get_localzone()
LOCALZONE_NAME = tzlocal.get_localzone_name()

# Representation kinds
INTEGER = 'integer'
FLOAT = 'float'
TEMPORAL = 'temporal'
TEXT = 'text'
BINARY_KIND = 'binary'
NULL = 'null'

Representation = collections.namedtuple('Representation',
                                        ['kind', 'pytype', 'fmt'])

NativeTime = collections.namedtuple('NativeTime',
                                    ['year', 'month', 'day',
                                     'hour', 'minute', 'second',
                                     'second_part', 'neg', 'time_type'])

# year, month, day, hour, minute, second, second_part, neg, time_type
_TIME_RECORD = struct.Struct('<6IQ?i')

TYPEMAP = {
    protocol.TYPE_TINY: Representation(INTEGER, int, 'b'),
    protocol.TYPE_SHORT: Representation(INTEGER, int, 'h'),
    protocol.TYPE_YEAR: Representation(INTEGER, int, 'h'),
    protocol.TYPE_LONG: Representation(INTEGER, int, 'i'),
    protocol.TYPE_INT24: Representation(INTEGER, int, 'i'),
    protocol.TYPE_LONGLONG: Representation(INTEGER, int, 'q'),
    protocol.TYPE_FLOAT: Representation(FLOAT, float, 'f'),
    protocol.TYPE_DOUBLE: Representation(FLOAT, float, 'd'),
    protocol.TYPE_DATE: Representation(TEMPORAL, Date, None),
    protocol.TYPE_NEWDATE: Representation(TEMPORAL, Date, None),
    protocol.TYPE_TIME: Representation(TEMPORAL, Time, None),
    protocol.TYPE_DATETIME: Representation(TEMPORAL, Timestamp, None),
    protocol.TYPE_TIMESTAMP: Representation(TEMPORAL, Timestamp, None),
    protocol.TYPE_DECIMAL: Representation(TEXT, decimal.Decimal, None),
    protocol.TYPE_NEWDECIMAL: Representation(TEXT, decimal.Decimal, None),
    protocol.TYPE_VARCHAR: Representation(TEXT, str, None),
    protocol.TYPE_VAR_STRING: Representation(TEXT, str, None),
    protocol.TYPE_STRING: Representation(TEXT, str, None),
    protocol.TYPE_ENUM: Representation(TEXT, str, None),
    protocol.TYPE_SET: Representation(TEXT, str, None),
    protocol.TYPE_JSON: Representation(TEXT, str, None),
    protocol.TYPE_TINY_BLOB: Representation(BINARY_KIND, bytes, None),
    protocol.TYPE_MEDIUM_BLOB: Representation(BINARY_KIND, bytes, None),
    protocol.TYPE_LONG_BLOB: Representation(BINARY_KIND, bytes, None),
    protocol.TYPE_BLOB: Representation(BINARY_KIND, bytes, None),
    protocol.TYPE_BIT: Representation(BINARY_KIND, bytes, None),
    protocol.TYPE_GEOMETRY: Representation(BINARY_KIND, bytes, None),
    protocol.TYPE_NULL: Representation(NULL, type(None), None),
}

_DATE_RE = re.compile(r'^(\d{1,4})-(\d{1,2})-(\d{1,2})$')
_DATETIME_RE = re.compile(r'^(\d{1,4})-(\d{1,2})-(\d{1,2})[T ]'
                          r'(\d{1,2}):(\d{1,2}):(\d{1,2})(?:\.(\d{1,6}))?$')
_TIME_RE = re.compile(r'^(-)?(\d{1,3}):(\d{1,2}):(\d{1,2})(?:\.(\d{1,6}))?$')


class Binary(bytes):
    """A binary string.

    If passed a string we assume it's encoded as LATIN-1, which ensures that
    the characters 0-255 are considered single-character sequences.
    """

    def __new__(cls, data):
        # type: (Union[str, bytes, bytearray, memoryview]) -> Binary
        if isinstance(data, str):
            return bytes.__new__(cls, data.encode('latin-1'))
        return bytes.__new__(cls, data)


def DateFromTicks(ticks):
    # type: (float) -> Date
    """Convert ticks to a Date object."""
    return Timestamp.fromtimestamp(ticks, LOCALZONE).date()


def TimeFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (float, tzinfo) -> Time
    """Convert ticks to a Time object."""
    # returns naive time
    return Timestamp.fromtimestamp(ticks, zoneinfo).time()


def TimestampFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (float, tzinfo) -> Timestamp
    """Convert ticks to a Timestamp object."""
    # returns timezone-aware datetime
    return Timestamp.fromtimestamp(ticks, zoneinfo)


def native_type(tag):
    # type: (int) -> Representation
    """Return how values of the type tag are represented natively.

    :raises TypeMappingError: If the tag is not in the mapping table.
    """
    rep = TYPEMAP.get(tag)
    if rep is None:
        raise TypeMappingError('unmapped type tag %r' % (tag,))
    return rep


def _time_from_delta(value):
    # type: (TimeDelta) -> NativeTime
    neg = value < TimeDelta(0)
    if neg:
        value = -value
    seconds = value.days * 86400 + value.seconds
    return NativeTime(0, 0, 0, seconds // 3600, (seconds // 60) % 60,
                      seconds % 60, value.microseconds, neg,
                      protocol.TIMESTAMP_TIME)


def _parse_temporal(value, tag):
    # type: (str, int) -> Any
    pytype = native_type(tag).pytype
    try:
        if pytype is Time:
            match = _TIME_RE.match(value)
            if match is None:
                raise ValueError(value)
            return from_native_time(_record_from_time_match(match), tag)
        if pytype is Date:
            return Date.fromisoformat(value)
        return Timestamp.fromisoformat(value)
    except (ValueError, DataError):
        raise InterfaceError('cannot convert %r to a %s value'
                             % (value, pytype.__name__))


def to_native_time(value, tag, tz_info=None):
    # type: (Any, int, Optional[tzinfo]) -> NativeTime
    """Convert a date/time value to the fixed native temporal record.

    Timezone-aware timestamps are converted to tz_info (the session time
    zone) before the zone is dropped; naive values are bound unchanged.

    :param value: A datetime, date, time, timedelta or ISO-8601 string.
    :param tag: The declared type tag of the parameter.
    :param tz_info: The session time zone.
    """
    if isinstance(value, str):
        value = _parse_temporal(value, tag)

    pytype = native_type(tag).pytype
    if isinstance(value, Timestamp):
        if value.tzinfo is not None:
            if tz_info is not None:
                value = value.astimezone(tz_info)
            value = value.replace(tzinfo=None)
        if pytype is Time:
            value = value.time()
        elif pytype is Date:
            value = value.date()
        else:
            return NativeTime(value.year, value.month, value.day,
                              value.hour, value.minute, value.second,
                              value.microsecond, False,
                              protocol.TIMESTAMP_DATETIME)

    if isinstance(value, Date):
        if pytype is Time:
            raise InterfaceError('cannot bind a date as a time value')
        time_type = (protocol.TIMESTAMP_DATE if pytype is Date
                     else protocol.TIMESTAMP_DATETIME)
        return NativeTime(value.year, value.month, value.day,
                          0, 0, 0, 0, False, time_type)

    if isinstance(value, Time):
        if pytype is not Time:
            raise InterfaceError('cannot bind a time as a date value')
        return NativeTime(0, 0, 0, value.hour, value.minute, value.second,
                          value.microsecond, False, protocol.TIMESTAMP_TIME)

    if isinstance(value, TimeDelta):
        if pytype is not Time:
            raise InterfaceError('cannot bind an interval as a date value')
        return _time_from_delta(value)

    raise InterfaceError('cannot convert %s to a temporal value'
                         % (type(value).__name__,))


def from_native_time(record, tag):
    # type: (NativeTime, int) -> Any
    """Convert a native temporal record to a Python value.

    Zero dates become None.  Times within a day become datetime.time, other
    (negative or longer) times become datetime.timedelta.

    :raises DataError: For dates with a zero or out-of-range part, which the
                       server may store but datetime cannot represent.
    """
    pytype = native_type(tag).pytype
    try:
        if pytype is Time or record.time_type == protocol.TIMESTAMP_TIME:
            if record.neg or record.hour >= 24:
                delta = TimeDelta(hours=record.hour, minutes=record.minute,
                                  seconds=record.second,
                                  microseconds=record.second_part)
                return -delta if record.neg else delta
            return Time(record.hour, record.minute, record.second,
                        record.second_part)

        if record.year == 0 and record.month == 0 and record.day == 0:
            return None
        if pytype is Date:
            return Date(record.year, record.month, record.day)
        return Timestamp(record.year, record.month, record.day,
                         record.hour, record.minute, record.second,
                         record.second_part)
    except (ValueError, OverflowError) as e:
        raise DataError("invalid %s value %04d-%02d-%02d %02d:%02d:%02d: %s"
                        % (pytype.__name__, record.year, record.month,
                           record.day, record.hour, record.minute,
                           record.second, e))


def _pack(fmt, value, tag):
    # type: (str, Any, int) -> bytes
    try:
        return struct.pack('<' + fmt, value)
    except (struct.error, TypeError, OverflowError) as e:
        raise InterfaceError('cannot bind %r as type tag %d: %s'
                             % (value, tag, e))


def wire_value(tag, value, unsigned=False, tz_info=None):
    # type: (int, Any, bool, Optional[tzinfo]) -> bytes
    """Return the native bytes bound for value under the type tag.

    :param tag: The declared type tag.
    :param value: The Python value.
    :param unsigned: Pack integers as unsigned.
    :param tz_info: Session time zone for aware timestamps.
    :raises TypeMappingError: If the tag is not mapped.
    :raises InterfaceError: If the value cannot be represented.
    """
    rep = native_type(tag)
    if rep.kind == INTEGER:
        if isinstance(value, float):
            raise InterfaceError('cannot bind %r as type tag %d' % (value, tag))
        return _pack(rep.fmt.upper() if unsigned else rep.fmt, value, tag)
    if rep.kind == FLOAT:
        return _pack(rep.fmt, value, tag)
    if rep.kind == TEMPORAL:
        if not isinstance(value, NativeTime):
            value = to_native_time(value, tag, tz_info)
        return _TIME_RECORD.pack(*value)
    if rep.kind == TEXT:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        if rep.pytype is decimal.Decimal:
            if not isinstance(value, (decimal.Decimal, int, float, str)):
                raise InterfaceError('cannot bind %r as a decimal' % (value,))
            return str(value).encode('ascii')
        if not isinstance(value, str):
            raise InterfaceError('cannot bind %s as a string'
                                 % (type(value).__name__,))
        return value.encode('utf-8')
    if rep.kind == BINARY_KIND:
        if isinstance(value, str):
            return value.encode('utf-8')
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise InterfaceError('cannot bind %s as binary data'
                                 % (type(value).__name__,))
        return bytes(value)
    return b''


def from_wire(tag, raw, flags=0):
    # type: (int, Optional[bytes], int) -> Any
    """Convert a binary-protocol column buffer into a Python value."""
    if raw is None:
        return None
    rep = native_type(tag)
    if rep.kind == INTEGER:
        fmt = rep.fmt.upper() if flags & protocol.UNSIGNED_FLAG else rep.fmt
        return struct.unpack('<' + fmt, bytes(raw))[0]
    if rep.kind == FLOAT:
        return struct.unpack('<' + rep.fmt, bytes(raw))[0]
    if rep.kind == TEMPORAL:
        return from_native_time(NativeTime(*_TIME_RECORD.unpack(bytes(raw))),
                                tag)
    return _from_bytes(rep, raw, flags)


def _from_bytes(rep, raw, flags):
    # type: (Representation, bytes, int) -> Any
    if rep.kind == TEXT:
        if rep.pytype is decimal.Decimal:
            return decimal.Decimal(bytes(raw).decode('ascii'))
        if flags & protocol.BINARY_FLAG:
            return Binary(raw)
        return bytes(raw).decode('utf-8')
    if rep.kind == BINARY_KIND:
        return Binary(raw)
    return None


def _record_from_time_match(match):
    # type: (Any) -> NativeTime
    sign, hour, minute, second, frac = match.groups()
    return NativeTime(0, 0, 0, int(hour), int(minute), int(second),
                      int((frac or '').ljust(6, '0')), sign == '-',
                      protocol.TIMESTAMP_TIME)


def _record_from_text(tag, text):
    # type: (int, str) -> NativeTime
    pytype = native_type(tag).pytype
    if pytype is Time:
        match = _TIME_RE.match(text)
        if match is None:
            raise InterfaceError('invalid time value %r' % (text,))
        return _record_from_time_match(match)

    match = _DATETIME_RE.match(text) or _DATE_RE.match(text)
    if match is None:
        raise InterfaceError('invalid date value %r' % (text,))
    parts = match.groups()
    year, month, day = (int(p) for p in parts[:3])
    if len(parts) == 3:
        return NativeTime(year, month, day, 0, 0, 0, 0, False,
                          protocol.TIMESTAMP_DATE)
    hour, minute, second = (int(p) for p in parts[3:6])
    micro = int((parts[6] or '').ljust(6, '0'))
    return NativeTime(year, month, day, hour, minute, second, micro, False,
                      protocol.TIMESTAMP_DATETIME)


def from_text(tag, raw, flags=0):
    # type: (int, Optional[bytes], int) -> Any
    """Convert a text-protocol column value into a Python value."""
    if raw is None:
        return None
    rep = native_type(tag)
    if rep.kind == INTEGER:
        return int(raw)
    if rep.kind == FLOAT:
        return float(raw)
    if rep.kind == TEMPORAL:
        return from_native_time(_record_from_text(tag, bytes(raw).decode('ascii')),
                                tag)
    return _from_bytes(rep, raw, flags)


def type_for_value(value):
    # type: (Any) -> int
    """Return the type tag a Python value is bound with by default."""
    if value is None:
        return protocol.TYPE_NULL
    if isinstance(value, bool):
        return protocol.TYPE_TINY
    if isinstance(value, int):
        if -2 ** 63 <= value < 2 ** 63:
            return protocol.TYPE_LONGLONG
        return protocol.TYPE_NEWDECIMAL
    if isinstance(value, float):
        return protocol.TYPE_DOUBLE
    if isinstance(value, decimal.Decimal):
        return protocol.TYPE_NEWDECIMAL
    if isinstance(value, str):
        return protocol.TYPE_VAR_STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return protocol.TYPE_BLOB
    if isinstance(value, Timestamp):
        return protocol.TYPE_DATETIME
    if isinstance(value, Date):
        return protocol.TYPE_DATE
    if isinstance(value, (Time, TimeDelta)):
        return protocol.TYPE_TIME
    raise TypeMappingError('no type tag for values of type %s'
                           % (type(value).__name__,))


class TypeObject(object):
    """A SQL type object."""

    def __init__(self, *values):
        self.values = values

    def __eq__(self, other):
        if isinstance(other, TypeObject):
            return self is other
        return other in self.values

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.values)


STRING = TypeObject(protocol.TYPE_VARCHAR, protocol.TYPE_VAR_STRING,
                    protocol.TYPE_STRING, protocol.TYPE_ENUM,
                    protocol.TYPE_SET, protocol.TYPE_JSON)
BINARY = TypeObject(protocol.TYPE_TINY_BLOB, protocol.TYPE_MEDIUM_BLOB,
                    protocol.TYPE_LONG_BLOB, protocol.TYPE_BLOB,
                    protocol.TYPE_BIT, protocol.TYPE_GEOMETRY)
NUMBER = TypeObject(protocol.TYPE_DECIMAL, protocol.TYPE_NEWDECIMAL,
                    protocol.TYPE_TINY, protocol.TYPE_SHORT,
                    protocol.TYPE_LONG, protocol.TYPE_INT24,
                    protocol.TYPE_LONGLONG, protocol.TYPE_FLOAT,
                    protocol.TYPE_DOUBLE, protocol.TYPE_YEAR)
DATETIME = TypeObject(protocol.TYPE_DATE, protocol.TYPE_NEWDATE,
                      protocol.TYPE_TIME, protocol.TYPE_DATETIME,
                      protocol.TYPE_TIMESTAMP)
ROWID = TypeObject()
NULLTYPE = TypeObject(protocol.TYPE_NULL)


def TypeObjectFromTag(tag):
    # type: (int) -> TypeObject
    """Return a TypeObject based on the supplied column type tag."""
    for obj in (STRING, BINARY, NUMBER, DATETIME, NULLTYPE):
        if tag in obj.values:
            return obj
    raise TypeMappingError('received unknown column type %r' % (tag,))
