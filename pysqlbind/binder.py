"""Parameter binding for prepared statements.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Nullable -- A value that may be absent.
NativeBinding -- A typed buffer associated with a parameter or result column.

Exported Functions:
bind_init -- Return the NativeBinding of one typed value.
bind_array -- Return the NativeBindings for a parameter list.
"""

__all__ = ['Nullable', 'NativeBinding', 'bind_init', 'bind_array']

import array
from datetime import tzinfo  # pylint: disable=unused-import
from typing import Any, List, Optional, Sequence  # pylint: disable=unused-import

from . import datatype
from . import protocol
from .exception import InterfaceError


class Nullable(object):
    """A parameter value that may be absent.

    Callers convert their own missing-value markers (NaN, NA, ...) to an
    absent Nullable before binding.
    """

    __slots__ = ('value',)

    def __init__(self, value=None):
        # type: (Any) -> None
        self.value = value

    @property
    def isnull(self):
        # type: () -> bool
        return self.value is None

    def __eq__(self, other):
        if isinstance(other, Nullable):
            return self.value == other.value
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return 'Nullable(%r)' % (self.value,)


def is_null(value):
    # type: (Any) -> bool
    """Return True if value is one of the null sentinels."""
    return value is None or (isinstance(value, Nullable) and value.isnull)


class NativeBinding(object):
    """A typed buffer bound to a parameter or a result column.

    For fixed-width types the buffer is a single-element array, for temporal
    types a single-element list holding a NativeTime, and for text and
    binary types the raw buffer itself.  Result bindings are filled in by
    the driver on every fetch through buffer, length and is_null.
    """

    def __init__(self, buffer_type, buffer=None, is_null=False,
                 is_unsigned=False, buffer_length=0, tz_info=None):
        # type: (int, Any, bool, bool, int, Optional[tzinfo]) -> None
        self.buffer_type = buffer_type
        self.buffer = buffer
        self.is_null = is_null
        self.is_unsigned = is_unsigned
        self.buffer_length = buffer_length
        self.length = buffer_length
        self.tz_info = tz_info

    def tobytes(self):
        # type: () -> bytes
        """Return the native representation of the bound value."""
        if self.is_null or self.buffer is None:
            return b''
        rep = datatype.native_type(self.buffer_type)
        if rep.kind in (datatype.TEXT, datatype.BINARY_KIND):
            return bytes(self.buffer[:self.length])
        return datatype.wire_value(self.buffer_type, self.buffer[0],
                                   self.is_unsigned, self.tz_info)

    def __repr__(self):
        return 'NativeBinding(type=%d, is_null=%r, length=%d)' % (
            self.buffer_type, self.is_null, self.length)


def _null_binding():
    # type: () -> NativeBinding
    return NativeBinding(protocol.TYPE_NULL, None, is_null=True)


def bind_init(tag, value, tz_info=None):
    # type: (int, Any, Optional[tzinfo]) -> NativeBinding
    """Return a NativeBinding for value under the type tag.

    :raises TypeMappingError: If the tag is not mapped.
    :raises InterfaceError: If the value cannot be represented by the tag.
    """
    if is_null(value):
        return _null_binding()
    if isinstance(value, Nullable):
        value = value.value

    rep = datatype.native_type(tag)
    if rep.kind in (datatype.TEXT, datatype.BINARY_KIND):
        # Reference the caller's buffer when it is already bytes
        if isinstance(value, (bytes, bytearray, memoryview)):
            buf = value
        else:
            buf = datatype.wire_value(tag, value)
        return NativeBinding(tag, buf, buffer_length=len(buf))

    if rep.kind == datatype.TEMPORAL:
        record = datatype.to_native_time(value, tag, tz_info)
        return NativeBinding(tag, [record], buffer_length=1, tz_info=tz_info)

    if rep.kind == datatype.NULL:
        return _null_binding()

    # Validates range and type before allocating the buffer
    datatype.wire_value(tag, value)
    try:
        buf = array.array(rep.fmt, [value])
    except (TypeError, OverflowError) as e:
        raise InterfaceError('cannot bind %r as type tag %d: %s'
                             % (value, tag, e))
    return NativeBinding(tag, buf, buffer_length=1)


def bind_array(types, values, tz_info=None):
    # type: (Sequence[int], Sequence[Any], Optional[tzinfo]) -> List[NativeBinding]
    """Get the binding array for arguments passed to a prepared statement.

    :param types: The declared type tag of each parameter.
    :param values: The parameter values, in placeholder order.
    :param tz_info: Session time zone used for aware timestamps.
    :returns: One NativeBinding per parameter, in the same order.
    :raises InterfaceError: If the lengths of types and values differ.
    """
    if len(types) != len(values):
        raise InterfaceError("length mismatch: %d types for %d values"
                             % (len(types), len(values)))
    return [bind_init(tag, value, tz_info) for tag, value in zip(types, values)]
