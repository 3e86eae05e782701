"""
Provider-neutral scalar type tags and host type resolution.
"""

from __future__ import annotations

import ctypes
import datetime
import decimal
import enum
import types
import typing
import uuid
from typing import Any, Mapping


class ScalarTypeTag(enum.Enum):
    """
    Storage kinds understood by every dialect's ``type_name``.
    """

    BINARY = "binary"
    STRING = "string"
    BOOLEAN = "boolean"
    BYTE = "byte"
    SBYTE = "sbyte"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    SINGLE = "single"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    GUID = "guid"
    OBJECT = "object"


SCALAR_TYPES: Mapping[type, ScalarTypeTag] = types.MappingProxyType(
    {
        object: ScalarTypeTag.BINARY,
        bytes: ScalarTypeTag.BINARY,
        bytearray: ScalarTypeTag.BINARY,
        memoryview: ScalarTypeTag.BINARY,
        str: ScalarTypeTag.STRING,
        bool: ScalarTypeTag.BOOLEAN,
        int: ScalarTypeTag.INT64,
        float: ScalarTypeTag.DOUBLE,
        decimal.Decimal: ScalarTypeTag.DECIMAL,
        datetime.datetime: ScalarTypeTag.DATETIME,
        datetime.date: ScalarTypeTag.DATETIME,
        uuid.UUID: ScalarTypeTag.GUID,
        ctypes.c_ubyte: ScalarTypeTag.BYTE,
        ctypes.c_byte: ScalarTypeTag.SBYTE,
        ctypes.c_int16: ScalarTypeTag.INT16,
        ctypes.c_uint16: ScalarTypeTag.UINT16,
        ctypes.c_int32: ScalarTypeTag.INT32,
        ctypes.c_uint32: ScalarTypeTag.UINT32,
        ctypes.c_int64: ScalarTypeTag.INT64,
        ctypes.c_uint64: ScalarTypeTag.UINT64,
        ctypes.c_float: ScalarTypeTag.SINGLE,
        ctypes.c_double: ScalarTypeTag.DOUBLE,
    }
)

_UNION_TYPES: tuple[Any, ...] = (typing.Union, types.UnionType)


def _optional_inner(tp: Any) -> Any | None:
    if typing.get_origin(tp) not in _UNION_TYPES:
        return None
    members = [arg for arg in typing.get_args(tp) if arg is not type(None)]
    if len(members) != 1:
        return None
    return members[0]


def resolve_scalar_type(tp: Any) -> ScalarTypeTag:
    """
    Map a host type to its scalar tag.

    ``Optional[T]`` (and ``T | None``) resolves like ``T``. Anything not in
    :data:`SCALAR_TYPES` falls back to :attr:`ScalarTypeTag.OBJECT`.
    """
    try:
        return SCALAR_TYPES[tp]
    except (KeyError, TypeError):
        pass

    inner = _optional_inner(tp)
    if inner is not None:
        return resolve_scalar_type(inner)

    return ScalarTypeTag.OBJECT
