from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import UnsupportedTypeError

if TYPE_CHECKING:
    from .description import StateVariable

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    IN = "in"
    OUT = "out"

    def is_in(self) -> bool:
        return self is Direction.IN

    def is_out(self) -> bool:
        return not self.is_in()


class Bool(str, Enum):
    """UPnP ``yes``/``no`` flag, kept apart from the native ``bool``."""

    YES = "yes"
    NO = "no"

    def is_yes(self) -> bool:
        return self is Bool.YES


class DataType(str, Enum):
    UI1 = "ui1"
    UI2 = "ui2"
    UI4 = "ui4"
    UI8 = "ui8"
    I1 = "i1"
    I2 = "i2"
    I4 = "i4"
    INT = "int"
    R4 = "r4"
    R8 = "r8"
    NUMBER = "number"
    FLOAT = "float"
    FIXED14_4 = "fixed.14.4"
    CHAR = "char"
    STRING = "string"
    DATE = "date"
    DATE_TIME = "dateTime"
    DATE_TIME_TZ = "dateTime.tz"
    TIME = "time"
    TIME_TZ = "time.tz"
    BOOLEAN = "boolean"
    BIN_BASE64 = "bin.base64"
    BIN_HEX = "bin.hex"
    URI = "uri"

    @classmethod
    def _missing_(cls, value):
        return _DATA_TYPE_ALIASES.get(value)


# Undotted spellings seen in hand-written descriptions.
_DATA_TYPE_ALIASES = {
    "fixed14_4": DataType.FIXED14_4,
    "dateTimeTz": DataType.DATE_TIME_TZ,
    "timeTz": DataType.TIME_TZ,
    "binBase64": DataType.BIN_BASE64,
    "binHex": DataType.BIN_HEX,
}


class TargetType(str, Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    CHAR = "char"
    STRING = "str"
    BOOL = "upnpscpd.Bool"
    URI = "yarl.URL"


DATA_TYPE_TARGETS: dict[DataType, TargetType] = {
    DataType.UI1: TargetType.U8,
    DataType.UI2: TargetType.U16,
    DataType.UI4: TargetType.U32,
    DataType.UI8: TargetType.U64,
    DataType.I1: TargetType.I8,
    DataType.I2: TargetType.I16,
    DataType.I4: TargetType.I32,
    DataType.INT: TargetType.I64,
    DataType.CHAR: TargetType.CHAR,
    DataType.STRING: TargetType.STRING,
    DataType.BOOLEAN: TargetType.BOOL,
    DataType.URI: TargetType.URI,
}

UNSUPPORTED_DATA_TYPES = frozenset(DataType).difference(DATA_TYPE_TARGETS)


def target_type(data_type: DataType) -> TargetType | None:
    return DATA_TYPE_TARGETS.get(data_type)


def map_state_variable(state_variable: StateVariable) -> str:
    """Name the type a generator should use for ``state_variable``.

    A variable with an allowed value list maps to its own name, since the
    generator emits a dedicated enumeration for it. Anything else maps
    through ``DATA_TYPE_TARGETS``; a data type missing from that table
    raises :class:`UnsupportedTypeError`.
    """
    if state_variable.allowed_value_list is not None:
        return state_variable.name

    target = target_type(state_variable.data_type)
    if target is None:
        logger.debug(
            "state variable %s has unsupported data type %s",
            state_variable.name,
            state_variable.data_type.value,
        )
        raise UnsupportedTypeError(state_variable.name, state_variable.data_type)
    return target.value
