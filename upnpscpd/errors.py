from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scpd.datatypes import DataType


class ScpdError(Exception):
    """Base class for every failure raised while handling a service description."""


class NetworkError(ScpdError):
    """The GET request or the body read failed."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"could not fetch {uri}: {reason}")


class ParseError(ScpdError):
    """The document does not conform to the SCPD schema."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class UnsupportedTypeError(ScpdError):
    """A state variable's data type has no target mapping."""

    def __init__(self, name: str, data_type: DataType):
        self.name = name
        self.data_type = data_type
        super().__init__(f"no target type for {name} ({data_type.value})")
