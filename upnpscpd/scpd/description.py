from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Type, TypeVar

from ..errors import ParseError
from ..utils import strip_internal_prefix, xml2dict
from .datatypes import Bool, DataType, Direction, map_state_variable

if TYPE_CHECKING:
    from .models.service import Action as RawAction
    from .models.service import Argument as RawArgument
    from .models.service import SCPDRoot
    from .models.service import StateVariable as RawStateVariable

logger = logging.getLogger(__name__)

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

E = TypeVar("E", bound=Enum)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class AllowedValueRange:
    minimum: int = 1
    maximum: int = 1
    step: int = 1


@dataclass(frozen=True)
class StateVariable:
    raw_name: str
    data_type: DataType
    send_events_attribute: Bool = Bool.YES
    multicast: Bool = Bool.NO
    default_value: str | None = None
    allowed_value_list: tuple[str, ...] | None = None
    allowed_value_range: AllowedValueRange | None = None
    optional: bool = False

    @property
    def name(self) -> str:
        return strip_internal_prefix(self.raw_name)

    def allowed_values(self) -> tuple[str, ...] | None:
        return self.allowed_value_list

    def type_name(self) -> str:
        return map_state_variable(self)

    # Arguments of either direction share the same mapping.
    def input_type_name(self) -> str:
        return self.type_name()

    def output_type_name(self) -> str:
        return self.type_name()


@dataclass(frozen=True)
class Argument:
    name: str
    direction: Direction
    raw_related_state_variable: str

    @property
    def related_state_variable(self) -> str:
        return strip_internal_prefix(self.raw_related_state_variable)


@dataclass(frozen=True)
class Action:
    name: str
    arguments: tuple[Argument, ...] = ()

    def input_arguments(self) -> Iterator[Argument]:
        return (argument for argument in self.arguments if argument.direction.is_in())

    def output_arguments(self) -> Iterator[Argument]:
        return (argument for argument in self.arguments if argument.direction.is_out())

    def destructure(self) -> tuple[str, tuple[Argument, ...]]:
        return self.name, self.arguments


@dataclass(frozen=True)
class ParsedScpd:
    """A decoded document that has not been assigned its service urn yet."""

    state_variables: tuple[StateVariable, ...] = ()
    actions: tuple[Action, ...] = ()

    def with_urn(self, urn: str) -> ServiceDescription:
        return ServiceDescription(
            urn=urn, state_variables=self.state_variables, actions=self.actions
        )


@dataclass(frozen=True)
class ServiceDescription:
    urn: str
    state_variables: tuple[StateVariable, ...] = ()
    actions: tuple[Action, ...] = ()

    def __post_init__(self):
        if not self.urn:
            raise ParseError("a service description needs a urn", "urn")

    def state_variable(self, name: str) -> StateVariable | None:
        name = strip_internal_prefix(name)
        for state_variable in self.state_variables:
            if state_variable.name == name:
                return state_variable
        return None

    def action(self, name: str) -> Action | None:
        for action in self.actions:
            if action.name == name:
                return action
        return None

    def related_state_variable(self, argument: Argument) -> StateVariable | None:
        return self.state_variable(argument.related_state_variable)

    def destructure(
        self,
    ) -> tuple[str, tuple[StateVariable, ...], tuple[Action, ...]]:
        return self.urn, self.state_variables, self.actions


def _text(raw: dict, key: str, path: str, required: bool = False) -> str | None:
    if key not in raw:
        if required:
            raise ParseError(f"missing required element {key}", path)
        return None

    value = raw[key]
    if isinstance(value, dict):
        # element carrying attributes, e.g. <dataType type="...">string</dataType>
        value = value.get("#text")
    elif value is not None and not isinstance(value, str):
        raise ParseError(f"expected text in {key}", path)

    if value is None:
        if required:
            raise ParseError(f"empty required element {key}", path)
        return ""
    return value.strip()


def _literal(enum: Type[E], value: str, path: str) -> E:
    try:
        return enum(value)
    except ValueError:
        raise ParseError(f"unrecognized {enum.__name__} {value!r}", path) from None


def _children(raw: dict, container: str, child: str, path: str) -> list:
    value = raw.get(container)
    if value is None:
        return []
    if not isinstance(value, dict):
        raise ParseError(f"expected {child} elements", f"{path}/{container}")
    return value.get(child) or []


def _i32(raw: dict, key: str, path: str) -> int:
    text = _text(raw, key, path)
    if text is None:
        return 1
    if not INTEGER_RE.fullmatch(text):
        raise ParseError(f"{key} is not an integer: {text!r}", path)
    value = int(text)
    if not I32_MIN <= value <= I32_MAX:
        raise ParseError(f"{key} out of range: {value}", path)
    return value


def _flag(raw: dict, attribute: str, element: str, default: Bool, path: str) -> Bool:
    value = raw.get(f"@{attribute}")
    if value is None:
        value = _text(raw, element, path)
    if value is None:
        return default
    return _literal(Bool, value.strip(), path)


def _parse_allowed_value_range(raw: dict, path: str) -> AllowedValueRange | None:
    if "allowedValueRange" not in raw:
        return None
    path = f"{path}/allowedValueRange"
    value = raw["allowedValueRange"] or {}
    if not isinstance(value, dict):
        raise ParseError("expected minimum, maximum or step", path)
    return AllowedValueRange(
        minimum=_i32(value, "minimum", path),
        maximum=_i32(value, "maximum", path),
        step=_i32(value, "step", path),
    )


def _parse_state_variable(raw: RawStateVariable, path: str) -> StateVariable:
    if not isinstance(raw, dict):
        raise ParseError("expected name and dataType", path)

    allowed_value_list = None
    if "allowedValueList" in raw:
        values = _children(raw, "allowedValueList", "allowedValue", path)
        allowed_value_list = tuple(
            (value.get("#text") if isinstance(value, dict) else value) or ""
            for value in values
        )

    return StateVariable(
        raw_name=_text(raw, "name", path, required=True),
        data_type=_literal(
            DataType, _text(raw, "dataType", path, required=True), f"{path}/dataType"
        ),
        send_events_attribute=_flag(
            raw, "sendEvents", "sendEventsAttribute", Bool.YES, path
        ),
        multicast=_flag(raw, "multicast", "multicast", Bool.NO, path),
        default_value=_text(raw, "defaultValue", path),
        allowed_value_list=allowed_value_list,
        allowed_value_range=_parse_allowed_value_range(raw, path),
        optional="optional" in raw or "Optional" in raw,
    )


def _parse_argument(raw: RawArgument, path: str) -> Argument:
    if not isinstance(raw, dict):
        raise ParseError("expected name, direction and relatedStateVariable", path)
    return Argument(
        name=_text(raw, "name", path, required=True),
        direction=_literal(
            Direction, _text(raw, "direction", path, required=True), f"{path}/direction"
        ),
        raw_related_state_variable=_text(
            raw, "relatedStateVariable", path, required=True
        ),
    )


def _parse_action(raw: RawAction, path: str) -> Action:
    if not isinstance(raw, dict):
        raise ParseError("expected name", path)
    arguments = _children(raw, "argumentList", "argument", path)
    return Action(
        name=_text(raw, "name", path, required=True),
        arguments=tuple(
            _parse_argument(argument, f"{path}/argumentList/argument[{i}]")
            for i, argument in enumerate(arguments)
        ),
    )


def parse_scpd(data: str | bytes) -> ParsedScpd:
    """Decode an SCPD document into a :class:`ParsedScpd`.

    Unknown elements are ignored. Raises :class:`ParseError` when the XML is
    malformed, a required element is missing, or a ``direction``,
    ``dataType`` or yes/no flag holds an unknown literal.
    """
    info: SCPDRoot = xml2dict(data)
    if "scpd" not in info:
        raise ParseError("document has no scpd root element")
    scpd = info["scpd"] or {}
    if not isinstance(scpd, dict):
        raise ParseError("document has no scpd root element")

    state_variables = tuple(
        _parse_state_variable(raw, f"scpd/serviceStateTable/stateVariable[{i}]")
        for i, raw in enumerate(
            _children(scpd, "serviceStateTable", "stateVariable", "scpd")
        )
    )
    actions = tuple(
        _parse_action(raw, f"scpd/actionList/action[{i}]")
        for i, raw in enumerate(_children(scpd, "actionList", "action", "scpd"))
    )
    logger.debug(
        "parsed %d state variables and %d actions",
        len(state_variables),
        len(actions),
    )
    return ParsedScpd(state_variables=state_variables, actions=actions)


def parse_service_description(data: str | bytes, urn: str) -> ServiceDescription:
    return parse_scpd(data).with_urn(urn)
