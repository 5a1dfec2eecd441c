"""Shape of an SCPD document once decoded by :func:`upnpscpd.utils.xml2dict`."""
from typing import TypedDict


class Argument(TypedDict):
    name: str
    direction: str
    relatedStateVariable: str


class ArgumentList(TypedDict):
    argument: list[Argument]


class Action(TypedDict, total=False):
    name: str
    argumentList: ArgumentList | None


class ActionList(TypedDict):
    action: list[Action]


class AllowedValueList(TypedDict):
    allowedValue: list[str]


class AllowedValueRange(TypedDict, total=False):
    minimum: str
    maximum: str
    step: str


# UPnP 2.0 descriptions may qualify dataType with an extended-type attribute.
ExtendedDataType = TypedDict(
    "ExtendedDataType", {"@type": str, "#text": str}, total=False
)


StateVariable = TypedDict(
    "StateVariable",
    {
        "@sendEvents": str,
        "@multicast": str,
        "name": str,
        "dataType": "str | ExtendedDataType",
        "defaultValue": "str | None",
        "allowedValueList": "AllowedValueList | None",
        "allowedValueRange": "AllowedValueRange | None",
        "optional": None,
    },
    total=False,
)


class StateVariableList(TypedDict):
    stateVariable: list[StateVariable]


class Scpd(TypedDict, total=False):
    specVersion: dict
    actionList: ActionList | None
    serviceStateTable: StateVariableList | None


class SCPDRoot(TypedDict):
    scpd: Scpd
