from .datatypes import (
    DATA_TYPE_TARGETS,
    UNSUPPORTED_DATA_TYPES,
    Bool,
    DataType,
    Direction,
    TargetType,
    map_state_variable,
    target_type,
)
from .description import (
    Action,
    AllowedValueRange,
    Argument,
    ParsedScpd,
    ServiceDescription,
    StateVariable,
    parse_scpd,
    parse_service_description,
)
from .fetch import fetch
