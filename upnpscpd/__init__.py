from .errors import NetworkError, ParseError, ScpdError, UnsupportedTypeError
from .scpd import (
    DATA_TYPE_TARGETS,
    UNSUPPORTED_DATA_TYPES,
    Action,
    AllowedValueRange,
    Argument,
    Bool,
    DataType,
    Direction,
    ParsedScpd,
    ServiceDescription,
    StateVariable,
    TargetType,
    fetch,
    map_state_variable,
    parse_scpd,
    parse_service_description,
    target_type,
)
