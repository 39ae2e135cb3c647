"""Base Pydantic model with strict defaults for cursortools configs.

All config schemas inherit from this base to ensure consistent validation
behavior across parameter, user, environment, and internal configs.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

IntegralDtypeName = Literal[
    "int8", "int16", "int32", "int64",
    "uint8", "uint16", "uint32", "uint64",
]

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CursorToolsBaseModel(BaseModel):
    """Base model for all configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Uses Python mode (not JSON mode)
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
        str_strip_whitespace=True,# Strip whitespace from strings
    )
