"""Rich object string validation and the registry of rich object types."""

from .definitions import (
    DEFAULT_DEFINITIONS,
    ObjectDefinition,
    ParameterDefinition,
    RichObjectDefinitions,
    build_default_definitions,
)
from .validator import PLACEHOLDER_PATTERN, RichTextValidator, get_default_validator

__all__ = [
    "DEFAULT_DEFINITIONS",
    "ObjectDefinition",
    "ParameterDefinition",
    "PLACEHOLDER_PATTERN",
    "RichObjectDefinitions",
    "RichTextValidator",
    "build_default_definitions",
    "get_default_validator",
]
