"""Tool catalog and input schema models."""

from .catalog import CapabilityCatalog
from .models import (
    ArraySchema,
    BooleanSchema,
    CapabilityDescriptor,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)

__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "CapabilityCatalog",
    "CapabilityDescriptor",
    "NumberSchema",
    "ObjectSchema",
    "SchemaNode",
    "StringSchema",
]
