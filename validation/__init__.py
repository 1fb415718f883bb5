"""Reference table validation."""

from validation.schema_validator import ReferenceSchemaValidator, validate_reference

__all__ = ["ReferenceSchemaValidator", "validate_reference"]
