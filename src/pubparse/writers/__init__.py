"""JSON serialization and schema validation."""

from .json_writer import (
    SCHEMA_DIR,
    render_json,
    schema_path_for,
    serialize_and_validate,
    validate_output,
    write_json,
)
from .validation import validate_document, validate_json_file

__all__ = [
    "SCHEMA_DIR",
    "render_json",
    "schema_path_for",
    "serialize_and_validate",
    "validate_document",
    "validate_json_file",
    "validate_output",
    "write_json",
]
