"""JSON Schema validation of written documents."""

import json
from functools import lru_cache
from pathlib import Path

from jsonschema import Draft202012Validator


@lru_cache(maxsize=None)
def load_validator(schema_path: Path) -> Draft202012Validator:
    """Load and check a schema document, cached per path.

    Raises:
        jsonschema.SchemaError: If the schema itself is invalid
    """
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def format_violation(error) -> str:
    """Render one jsonschema error as ``"<json path>: <message>"``."""
    return f"{error.json_path}: {error.message}"


def validate_document(document, schema_path: Path) -> list[str]:
    """Return every violation of ``document`` against the schema, in path order."""
    validator = load_validator(schema_path)
    errors = sorted(validator.iter_errors(document), key=lambda e: e.json_path)
    return [format_violation(e) for e in errors]


def validate_json_file(json_path: Path, schema_path: Path) -> list[str]:
    """Validate a JSON file on disk against a schema document.

    Args:
        json_path: Path to the JSON document to check
        schema_path: Path to the JSON Schema document

    Returns:
        Violation descriptions; empty if the document conforms
    """
    document = json.loads(json_path.read_text(encoding="utf-8"))
    return validate_document(document, schema_path)
