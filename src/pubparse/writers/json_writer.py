"""Serialize normalized articles to JSON and validate the result.

Each article family validates against one of the packaged schema documents:
PubMed citations and PubMed books share ``pubmed_json_schema.json``; PMC
full-text articles use ``pmc_json_schema.json``.
"""

import logging
from pathlib import Path

from pydantic_core import PydanticSerializationError

from pubparse.exceptions import OutputError, SchemaValidationError
from schemas import ParsedArticle

from .validation import validate_json_file

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "json_schemas"

SCHEMA_FILES = {
    "pubmed": "pubmed_json_schema.json",
    "pmc": "pmc_json_schema.json",
}


def schema_path_for(article: ParsedArticle, schema_dir: Path | None = None) -> Path:
    """Return the schema document for an article's family.

    Args:
        article: A parsed article model
        schema_dir: Directory holding the schema documents (default: packaged)
    """
    return (schema_dir or SCHEMA_DIR) / SCHEMA_FILES[article.schema_name]


def render_json(article: ParsedArticle) -> str:
    """Render an article as indented JSON using the PascalCase field names."""
    return article.model_dump_json(by_alias=True, indent=2)


def write_json(article: ParsedArticle, output_path: Path) -> None:
    """Write an article's JSON to ``output_path``, replacing any content.

    Raises:
        OutputError: If the article cannot be rendered or the file cannot be
            written
    """
    try:
        text = render_json(article)
        output_path.write_text(text, encoding="utf-8")
    except (OSError, PydanticSerializationError) as e:
        raise OutputError(
            f"failed to write JSON to {output_path}: {e}",
            stage="serializing",
            path=output_path,
        ) from e
    logger.debug(f"Wrote {len(text)} characters to {output_path}")


def serialize_and_validate(
    article: ParsedArticle,
    output_path: Path,
    schema_path: Path | None = None,
) -> None:
    """Write an article as JSON and validate the written file.

    Args:
        article: Normalized article model
        output_path: Destination JSON file
        schema_path: Schema document to validate against (default: chosen
            by the article's family)

    Raises:
        OutputError: If the file cannot be written
        SchemaValidationError: If the written JSON violates the schema
    """
    write_json(article, output_path)
    validate_output(article, output_path, schema_path)


def validate_output(
    article: ParsedArticle,
    output_path: Path,
    schema_path: Path | None = None,
) -> None:
    """Validate an already written JSON file against the article's schema.

    Raises:
        OutputError: If the file cannot be read back
        SchemaValidationError: If the JSON violates the schema
    """
    schema_path = schema_path or schema_path_for(article)
    try:
        errors = validate_json_file(output_path, schema_path)
    except OSError as e:
        raise OutputError(
            f"failed to read back {output_path} for validation: {e}",
            stage="validating",
            path=output_path,
        ) from e

    if errors:
        raise SchemaValidationError(
            f"{len(errors)} schema violation(s) against {schema_path.name}: "
            + "; ".join(errors[:5]),
            errors=errors,
            path=output_path,
        )
