"""Input discovery and output path derivation for batch runs."""

import logging
from pathlib import Path

from pubparse.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

INPUT_EXTENSION = ".xml"
OUTPUT_EXTENSION = ".json"
OUTPUT_DIR_PREFIX = "processed_"


def resolve_inputs(path: Path, extension: str = INPUT_EXTENSION) -> list[Path]:
    """List the input files under ``path``.

    Args:
        path: A single input file or a directory searched recursively
        extension: Required file extension, compared case-insensitively

    Returns:
        Sorted list of absolute input paths

    Raises:
        ConfigurationError: If the path is missing, a file has the wrong
            extension, or a directory holds no matching files
    """
    path = path.resolve()
    extension = "." + extension.lower().lstrip(".")

    if not path.exists():
        raise ConfigurationError(f"path does not exist: {path}")

    if path.is_file():
        if path.suffix.lower() != extension:
            raise ConfigurationError(
                f"wrong file extension: expected {extension}, got {path.suffix or '(none)'}"
            )
        return [path]

    files = sorted(
        p for p in path.rglob("*") if p.is_file() and p.suffix.lower() == extension
    )
    if not files:
        raise ConfigurationError(f"no {extension} files found in {path}")
    logger.debug(f"Found {len(files)} {extension} file(s) in {path}")
    return files


def default_output_dir(input_path: Path) -> Path:
    """Derive an output directory next to the input.

    A directory ``/data/raw`` maps to ``/data/processed_raw``; a file
    ``/data/raw/a.xml`` maps to the same place via its parent directory.
    """
    input_path = input_path.resolve()
    source_dir = input_path if input_path.is_dir() else input_path.parent
    name = source_dir.name.replace(" ", "_")
    return source_dir.parent / f"{OUTPUT_DIR_PREFIX}{name}"


def output_paths(inputs: list[Path], input_root: Path, output_dir: Path) -> list[Path]:
    """Map each input file to a ``.json`` path under ``output_dir``.

    Inputs below ``input_root`` keep their relative directory layout.
    """
    input_root = input_root.resolve()
    if input_root.is_file():
        input_root = input_root.parent

    outputs = []
    for input_path in inputs:
        try:
            relative = input_path.resolve().relative_to(input_root)
        except ValueError:
            relative = Path(input_path.name)
        outputs.append(output_dir / relative.with_suffix(OUTPUT_EXTENSION))
    return outputs


def prepare_outputs(paths: list[Path]) -> None:
    """Create every output file (and its directory) ahead of conversion.

    Raises:
        ConfigurationError: If any output location is not writable
    """
    for path in paths:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        except OSError as e:
            raise ConfigurationError(f"cannot create output file {path}: {e}") from e
