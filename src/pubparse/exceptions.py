"""Custom exceptions for the conversion pipeline."""

from pathlib import Path


class PubparseError(Exception):
    """Base exception for all pubparse errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(PubparseError):
    """Raised when a batch is misconfigured before any item is processed."""

    pass


class ConversionError(PubparseError):
    """Raised when a single document cannot be converted.

    Conversion errors are local to one work item; the batch keeps going.
    """

    def __init__(
        self,
        message: str,
        stage: str,
        path: Path | str | None = None,
        *args,
        **kwargs,
    ):
        self.stage = stage
        self.path = path
        super().__init__(message, *args, **kwargs)

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.stage} failed for {self.path}: {self.message}"
        return f"{self.stage} failed: {self.message}"


class UnrecognizedFormatError(ConversionError):
    """Raised when a document matches none of the supported article families."""

    def __init__(self, message: str = "unrecognized document structure", path=None):
        super().__init__(message, stage="parsing", path=path)


class SchemaValidationError(ConversionError):
    """Raised when rendered JSON does not conform to its schema."""

    def __init__(self, message: str, errors: list[str] | None = None, path=None):
        self.errors = errors or []
        super().__init__(message, stage="validating", path=path)


class OutputError(PubparseError):
    """Raised when an output or report write fails.

    Output errors mean the sink is broken (disk full, permissions lost) and
    abort the whole batch.
    """

    def __init__(
        self,
        message: str,
        stage: str,
        path: Path | str | None = None,
        *args,
        **kwargs,
    ):
        self.stage = stage
        self.path = path
        super().__init__(message, *args, **kwargs)
