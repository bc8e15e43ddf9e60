"""Per-item and per-batch conversion outcomes."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

Stage = Literal[
    "pending",
    "parsing",
    "normalizing",
    "serializing",
    "validating",
    "reporting",
    "reported",
    "failed",
]


@dataclass
class ConversionResult:
    """Outcome of converting one input file to one output file.

    Attributes:
        input_path: XML document that was read
        output_path: JSON document that was written
        family: Article family detected for the input, once known
        stage: Current stage; ends as "reported" or "failed"
        failed_stage: Stage that was running when the item failed
        error: Exception that failed the item
    """

    input_path: Path
    output_path: Path
    family: str | None = None
    stage: Stage = "pending"
    failed_stage: Stage | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.stage == "reported"

    def fail(self, error: Exception) -> None:
        self.failed_stage = getattr(error, "stage", None) or self.stage
        self.stage = "failed"
        self.error = error


@dataclass
class BatchResult:
    """Outcome of a batch, in completion order."""

    results: list[ConversionResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.stage == "failed")

    @property
    def first_error(self) -> Exception | None:
        """First failure in completion order, not submission order."""
        for result in self.results:
            if result.error is not None:
                return result.error
        return None

    @property
    def ok(self) -> bool:
        return self.first_error is None
