"""Batch orchestrator for concurrent XML-to-JSON conversion.

Runs every (input, output) pair through discriminate -> normalize ->
serialize/validate on a bounded thread pool, appends a report entry for each
success and renders progress while the batch runs.

Item states:
    pending -> parsing -> normalizing -> serializing -> validating
            -> reporting -> reported
    any stage -> failed

A failed item never stops its siblings. An output or report write failure
cancels pending work and the ``OutputError`` propagates to the caller.
"""

import json
import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from jsonschema.exceptions import SchemaError

from pubparse.exceptions import ConfigurationError, ConversionError, OutputError
from pubparse.normalizers import normalize
from pubparse.readers import DEFAULT_READERS, ArticleReader, discriminate
from pubparse.writers import SCHEMA_DIR, schema_path_for, validate_output, write_json
from pubparse.writers.json_writer import SCHEMA_FILES
from pubparse.writers.validation import load_validator
from schemas import BatchResult, ConversionResult

from .progress import ProgressCounter, ProgressReporter
from .report import ReportLog

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 8


class BatchOrchestrator:
    """Convert many XML files to JSON with a concurrency cap.

    Attributes:
        report: Report log receiving one entry per converted file (optional)
        workers: Maximum number of files converted at once
        schema_dir: Directory holding the JSON schema documents
        show_progress: Whether to render a progress bar
        readers: Ordered readers used for format discrimination
    """

    def __init__(
        self,
        report: ReportLog | None = None,
        workers: int = DEFAULT_WORKERS,
        schema_dir: Path | None = None,
        show_progress: bool = True,
        readers: Sequence[ArticleReader] = DEFAULT_READERS,
    ):
        if workers <= 0:
            raise ConfigurationError(f"invalid number of workers: {workers}")

        cpu_count = os.cpu_count() or 1
        if workers > cpu_count:
            logger.warning(
                f"Specified {workers} workers, but only {cpu_count} CPU cores are available"
            )

        self.schema_dir = schema_dir or SCHEMA_DIR
        for filename in SCHEMA_FILES.values():
            self._load_schema(self.schema_dir / filename)

        self.report = report
        self.workers = workers
        self.show_progress = show_progress
        self.readers = readers

    def run(self, inputs: Sequence[Path], outputs: Sequence[Path]) -> BatchResult:
        """Convert every input file to its paired output file.

        Every item is attempted even when others fail. Results are collected
        in completion order, so ``BatchResult.first_error`` may differ from
        run to run when several items fail.

        Args:
            inputs: XML files to convert
            outputs: JSON files to write, paired with ``inputs`` by position

        Returns:
            BatchResult with one ConversionResult per item

        Raises:
            ConfigurationError: If the two lists differ in length
            OutputError: If an output or report write fails
        """
        if len(inputs) != len(outputs):
            raise ConfigurationError(
                f"input/output file count mismatch: {len(inputs)} inputs, "
                f"{len(outputs)} outputs"
            )

        logger.info(f"Converting {len(inputs)} file(s) with {self.workers} worker(s)")
        batch = BatchResult()
        counter = ProgressCounter()

        with ProgressReporter(counter, len(inputs), disable=not self.show_progress):
            with ThreadPoolExecutor(
                max_workers=self.workers, thread_name_prefix="pubparse-worker"
            ) as executor:
                futures = [
                    executor.submit(self.convert_file, input_path, output_path, counter)
                    for input_path, output_path in zip(inputs, outputs)
                ]
                try:
                    for future in as_completed(futures):
                        batch.results.append(future.result())
                except OutputError as e:
                    logger.error(f"Aborting batch: {e}")
                    executor.shutdown(wait=True, cancel_futures=True)
                    raise

        logger.info(
            f"Batch complete: {batch.succeeded} succeeded, {batch.failed} failed"
        )
        return batch

    def convert_file(
        self,
        input_path: Path,
        output_path: Path,
        counter: ProgressCounter | None = None,
    ) -> ConversionResult:
        """Run one file through the full pipeline.

        Raises:
            OutputError: If the output or report cannot be written
        """
        result = ConversionResult(input_path=input_path, output_path=output_path)
        try:
            result.stage = "parsing"
            article = discriminate(self._read_input(input_path), self.readers)
            result.family = article.family

            result.stage = "normalizing"
            normalize(article)

            result.stage = "serializing"
            write_json(article, output_path)

            result.stage = "validating"
            validate_output(article, output_path, schema_path_for(article, self.schema_dir))

            if self.report is not None:
                result.stage = "reporting"
                self.report.write_entry(input_path, output_path)

            result.stage = "reported"
            logger.debug(f"Converted {input_path} -> {output_path}")

        except ConversionError as e:
            if e.path is None:
                e.path = input_path
            logger.error(str(e))
            result.fail(e)
        except OutputError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error converting {input_path}")
            result.fail(
                ConversionError(str(e), stage=result.stage, path=input_path)
            )
        finally:
            if counter is not None:
                counter.increment()

        return result

    def _load_schema(self, schema_path: Path) -> None:
        if not schema_path.is_file():
            raise ConfigurationError(f"schema document not found: {schema_path}")
        try:
            load_validator(schema_path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, SchemaError) as e:
            raise ConfigurationError(f"invalid schema document {schema_path}: {e}") from e

    def _read_input(self, input_path: Path) -> bytes:
        try:
            return input_path.read_bytes()
        except OSError as e:
            raise ConversionError(
                f"cannot read input: {e}", stage="parsing", path=input_path
            ) from e
