"""Command-line interface for pubparse."""

import argparse
import logging
import sys
import time
from pathlib import Path

from pubparse.paths import default_output_dir, output_paths, prepare_outputs, resolve_inputs
from pubparse.pipeline import DEFAULT_WORKERS, BatchOrchestrator, ReportLog
from pubparse.readers import PMCReader, PubmedBookReader, PubmedReader

REPORT_FILENAME = "report.tsv"

MODE_READERS = {
    "pubmed": (PubmedReader(), PubmedBookReader()),
    "pmc": (PMCReader(),),
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def convert(args: argparse.Namespace) -> int:
    """Execute the pubmed and pmc commands.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every file converted, non-zero otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if not args.input.exists():
        logger.error(f"Input path does not exist: {args.input}")
        return 1

    started = time.monotonic()
    try:
        orchestrator = BatchOrchestrator(
            workers=args.workers,
            schema_dir=args.schema_dir,
            show_progress=not args.no_progress,
            readers=MODE_READERS[args.command],
        )

        inputs = resolve_inputs(args.input)
        output_dir = (args.output or default_output_dir(args.input)).resolve()
        outputs = output_paths(inputs, args.input, output_dir)
        prepare_outputs(outputs)

        logger.info(f"Input: {args.input.resolve()}")
        logger.info(f"Output: {output_dir}")

        with ReportLog.open(output_dir / REPORT_FILENAME) as report:
            report.write_header(
                args.input.resolve(),
                output_dir,
                item_count=len(inputs),
                workers=args.workers,
                mode=args.command,
            )
            orchestrator.report = report
            batch = orchestrator.run(inputs, outputs)

        logger.info(f"Converted: {batch.succeeded}/{len(batch.results)}")
        if batch.failed:
            logger.info(f"Failed: {batch.failed}")
            logger.info(f"  First error: {batch.first_error}")
        logger.info(f"Report: {report.path}")
        logger.info(f"Elapsed: {time.monotonic() - started:.2f}s")

        return 0 if batch.ok else 1

    except Exception as e:
        logger.error(f"Conversion failed: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="pubparse",
        description="Convert PubMed and PMC XML documents to schema-validated JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    pubmed_parser = subparsers.add_parser(
        "pubmed",
        help="Convert PubMed citation and book XML to JSON",
        description="Convert PubmedArticleSet and PubmedBookArticleSet documents to JSON validated against the PubMed schema.",
    )
    pmc_parser = subparsers.add_parser(
        "pmc",
        help="Convert PMC (JATS) full-text XML to JSON",
        description="Convert JATS <article> documents from PubMed Central to JSON validated against the PMC schema.",
    )

    for command_parser in (pubmed_parser, pmc_parser):
        command_parser.add_argument(
            "-i", "--input",
            type=Path,
            required=True,
            help="XML file or directory of XML files to convert",
        )
        command_parser.add_argument(
            "-o", "--output",
            type=Path,
            default=None,
            help="Output directory (default: processed_<input dir name> beside the input)",
        )
        command_parser.add_argument(
            "--workers",
            type=int,
            default=DEFAULT_WORKERS,
            help=f"Number of files converted concurrently (default: {DEFAULT_WORKERS})",
        )
        command_parser.add_argument(
            "--schema-dir",
            type=Path,
            default=None,
            help="Directory holding pubmed_json_schema.json and pmc_json_schema.json (default: bundled schemas)",
        )
        command_parser.add_argument(
            "--no-progress",
            action="store_true",
            help="Do not render the progress bar",
        )
        command_parser.set_defaults(func=convert)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
