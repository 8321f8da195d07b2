from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import typer

from .. import __version__
from ..core.config import get_settings
from ..core.enums import OutputFormat
from ..core.errors import DateRangeCheckerError, OutOfRangeError
from ..core.logging_config import get_logger, setup_logging
from ..core.models import DateRange
from ..core.sources import get_source, list_sources
from ..engine.coverage import GapReport, check_coverage
from ..engine.ranges import range_to_dates
from ..scanner.filenames import scan_directory
from . import output as cli_output

app = typer.Typer(
    no_args_is_help=True,
    help=(
        "Check if a directory containing files with named date ranges is missing "
        "any dates from a given range."
    )
)

logger = get_logger(__name__)


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
    log_file: str | None = typer.Option(
        None, "--log-file", help="Also write JSON logs to this rotating file"
    ),
) -> None:
    """Configure global CLI options."""
    level = log_level or get_settings().log_level or "WARNING"
    setup_logging(json_output=json_logs, log_level=level, log_file=log_file)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": level})


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


@app.command("sources")
def sources_command() -> None:
    """List the named sources configured in configs/sources.yaml."""
    names = list_sources()
    if not names:
        cli_output.warning("No sources configured in configs/sources.yaml")
        return
    for name in names:
        cli_output.plain(name, color=cli_output.OutputColor.CYAN)


def _print_report(report: GapReport) -> None:
    if report.has_gaps:
        cli_output.plain("Missing ranges:", color=cli_output.OutputColor.RED)
        for missing in report.missing:
            cli_output.plain(missing.format(), color=cli_output.OutputColor.RED)
    else:
        cli_output.success("No missing ranges.", prefix=False)


@app.command()
def check(
    start_date: datetime = typer.Option(  # noqa: B008
        ..., "--start-date", "-s", formats=["%Y-%m-%d"], help="The range start date (YYYY-MM-DD)."
    ),
    end_date: datetime = typer.Option(  # noqa: B008
        ..., "--end-date", "-e", formats=["%Y-%m-%d"], help="The range end date (YYYY-MM-DD)."
    ),
    directory: Path | None = typer.Option(  # noqa: B008
        None,
        "--directory",
        "-d",
        help=(
            "The directory containing the files to match. Defaults to the --source directory, "
            "then DRC_DIRECTORY, then the current directory."
        ),
    ),
    extension: str | None = typer.Option(
        None,
        "--extension",
        "-x",
        help=(
            'The file extension (without dot) to match as a regular expression pattern, e.g. '
            '"^(pdf|jpe?g)$" or "db$". Matches all extensions if omitted.'
        ),
    ),  # noqa: B008
    source: str | None = typer.Option(
        None, "--source", help="Named source from configs/sources.yaml (directory + extension)"
    ),  # noqa: B008
    output_format: OutputFormat = typer.Option(  # noqa: B008
        OutputFormat.TEXT, "--format", case_sensitive=False, help="Report format: text|json"
    ),
    fail_on_gaps: bool = typer.Option(
        False, "--fail-on-gaps", help="Exit with code 1 when any dates are missing"
    ),  # noqa: B008
) -> None:
    """Report which dates in a range are not covered by any file.

    Each file name must contain two YYYY-MM-DD dates; the first and last dates found
    are the range the file covers. Files without them are ignored.
    """
    settings = get_settings()

    source_directory = None
    source_extension = None
    if source:
        s = get_source(source)
        if not s:
            cli_output.error(f"Source '{source}' not found in configs/sources.yaml")
            raise typer.Exit(code=1)
        source_directory = s.directory
        source_extension = s.extension

    scan_dir = Path(directory or source_directory or settings.directory or Path.cwd())
    pattern = extension
    if pattern is None:
        pattern = source_extension if source_extension is not None else settings.extension or ""

    try:
        requested = range_to_dates(DateRange(start=start_date, end=end_date))
    except OutOfRangeError:
        cli_output.error("The start date of the range cannot be later than the end date.")
        raise typer.Exit(code=1) from None

    try:
        scanned = scan_directory(scan_dir, pattern)
    except DateRangeCheckerError as e:
        logger.error("Directory scan failed", extra={"directory": str(scan_dir), "pattern": pattern})
        cli_output.error(str(e))
        raise typer.Exit(code=1) from e

    for f in scanned:
        if f.date_range.start > f.date_range.end:
            logger.error("File range is reversed", extra={"file_name": f.path.name})
            cli_output.error(
                f"File '{f.path.name}' has a start date later than its end date."
            )
            raise typer.Exit(code=1)

    if not scanned:
        logger.warning("No files with date ranges found", extra={"directory": str(scan_dir)})

    report = check_coverage(
        DateRange(start=requested.start, end=requested.end),
        [f.date_range for f in scanned],
    )

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _print_report(report)

    if fail_on_gaps and report.has_gaps:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
