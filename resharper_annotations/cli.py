"""CLI entry point — a single Click command.

    resharper-annotations [OPTIONS] REPORT

Reads an InspectCode XML report, prints one pair of GitHub Actions
annotations per warning and per error, and exits 1 when errors were found.
"""

import functools
import sys

import click

from resharper_annotations import __version__


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _verbose(message: str) -> None:
    if click.get_current_context().obj["verbose"]:
        click.echo(f"[verbose] {message}", err=True)


def _handle_report_errors(func):
    """Decorator that turns pipeline exceptions into a message and exit 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from resharper_annotations.loader import ReportReadError
        from resharper_annotations.parser import ReportParseError
        from resharper_annotations.reports.annotations import ErrorsFoundError

        try:
            return func(*args, **kwargs)
        except ReportReadError as exc:
            click.echo(f"Read error: {exc}", err=True)
            sys.exit(1)
        except ReportParseError as exc:
            click.echo(f"Parse error: {exc}", err=True)
            sys.exit(1)
        except ErrorsFoundError as exc:
            click.echo(f"Inspection failed: {exc}", err=True)
            sys.exit(1)

    return wrapper


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command()
@click.argument("report_path", metavar="REPORT")
@click.option("--verbose", is_flag=True, default=False,
              help="Print progress to stderr.")
@click.version_option(__version__, prog_name="resharper-annotations")
@click.pass_context
@_handle_report_errors
def cli(ctx: click.Context, report_path: str, verbose: bool) -> None:
    """Convert an InspectCode XML REPORT into GitHub Actions annotations."""
    from resharper_annotations.loader import read_report_text
    from resharper_annotations.parser import parse_report
    from resharper_annotations.reports.annotations import (
        build_annotations,
        check_errors,
        emit,
    )

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    _verbose(f"Reading '{report_path}'")
    report = parse_report(read_report_text(report_path))
    _verbose(
        f"Parsed {len(report.issue_types)} issue types, "
        f"{len(report.all_issues())} issues in {len(report.projects)} projects"
    )

    run = build_annotations(report)
    _verbose(f"Selected {len(run.warnings)} warnings and {len(run.errors)} errors")

    emit(run, click.echo)

    check_errors(run)


def main() -> None:
    cli(prog_name="resharper-annotations")
