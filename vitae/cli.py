"""
Position history CLI

Prints the built-in position history and the total years of professional
experience. Arguments are accepted and ignored, including --help.

Usage:
    vitae
    python -m vitae

Environment (a local .env file is honored):
    VITAE_CAPTION     Summary caption (default: "years of professional experience")
    VITAE_LOG_LEVEL   Console log level on stderr (default: WARNING)
    VITAE_LOG_DIR     Directory for a DEBUG log file (default: no log file)
"""

import typer

from vitae.contexts.reporting.clock import current_year
from vitae.contexts.reporting.logger import _log_debug, setup_reporting_logger
from vitae.contexts.reporting.reporter import ResumeReporter, run_report
from vitae.utils.settings import load_settings

app = typer.Typer(
    help="Print the position history and total years of professional experience.",
    add_completion=False,
)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def main(ctx: typer.Context):
    """Print the position history and total years of professional experience."""
    settings = load_settings()
    log_file = setup_reporting_logger(settings)
    if log_file:
        _log_debug(f"Log file: {log_file}")
    if ctx.args:
        _log_debug(f"Ignoring arguments: {ctx.args}")

    reporter = ResumeReporter(caption=settings.report.caption, year_source=current_year)
    result = run_report(reporter)

    if not result.success:
        typer.echo(f"ERROR: {result.error}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
