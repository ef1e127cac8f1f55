"""
Command-line interface for the Expo setup validator.

Provides commands for validating a scaffolded project and listing the
checks that will run against it.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import ConfigError, ConfigLoader
from .validation import ConfigValidator, Outcome, Report, ReportStatus

console = Console()
err_console = Console(stderr=True)

STATUS_LABELS = {
    Outcome.PASS: "[green]PASS[/green]",
    Outcome.FAIL: "[red]FAIL[/red]",
    Outcome.WARN: "[yellow]WARN[/yellow]",
}


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="expocheck")
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(ctx, debug: bool):
    """
    Expo Starter Setup Validator

    Read-only health checks for Expo + React Native + TypeScript projects.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_profile(project_dir: Path, profile: Optional[str], quiet: bool = False):
    try:
        loader = ConfigLoader(project_dir, profile).load()
    except ConfigError as e:
        err_console.print(f"[red]✗ Invalid profile: {e}[/red]")
        sys.exit(2)

    if loader.source and not quiet:
        console.print(f"Profile: [cyan]{loader.source}[/cyan]")
    return loader.profile


# ============================================================
# VALIDATE Command
# ============================================================

@cli.command()
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False),
    default=".",
)
@click.option(
    "--profile",
    "-p",
    type=click.Path(),
    envvar="EXPOCHECK_PROFILE",
    help="Validation profile YAML (or set EXPOCHECK_PROFILE)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--workers", "-w", type=click.IntRange(min=1), default=1, help="Threads used to run checks")
def validate(project_dir: str, profile: Optional[str], verbose: bool, as_json: bool, workers: int):
    """
    Validate an Expo project's configuration.

    Exits with the number of failed checks; warnings alone exit 0.
    """
    root = Path(project_dir)

    if as_json:
        active = _load_profile(root, profile, quiet=True)
        report = ConfigValidator(active, workers=workers).validate(root)
        click.echo(json.dumps(report.to_dict(), indent=2))
        sys.exit(report.exit_code)

    console.print("\n[bold blue]Expo Starter App Setup Validation[/bold blue]\n")
    console.print(f"Project: [cyan]{root.resolve()}[/cyan]")
    active = _load_profile(root, profile)
    console.print()

    report = ConfigValidator(active, workers=workers).validate(root)

    _show_results_table(report, verbose)
    _show_summary(report)

    sys.exit(report.exit_code)


def _show_results_table(report: Report, verbose: bool) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")

    for result in report.results:
        details = result.message
        if verbose and result.details:
            details += f" ({'; '.join(result.details)})"

        table.add_row(result.check_id, STATUS_LABELS[result.outcome], details)

    console.print(table)


def _show_summary(report: Report) -> None:
    console.print()

    if report.status == ReportStatus.PASSED:
        console.print(Panel.fit(
            "[green]All checks passed![/green]\n\n"
            "Your project is configured correctly.\n"
            "Run [yellow]npx expo start[/yellow] to start the development server.",
            title="Validation Summary",
            border_style="green",
        ))
    elif report.status == ReportStatus.PASSED_WITH_WARNINGS:
        console.print(Panel.fit(
            f"[yellow]Passed with {report.warning_count} warning(s)[/yellow]\n\n"
            "Your project should work but consider addressing the warnings.",
            title="Validation Summary",
            border_style="yellow",
        ))
    else:
        console.print(Panel.fit(
            f"[red]Failed with {report.error_count} error(s) and "
            f"{report.warning_count} warning(s)[/red]\n\n"
            "Please fix the errors before running the app.",
            title="Validation Summary",
            border_style="red",
        ))

    console.print(f"[dim]{report.summary()}[/dim]")


# ============================================================
# CHECKS Command
# ============================================================

@cli.command("checks")
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False),
    default=".",
)
@click.option(
    "--profile",
    "-p",
    type=click.Path(),
    envvar="EXPOCHECK_PROFILE",
    help="Validation profile YAML (or set EXPOCHECK_PROFILE)",
)
def list_checks(project_dir: str, profile: Optional[str]):
    """List the checks that validate would run."""
    active = _load_profile(Path(project_dir), profile)
    validator = ConfigValidator(active)

    table = Table(title=f"Checks ({active.name})", show_header=True, header_style="bold cyan")
    table.add_column("Check", style="cyan")
    table.add_column("Severity")
    table.add_column("Description")

    for check in validator.checks:
        table.add_row(check.id, check.severity.value, check.description)

    console.print(table)


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    cli()
