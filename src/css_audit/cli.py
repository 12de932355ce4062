"""CLI interface for css-audit."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from . import __version__
from .auditor import audit
from .errors import FetchError, InputNotFoundError
from .models import AuditReport, Severity, StyleSource
from .scoring import DEFAULT_THRESHOLD
from .sources import collect_from_path, collect_from_url, is_url

EXIT_BELOW_THRESHOLD = 1
EXIT_NOT_FOUND = 3
EXIT_NO_FILES = 4
EXIT_FETCH_FAILED = 5

TOP_ISSUES = 15
SELECTOR_WIDTH = 60

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

COMMANDS = ["scan", "-h", "--help", "--version"]


def make_console(no_color: bool = False, stderr: bool = False) -> Console:
    return Console(no_color=no_color, highlight=False, stderr=stderr)


def setup_logging(debug: bool, no_color: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=make_console(no_color, stderr=True), show_path=False)],
        force=True,
    )


def severity_style(severity: Severity) -> str:
    """Get Rich style for severity level."""
    return {
        Severity.INFO: "blue",
        Severity.WARNING: "yellow",
        Severity.ERROR: "red",
    }.get(severity, "white")


def severity_icon(severity: Severity) -> str:
    """Get icon for severity level."""
    return {
        Severity.INFO: "ℹ",
        Severity.WARNING: "⚠",
        Severity.ERROR: "✖",
    }.get(severity, "•")


def score_color(score: int) -> str:
    """Get color for a score value."""
    if score >= 75:
        return "green"
    elif score >= 50:
        return "yellow"
    else:
        return "red"


def score_bar(score: int, width: int = 20) -> Text:
    """Create a visual score bar."""
    filled = round((score / 100) * width)
    empty = width - filled
    color = score_color(score)

    bar = Text()
    bar.append("█" * filled, style=color)
    bar.append("░" * empty, style="dim")
    bar.append(f" {score}", style=f"bold {color}")
    bar.append("/100")
    return bar


def format_bytes(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def print_report(console: Console, report: AuditReport, verbose: bool = False) -> None:
    """Print audit report to console."""

    # Files
    console.print("[bold]Files Analyzed:[/bold]")
    for f in report.files:
        console.print(
            f"  [cyan]{f.name}[/cyan] "
            f"[dim]({format_bytes(f.size)}, {f.rules} rules, {f.selectors} selectors)[/dim]"
        )

    totals = report.totals
    console.print(
        f"\n[bold]Total:[/bold] {format_bytes(totals.size)} | "
        f"{totals.rules} rules | {totals.selectors} selectors\n"
    )

    # Scores
    table = Table(box=box.SIMPLE, show_header=False, title="Health Scores", title_justify="left")
    table.add_column("Score", style="cyan")
    table.add_column("Bar")
    scores = report.scores
    for label, value in [
        ("Overall", scores.overall),
        ("Specificity", scores.specificity),
        ("Duplicates", scores.duplicates),
        ("!important", scores.important),
        ("File Size", scores.file_size),
    ]:
        table.add_row(label, score_bar(value))
    console.print(table)

    # Issues
    if report.issues:
        counts = report.count_by_severity()
        console.print(f"[bold]Issues Found: {len(report.issues)}[/bold]")
        for severity, label in [
            (Severity.ERROR, "errors"),
            (Severity.WARNING, "warnings"),
            (Severity.INFO, "info"),
        ]:
            if counts[severity]:
                style = severity_style(severity)
                console.print(f"  [{style}]{severity_icon(severity)} {counts[severity]} {label}[/]")
        console.print()

        shown = report.issues if verbose else report.issues[:TOP_ISSUES]
        for issue in shown:
            style = severity_style(issue.severity)
            line = Text("  ")
            line.append(severity_icon(issue.severity), style=style)
            line.append(f" {issue.message}")
            console.print(line)
            console.print(
                Text(
                    f"    {issue.source_name}:{issue.source_line} | "
                    f"{issue.selector[:SELECTOR_WIDTH]}",
                    style="dim",
                )
            )
            if verbose and issue.hint:
                console.print(f"    [cyan]→ {issue.hint}[/cyan]")

        hidden = len(report.issues) - len(shown)
        if hidden > 0:
            console.print(
                f"\n  [dim]... and {hidden} more issues. "
                f"Use --verbose or --json for the full report.[/dim]"
            )
    else:
        console.print("\n[bold green]No issues found! Your CSS looks clean.[/bold green]")

    # Verdict
    color = "green" if report.passed else "red"
    console.print(f"\n[bold {color}]{report.summary}[/]\n")


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx):
    """CSS Audit - find bloat, specificity issues, and bad patterns in CSS.

    \b
    Quick start:
        css-audit styles.css
        css-audit scan ./src/styles --threshold 70
        css-audit scan --url https://example.com
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.argument("input_path", metavar="INPUT", required=False)
@click.option("--url", help="Audit the CSS of a live website")
@click.option("-t", "--threshold", default=DEFAULT_THRESHOLD, show_default=True,
              type=click.IntRange(0, 100), envvar="CSS_AUDIT_THRESHOLD",
              help="Minimum passing score")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-v", "--verbose", is_flag=True, help="Show all issues, not just the top 15")
@click.option("--timeout", default=30.0, help="Request timeout in seconds")
@click.option("--debug", is_flag=True, help="Log fetched resources")
def scan(input_path: str | None, url: str | None, threshold: int, json_output: bool,
         no_color: bool, verbose: bool, timeout: float, debug: bool):
    """Audit a CSS file, a directory of CSS files, or a URL.

    \b
    Examples:
        css-audit scan styles.css
        css-audit scan ./src/styles
        css-audit scan --url https://example.com
        css-audit scan styles.css --threshold 80 --json
    """
    setup_logging(debug, no_color)
    console = make_console(no_color)
    err = make_console(no_color, stderr=True)

    if input_path and not url and is_url(input_path):
        url, input_path = input_path, None

    sources: list[StyleSource]
    if url:
        if not json_output:
            console.print()
            console.print(Panel(f"[dim]Fetching CSS from:[/dim] {url}", title="CSS-AUDIT",
                                border_style="magenta"))
        try:
            with console.status(f"[bold blue]Fetching {url}...[/bold blue]"):
                sources = collect_from_url(url, timeout=timeout)
        except FetchError as e:
            err.print(f"[bold red]Error:[/bold red] {e}")
            sys.exit(EXIT_FETCH_FAILED)
    elif input_path:
        try:
            sources = collect_from_path(input_path)
        except InputNotFoundError as e:
            err.print(f"[bold red]Error:[/bold red] {e}")
            sys.exit(EXIT_NOT_FOUND)
        if not json_output:
            console.print()
            console.print(Panel(f"[dim]Auditing:[/dim] {Path(input_path).resolve()}",
                                title="CSS-AUDIT", border_style="magenta"))
    else:
        err.print("[bold red]Error:[/bold red] No input provided.")
        err.print("Run [cyan]css-audit --help[/cyan] for usage info.\n")
        sys.exit(EXIT_NOT_FOUND)

    try:
        report = audit(sources, threshold=threshold)
    except InputNotFoundError:
        err.print("[bold red]Error:[/bold red] No CSS files found.")
        sys.exit(EXIT_NO_FILES)

    if json_output:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(console, report, verbose=verbose)

    if not report.passed:
        sys.exit(EXIT_BELOW_THRESHOLD)


def main():
    """Entry point that handles both `css-audit PATH` and `css-audit scan PATH`."""
    args = sys.argv[1:]

    # If first arg is not a command, treat it as `scan` input/options
    if args and args[0] not in COMMANDS:
        sys.argv.insert(1, "scan")

    cli()


if __name__ == "__main__":
    main()
