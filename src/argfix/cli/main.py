"""CLI entry point for argfix.

Invoked as::

    argfix [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m argfix.cli.main

Raw argument tokens are passed after ``--`` so that they reach argfix
untouched, e.g.::

    argfix route -f owner -b verbose -- --verbose --owner alice 1.2

Commands
--------
route       Split tokens into positional arguments and flag values
normalize   Reorder tokens so positional arguments come first
correct     Fix misspelled flags against the known flags
match       Rank candidates for an input by edit distance
distance    Show the edit distance between two strings
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from dataclasses import replace
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from argfix.corrector.corrector import CorrectionOutcome
    from argfix.fuzzy.match import MatchResult
    from argfix.parser.router import ParseOutcome

console = Console()
err_console = Console(stderr=True)

_FORMATS = click.Choice(["table", "json", "yaml"], case_sensitive=False)
_RAW_ARGS = {"ignore_unknown_options": True}


def _severity_color(severity_name: str) -> str:
    """Map a DiagnosticSeverity name to a Rich color string."""
    colors = {
        "ERROR": "red",
        "WARNING": "yellow",
        "INFORMATION": "blue",
        "HINT": "dim",
    }
    return colors.get(severity_name, "white")


def _emit_structured(obj: "ParseOutcome | CorrectionOutcome | MatchResult", output_format: str) -> None:
    """Write ``obj`` to stdout as JSON or YAML."""
    from argfix.serializer import OutcomeSerializer

    serializer = OutcomeSerializer()
    if output_format == "json":
        click.echo(serializer.to_json(obj))
    else:
        click.echo(serializer.to_yaml(obj), nl=False)


def _emit_correction_and_route(
    correction: "CorrectionOutcome",
    parsed: "ParseOutcome",
    output_format: str,
) -> None:
    """Write a correction and the routing of its result as one JSON or YAML document."""
    import json

    import yaml

    from argfix.serializer import OutcomeSerializer

    serializer = OutcomeSerializer()
    document = {
        "correction": serializer.to_dict(correction),
        "parsed": serializer.to_dict(parsed),
    }
    if output_format == "json":
        click.echo(json.dumps(document, indent=2, ensure_ascii=False))
    else:
        click.echo(
            yaml.safe_dump(document, sort_keys=False, allow_unicode=True, default_flow_style=False),
            nl=False,
        )


def _print_parse_outcome(outcome: "ParseOutcome", title: str) -> None:
    table = Table(title=title, show_lines=False)
    table.add_column("Flag", style="bold", min_width=10)
    table.add_column("Value")
    for name, value in outcome.flags.items():
        table.add_row(f"--{escape(name)}", escape(value) if value else "[dim](empty)[/dim]")
    if outcome.flags:
        console.print(table)
    else:
        console.print("[dim]No flags.[/dim]")
    positional = " ".join(escape(p) for p in outcome.positional) or "[dim](none)[/dim]"
    console.print(f"[bold]Positional:[/bold] {positional}")


def _flag_sets(flags: tuple[str, ...], bool_flags: tuple[str, ...]) -> tuple[list[str], list[str]]:
    """Strip dashes from user-supplied flag names; boolean flags are also known flags.

    Dashes are stripped the way the classifier strips them, so ``---x``
    registers the name ``-x``.
    """
    from argfix.lexer import strip_dashes

    known = [strip_dashes(f) for f in flags]
    bools = [strip_dashes(f) for f in bool_flags]
    return known + [b for b in bools if b not in known], bools


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="argfix")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each decision at DEBUG level")
def cli(verbose: bool) -> None:
    """Command-line argument interpretation: flag routing and typo correction."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from argfix import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]argfix[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# route command
# ---------------------------------------------------------------------------


@cli.command(name="route", context_settings=_RAW_ARGS)
@click.option("--flag", "-f", "flags", multiple=True, help="Known flag name (repeatable)")
@click.option("--bool-flag", "-b", "bool_flags", multiple=True, help="Known boolean flag name (repeatable)")
@click.option("--format", "output_format", type=_FORMATS, default="table", help="Output format")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def route_command(
    flags: tuple[str, ...],
    bool_flags: tuple[str, ...],
    output_format: str,
    args: tuple[str, ...],
) -> None:
    """Split ARGS into positional arguments and flag values.

    Unknown flags are kept as positional arguments.

    Examples:

    \b
        argfix route -f owner -- --owner alice 1.2
        argfix route -f owner -b verbose --format json -- --verbose --owner alice
    """
    from argfix.parser import parse_args_with_bool_flags

    known, bools = _flag_sets(flags, bool_flags)
    outcome = parse_args_with_bool_flags(list(args), known, bools)

    if output_format == "table":
        _print_parse_outcome(outcome, title="Routed arguments")
    else:
        _emit_structured(outcome, output_format)


# ---------------------------------------------------------------------------
# normalize command
# ---------------------------------------------------------------------------


@cli.command(name="normalize", context_settings=_RAW_ARGS)
@click.option("--flag", "-f", "flags", multiple=True, help="Known flag name (repeatable)")
@click.option("--bool-flag", "-b", "bool_flags", multiple=True, help="Known boolean flag name (repeatable)")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def normalize_command(flags: tuple[str, ...], bool_flags: tuple[str, ...], args: tuple[str, ...]) -> None:
    """Print ARGS reordered with positional arguments first, one per line."""
    from argfix.parser import normalize_args_with_bool_flags

    known, bools = _flag_sets(flags, bool_flags)
    for token in normalize_args_with_bool_flags(list(args), known, bools):
        click.echo(token)


# ---------------------------------------------------------------------------
# correct command
# ---------------------------------------------------------------------------


@cli.command(name="correct", context_settings=_RAW_ARGS)
@click.option("--flag", "-f", "flags", multiple=True, help="Known flag name (repeatable)")
@click.option("--bool-flag", "-b", "bool_flags", multiple=True, help="Known boolean flag name (repeatable)")
@click.option("--threshold", type=float, default=None, help="Auto-correct similarity threshold (default 0.7)")
@click.option("--apply", "apply_", is_flag=True, default=False, help="Route the corrected arguments as well")
@click.option("--format", "output_format", type=_FORMATS, default="table", help="Output format")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def correct_command(
    flags: tuple[str, ...],
    bool_flags: tuple[str, ...],
    threshold: float | None,
    apply_: bool,
    output_format: str,
    args: tuple[str, ...],
) -> None:
    """Fix misspelled flags in ARGS.

    Exits with status 1 when a flag is ambiguous.

    Examples:

    \b
        argfix correct -f owner -f force -f format -- --ownr alice --for
        argfix correct -f owner --apply -- --ownr alice 1.2
    """
    from argfix.config import DEFAULT_CONFIG
    from argfix.corrector import FlagCorrector, diagnose
    from argfix.errors import ArgfixError
    from argfix.parser import ArgumentRouter

    known, bools = _flag_sets(flags, bool_flags)
    try:
        config = DEFAULT_CONFIG if threshold is None else replace(DEFAULT_CONFIG, flag_threshold=threshold)
    except ArgfixError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    outcome = FlagCorrector(known, config).correct(list(args))
    diagnostics = diagnose(outcome, strict=True)

    if output_format != "table":
        if apply_:
            routed = ArgumentRouter(known, bools).parse(outcome.corrected_args)
            _emit_correction_and_route(outcome, routed, output_format)
        else:
            _emit_structured(outcome, output_format)
    else:
        if diagnostics:
            table = Table(title="Flag corrections", show_lines=True)
            table.add_column("Severity", style="bold", min_width=10)
            table.add_column("Code", min_width=8)
            table.add_column("Message")
            for d in diagnostics:
                color = _severity_color(d.severity.name)
                table.add_row(f"[{color}]{d.severity.name}[/{color}]", d.code, escape(d.message))
            console.print(table)
        else:
            console.print("[green]OK[/green] no flag corrections needed")

        console.print("[bold]Corrected:[/bold] " + " ".join(escape(a) for a in outcome.corrected_args))
        if apply_:
            _print_parse_outcome(
                ArgumentRouter(known, bools).parse(outcome.corrected_args),
                title="Routed arguments",
            )

    if any(d.is_error for d in diagnostics):
        sys.exit(1)


# ---------------------------------------------------------------------------
# match command
# ---------------------------------------------------------------------------


@cli.command(name="match")
@click.argument("text")
@click.option("--candidate", "-c", "candidates", multiple=True, required=True, help="Candidate string (repeatable)")
@click.option(
    "--preset",
    type=click.Choice(["command", "flag"], case_sensitive=False),
    default="command",
    help="Threshold preset: command (0.8) or flag (0.7)",
)
@click.option("--threshold", type=float, default=None, help="Explicit threshold; overrides --preset")
@click.option("--format", "output_format", type=_FORMATS, default="table", help="Output format")
def match_command(
    text: str,
    candidates: tuple[str, ...],
    preset: str,
    threshold: float | None,
    output_format: str,
) -> None:
    """Rank CANDIDATES for TEXT by edit distance.

    Examples:

    \b
        argfix match stauts -c status -c init -c claim
        argfix match ver -c verbose -c version --preset flag
    """
    from argfix.config import DEFAULT_CONFIG
    from argfix.errors import ArgfixError
    from argfix.fuzzy.match import match

    if threshold is None:
        threshold = DEFAULT_CONFIG.flag_threshold if preset == "flag" else DEFAULT_CONFIG.command_threshold

    try:
        result = match(text, candidates, threshold)
    except ArgfixError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if output_format != "table":
        _emit_structured(result, output_format)
        return

    if not result.found:
        console.print(f"[yellow]No match[/yellow] for {escape(text)}")
        return

    verdict = "[green]auto-correct[/green]" if result.auto_correct else "[yellow]suggest[/yellow]"
    console.print(f"[bold]Best match:[/bold] {escape(result.match)} (distance {result.distance}, {verdict})")
    if result.suggestions:
        console.print("[bold]Suggestions:[/bold] " + ", ".join(escape(s) for s in result.suggestions))


# ---------------------------------------------------------------------------
# distance command
# ---------------------------------------------------------------------------


@cli.command(name="distance")
@click.argument("a")
@click.argument("b")
def distance_command(a: str, b: str) -> None:
    """Print the Levenshtein distance between A and B."""
    from argfix.fuzzy.distance import distance

    click.echo(str(distance(a, b)))


if __name__ == "__main__":
    cli()
