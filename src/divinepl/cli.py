# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Main CLI entry point for DivinePL.

Dumb trigger: parses args, reads scripts, calls the classifier / rule
engine / prophet, renders output. No analysis logic lives here.
"""

import logging
import random
from datetime import date
from pathlib import Path
from typing import Optional

import typer

from divinepl import __version__
from divinepl.classifier import scan
from divinepl.config import ConfigError, load_config
from divinepl.loader import ScriptReadError, read_script
from divinepl.prophecy import prophesy as prophesy_notes
from divinepl.rules import HardViolation, confess as confess_statements
from divinepl.runner import JudgmentError, ScriptRunner
from divinepl.sabbath import SabbathError, check_sabbath
from divinepl.scaffold import ScaffoldError, create_project
from divinepl.schemas import Report, Severity
from divinepl.scripture import programming_guidance, search_verses
from divinepl.transform import sanctify


app = typer.Typer(
    name="divinepl",
    help="The holy programming experience: run, confess and prophesy DivinePL scripts",
    no_args_is_help=True,
)

DIVINE_TODOS = (
    "Add more comprehensive error confession throughout the codebase.",
    "Implement divine logging for better visibility into runtime behavior.",
    "Create a test suite with divine assertions to verify righteousness.",
    "Consider implementing the Holy Trinity pattern for better code organization.",
    "Add performance blessings to intensive operations.",
)
GREATNESS_CHANCE = 0.7


def _today() -> date:
    """Return the current local date."""
    return date.today()


def _fail(message: str) -> typer.Exit:
    typer.secho(f"Divine Error: {message}", fg=typer.colors.BRIGHT_RED, err=True)
    return typer.Exit(1)


def _dev_mode(ctx: typer.Context) -> bool:
    return ctx.obj.get("dev", False) if ctx.obj else False


@app.callback()
def main_callback(
    ctx: typer.Context,
    dev: bool = typer.Option(False, "--dev", help="Enable development mode (unlocks sinful operations)"),
    override_sabbath: bool = typer.Option(
        False,
        "--override-sabbath",
        help="Force work on Sunday (only together with --dev)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to commandments.config"),
):
    """Run, confess and prophesy DivinePL scripts."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        commandments = load_config(config_path)
    except (FileNotFoundError, ConfigError) as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    if commandments.sabbath_mode and ctx.invoked_subcommand not in ("version", "commandments"):
        try:
            check_sabbath(_today(), override=override_sabbath, dev_mode=dev)
        except SabbathError as e:
            typer.secho(str(e), fg=typer.colors.BRIGHT_RED, err=True)
            typer.secho(
                "The Lord commands rest on the seventh day. Try again tomorrow.",
                fg=typer.colors.YELLOW,
                err=True,
            )
            raise typer.Exit(1)

    ctx.obj = {"dev": dev, "commandments": commandments}


@app.command()
def run(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Path to the DivinePL script (.divine or .dpl file)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Narrate every statement"),
    revelation: bool = typer.Option(False, "--revelation", "-r", help="Enable Revelation Mode for deep divine insight"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for divine randomness"),
):
    """Run a DivinePL script with divine interpretation."""
    commandments = ctx.obj["commandments"]
    runner = ScriptRunner(
        dev_mode=_dev_mode(ctx),
        verbose=verbose,
        revelation=revelation or commandments.revelation_level == "deep",
        rng=random.Random(seed),
    )
    try:
        runner.run_script(path)
    except (ScriptReadError, HardViolation, JudgmentError) as e:
        raise _fail(str(e))


def render_report(report: Report) -> None:
    """Render a confession report to stdout."""
    for diagnostic in report.diagnostics:
        if diagnostic.severity is Severity.MORTAL:
            label = typer.style("Mortal Sin", fg=typer.colors.BRIGHT_RED)
        else:
            label = typer.style("Venial Sin", fg=typer.colors.YELLOW)
        typer.echo(f"{label}: {diagnostic.line_number} - {diagnostic.message}")

    if report.total == 0:
        typer.secho(
            "✝️ Your code is free from sin and ready for divine execution! ✝️",
            fg=typer.colors.GREEN,
        )
        return

    typer.secho(
        f"Found {report.total} sins in your code "
        f"({report.venial_count} venial, {report.mortal_count} mortal).",
        fg=typer.colors.YELLOW,
    )
    if report.mortal_count > 0:
        typer.secho("Mortal sins require immediate repentance before execution.", fg=typer.colors.BRIGHT_RED)
    else:
        typer.secho("Venial sins can be forgiven with minor modifications.", fg=typer.colors.YELLOW)

    typer.echo()
    typer.secho("Suggested Penance:", fg=typer.colors.BRIGHT_BLUE, underline=True)
    for line in report.penance:
        typer.echo(f"- {line}")


@app.command()
def confess(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Path to the DivinePL script to confess"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 when mortal sins are found"),
):
    """Check if a DivinePL script is free from sin (linting)."""
    if not ctx.obj["commandments"].allow_confession:
        raise _fail("Confession is not allowed by commandments.config")

    try:
        content = read_script(path)
    except ScriptReadError as e:
        raise _fail(str(e))

    report = confess_statements(scan(content).statements, content)
    typer.secho("\U0001F64F Beginning confession ritual... \U0001F64F", fg=typer.colors.BRIGHT_BLUE)
    render_report(report)

    if strict and not report.passed:
        raise typer.Exit(1)


@app.command()
def prophesy(
    path: Path = typer.Argument(..., help="Path to the DivinePL script to prophesy about"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible prophecies"),
):
    """Prophesy future TODOs and potential bugs in your DivinePL script."""
    try:
        content = read_script(path)
    except ScriptReadError as e:
        raise _fail(str(e))

    rng = random.Random(seed)
    notes = prophesy_notes(scan(content).statements, content, rng)

    typer.secho("\U0001F52E Entering prophetic vision... \U0001F52E", fg=typer.colors.BRIGHT_MAGENTA)
    typer.echo()
    typer.secho("\U0001F4DC DIVINE PROPHECIES FOR THIS CODE \U0001F4DC", fg=typer.colors.BRIGHT_MAGENTA, underline=True)
    for i, note in enumerate(notes, start=1):
        typer.echo(f"{i}. {typer.style(note.text, fg=typer.colors.BRIGHT_CYAN)}")

    typer.echo()
    typer.secho("\U0001F4CB DIVINE TODOs \U0001F4CB", fg=typer.colors.BRIGHT_YELLOW, underline=True)
    for i, todo in enumerate(DIVINE_TODOS, start=1):
        typer.echo(f"{i}. {todo}")

    typer.echo()
    typer.secho("⚡ FINAL REVELATION ⚡", fg=typer.colors.BRIGHT_YELLOW)
    if rng.random() < GREATNESS_CHANCE:
        typer.secho(
            "This codebase is destined for divine greatness, but must overcome trials of "
            "complexity and technical debt. Stay true to the righteous path of clean code "
            "and divine principles.",
            fg=typer.colors.BRIGHT_GREEN,
        )
    else:
        typer.secho(
            "Beware! This codebase walks a narrow path between salvation and damnation. "
            "Major restructuring will be required before reaching the promised land of "
            "production readiness.",
            fg=typer.colors.YELLOW,
        )


@app.command()
def bible(
    topic: str = typer.Argument(..., help="Topic to search for inspiration"),
):
    """Find scriptural inspirations for your code."""
    typer.secho("\U0001F4D6 Searching for divine guidance on...", fg=typer.colors.BRIGHT_BLUE)
    typer.secho(f"Topic: \"{topic}\"", fg=typer.colors.BRIGHT_BLUE, underline=True)
    typer.echo()

    matches = search_verses(topic)
    if len(matches) == 1 and matches[0][0] == topic.lower():
        typer.secho(f"\U0001F4DC {matches[0][1]}", fg=typer.colors.GREEN)
    elif matches:
        for key, verse in matches:
            typer.secho(f"\U0001F4DC [{key}] {verse}", fg=typer.colors.GREEN)
    else:
        typer.secho("No direct verse found for this topic.", fg=typer.colors.YELLOW)
        typer.secho(
            "Consider broadening your search or consulting the Good Book directly.",
            fg=typer.colors.YELLOW,
        )

    typer.echo()
    typer.secho("Divine Programming Guidance:", fg=typer.colors.BRIGHT_BLUE, underline=True)
    for line in programming_guidance(topic):
        typer.echo(line)


@app.command()
def new(
    name: str = typer.Argument(..., help="Name of the project"),
    template: str = typer.Option("default", "--template", "-t", help="Project template (default, miracle, or prophet)"),
):
    """Create a new DivinePL project with basic structure."""
    try:
        created = create_project(name, template)
    except ScaffoldError as e:
        raise _fail(str(e))

    typer.secho(
        f"\U0001F54A️ New DivinePL project '{name}' has been blessed with creation!",
        fg=typer.colors.GREEN,
    )
    typer.echo("Structure:")
    typer.echo(f"- {name}/")
    for rel in created:
        typer.echo(f"  |- {rel.as_posix()}")


@app.command()
def miracle(
    input_path: Path = typer.Argument(..., help="Path to the secular code file"),
    output_path: Path = typer.Argument(..., help="Path to write the divine transformation"),
):
    """Perform a miracle transformation on a secular code file."""
    try:
        content = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise _fail(f"Failed to read secular code: {e}")

    typer.secho("\U0001F54A️ Beginning miraculous transformation of secular code...", fg=typer.colors.BRIGHT_BLUE)
    for phase in range(1, 8):
        typer.echo(f"Phase {phase} of transformation... ", nl=False)
        typer.secho("✓", fg=typer.colors.GREEN)

    try:
        output_path.write_text(sanctify(content), encoding="utf-8")
    except OSError as e:
        raise _fail(f"Failed to write divine transformation: {e}")

    typer.secho("\n✨ MIRACLE COMPLETE! ✨", fg=typer.colors.BRIGHT_YELLOW)
    typer.secho(
        f"Secular code has been divinely transformed and saved to: {output_path}",
        fg=typer.colors.GREEN,
    )


@app.command()
def version():
    """Show version information."""
    typer.echo(f"divinepl version {__version__}")


# Static commands (commandments)
from divinepl.commands import commandments

app.add_typer(commandments.app, name="commandments")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
