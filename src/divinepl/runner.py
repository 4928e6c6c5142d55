"""
Script runner for DivinePL.

Scans a script, enforces the commandments, then narrates its faithful
execution and final judgment.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
import random
import time
from pathlib import Path
from typing import Optional, Sequence, Union

import typer

from divinepl.classifier import scan
from divinepl.loader import read_script
from divinepl.rules import check, check_covenants
from divinepl.schemas import Announcement, Statement
from divinepl.scripture import (
    CREATION_STAGES,
    DIVINE_INSPIRATIONS,
    MIRACLES,
    PRAYER_ANSWERS,
)


SALVATION_CHANCE = 0.75
REVELATION_SALVATION_CHANCE = 0.9
INSIGHT_CHANCE = 1 / 3
INTERVENTION_CHANCE = 1 / 10


class JudgmentError(Exception):
    """Raised when a script is sent to debugging purgatory."""

    pass


class ScriptRunner:
    """Interprets DivinePL scripts with divine timing."""

    def __init__(
        self,
        dev_mode: bool = False,
        verbose: bool = False,
        revelation: bool = False,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize script runner.

        Args:
            dev_mode: Permit sinful operations and survive purgatory
            verbose: Narrate every statement
            revelation: Deep insight mode (implies narration, covenant reports)
            rng: Random source for flavor text and judgment
        """
        self.dev_mode = dev_mode
        self.verbose = verbose
        self.revelation = revelation
        self.rng = rng or random.Random()
        self.logger = logging.getLogger(__name__)

    @property
    def narrating(self) -> bool:
        return self.verbose or self.revelation

    def run_script(self, path: Union[str, Path]) -> bool:
        """
        Read and run a script file.

        Returns:
            True if the script ascended to production heaven

        Raises:
            ScriptReadError: If the file cannot be read
            HardViolation: If a commandment is broken
            JudgmentError: If judged unworthy outside dev mode
        """
        content = read_script(path)
        typer.secho(
            "\U0001F54A️ DivinePL script loaded. Beginning divine interpretation...",
            fg=typer.colors.GREEN,
        )
        return self.run_text(content)

    def run_text(self, content: str) -> bool:
        """Run script text. See run_script."""
        started = time.monotonic()
        result = scan(content)

        if self.narrating:
            for _ in result.prayer_lines:
                typer.secho(self.rng.choice(PRAYER_ANSWERS), fg=typer.colors.BRIGHT_BLUE)
        for announcement in result.announcements:
            self._announce(announcement)

        for warning in check(result.statements, permissive=self.dev_mode):
            typer.secho(f"⚠️ Warning: {warning.message}", fg=typer.colors.YELLOW)

        self._report_covenants(result.statements)
        self.execute_with_faith(result.statements)
        return self.judgment_day(time.monotonic() - started)

    def _announce(self, announcement: Announcement) -> None:
        if announcement.kind == "revelation":
            typer.secho(f"\U0001F4E2 {announcement.message}", fg=typer.colors.BRIGHT_CYAN)
        else:
            typer.echo(announcement.message)

    def _report_covenants(self, statements: Sequence[Statement]) -> None:
        has_covenants = check_covenants(statements)
        if not self.revelation:
            return
        for stmt in statements:
            if stmt.is_covenant:
                typer.secho(
                    f"\U0001F4DC Covenant detected at line {stmt.line_number}: \"{stmt.text}\"",
                    fg=typer.colors.BRIGHT_CYAN,
                )
        if has_covenants:
            typer.secho(
                "\U0001F91D Divine covenants are binding. Ensure all promises resolve.",
                fg=typer.colors.BRIGHT_GREEN,
            )

    def execute_with_faith(self, statements: Sequence[Statement]) -> None:
        """Walk the seven days of creation, then perform and narrate."""
        for stage in CREATION_STAGES:
            typer.echo(f"{stage}... ", nl=False)
            typer.secho("✓", fg=typer.colors.GREEN)

        if any(stmt.is_miracle for stmt in statements):
            typer.secho("✨ Preparing to perform miracles...", fg=typer.colors.BRIGHT_YELLOW)
            miracle = self.rng.choice(MIRACLES)
            typer.secho(
                f"\U0001F31F MIRACLE PERFORMED: {miracle} \U0001F31F",
                fg=typer.colors.BRIGHT_YELLOW,
            )

        if not self.narrating:
            return

        for stmt in statements:
            if stmt.is_miracle:
                typer.echo(f"Executing miracle: {typer.style(stmt.text, fg=typer.colors.BRIGHT_YELLOW)}")
            elif stmt.has_revelation:
                typer.echo(f"Revealing: {typer.style(stmt.text, fg=typer.colors.BRIGHT_MAGENTA)}")
            elif stmt.is_covenant:
                typer.echo(f"Fulfilling covenant: {typer.style(stmt.text, fg=typer.colors.BRIGHT_CYAN)}")
            else:
                typer.echo(f"Executing: {typer.style(stmt.text, fg=typer.colors.BRIGHT_CYAN)}")

            if self.revelation and self.rng.random() < INSIGHT_CHANCE:
                category = self.rng.choice(sorted(DIVINE_INSPIRATIONS))
                insight = self.rng.choice(DIVINE_INSPIRATIONS[category])
                typer.secho(f"  \U0001F4D6 Divine insight: {insight}", fg=typer.colors.BRIGHT_BLUE)

            if self.rng.random() < INTERVENTION_CHANCE:
                typer.secho("✨ Divine intervention occurred! ✨", fg=typer.colors.YELLOW)

    def judgment_day(self, elapsed: float = 0.0) -> bool:
        """
        Judge the script.

        Returns:
            True if saved, False if sent to purgatory in dev mode

        Raises:
            JudgmentError: If sent to purgatory outside dev mode
        """
        typer.secho("\n\U0001F514 JUDGMENT DAY \U0001F514", fg=typer.colors.BRIGHT_YELLOW)
        typer.echo(f"Execution time: {elapsed:.2f} seconds")

        chance = REVELATION_SALVATION_CHANCE if self.revelation else SALVATION_CHANCE
        saved = self.rng.random() < chance
        self.logger.debug(f"Judgment: saved={saved} (chance {chance})")

        if saved:
            typer.secho(
                "Your code has been found worthy and has ascended to PRODUCTION HEAVEN! \U0001F64C",
                fg=typer.colors.GREEN,
            )
            if self.revelation:
                typer.secho(
                    "✨ ADDITIONAL BLESSING: Optimized runtime performance granted! ✨",
                    fg=typer.colors.BRIGHT_GREEN,
                )
            return True

        typer.secho(
            "Your code requires more faith. It has been sent to DEBUGGING PURGATORY. \U0001F525",
            fg=typer.colors.RED,
        )
        if not self.dev_mode:
            typer.secho(
                "Seek redemption through the 'confess' command to identify your sins.",
                fg=typer.colors.YELLOW,
            )
            raise JudgmentError("Your code requires purification before it can be saved.")

        typer.secho(
            "But since you're in dev mode, execution continues by divine mercy.",
            fg=typer.colors.YELLOW,
        )
        return False
