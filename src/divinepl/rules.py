# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Rule engine - the commandments and the confession.

One ordered catalog of RuleDescriptors drives two folds:
- check():   fail-fast. First fatal match raises HardViolation,
             warnings are logged and returned.
- confess(): accumulate-all. Every match becomes a Diagnostic,
             the pass always completes with a Report.

Each descriptor carries its own per-mode policy. A rule with no policy
for a mode is skipped in that mode.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from divinepl.schemas import Diagnostic, Report, Severity, Statement


logger = logging.getLogger(__name__)


class HardViolation(Exception):
    """Raised when check() hits a fatal commandment."""

    def __init__(self, rule_id: str, line_number: int, message: str):
        super().__init__(message)
        self.rule_id = rule_id
        self.line_number = line_number
        self.message = message


class Commandment(Enum):
    """How a rule behaves under check()."""

    FATAL = "fatal"
    WARNING = "warning"
    FATAL_UNLESS_PERMISSIVE = "fatal_unless_permissive"


# predicate(statement, raw_text) -> bool
Predicate = Callable[[Statement, str], bool]


@dataclass(frozen=True)
class RuleDescriptor:
    """A named predicate plus its policy in each mode.

    commandment_message is formatted with {line}.
    """
    rule_id: str
    predicate: Predicate
    commandment: Optional[Commandment] = None
    commandment_message: str = ""
    permissive_message: str = ""
    confession: Optional[Severity] = None
    confession_message: str = ""


# =============================================================================
# Predicates
# =============================================================================

BLESSINGS = ("bless", "genesis", "miracle")
FORBIDDEN_NAMES = ("devil", "satan", "demon")
TRINITY_PARTS = ("father", "son", "holy")

_FORBIDDEN_DECL_RE = re.compile(r"\b(?:let|var)\s+(?:%s)\b" % "|".join(FORBIDDEN_NAMES))
_VAR_RE = re.compile(r"\bvar\b")
_LET_RE = re.compile(r"\blet\b")
_TRY_RE = re.compile(r"\btry\b")


def _unblessed_function(stmt: Statement, raw_text: str) -> bool:
    text = stmt.text
    return "function" in text and not any(b in text for b in BLESSINGS)


def _kills_process(stmt: Statement, raw_text: str) -> bool:
    text = stmt.text
    return "kill" in text and ("process" in text or "Process" in text)


def _blasphemous_name(stmt: Statement, raw_text: str) -> bool:
    return _FORBIDDEN_DECL_RE.search(stmt.text) is not None


def _incomplete_trinity(stmt: Statement, raw_text: str) -> bool:
    text = stmt.text
    return "trinity" in text and not all(part in text for part in TRINITY_PARTS)


def _secular_var(stmt: Statement, raw_text: str) -> bool:
    return bool(_VAR_RE.search(stmt.text)) and not _LET_RE.search(stmt.text)


def _infinite_loop(stmt: Statement, raw_text: str) -> bool:
    return "while(true)" in stmt.text or "while (true)" in stmt.text


def _unconfessed_try(stmt: Statement, raw_text: str) -> bool:
    # Looks at the whole document, so every try line fires on its own
    return bool(_TRY_RE.search(stmt.text)) and "confess" not in raw_text


# =============================================================================
# Catalog
# =============================================================================

CATALOG: Sequence[RuleDescriptor] = (
    RuleDescriptor(
        rule_id="unblessed-function",
        predicate=_unblessed_function,
        commandment=Commandment.FATAL,
        commandment_message="SinError: Function at line {line} lacks divine blessing",
        confession=Severity.VENIAL,
        confession_message="Function lacks divine blessing",
    ),
    RuleDescriptor(
        rule_id="kill-process",
        predicate=_kills_process,
        commandment=Commandment.FATAL_UNLESS_PERMISSIVE,
        commandment_message="MoralError: Thou shalt not kill child processes at line {line}",
        permissive_message=(
            "Attempting to kill a child process at line {line} is sinful, "
            "but permitted in dev mode."
        ),
        confession=Severity.MORTAL,
        confession_message="Thou shalt not kill processes",
    ),
    RuleDescriptor(
        rule_id="blasphemous-name",
        predicate=_blasphemous_name,
        commandment=Commandment.FATAL,
        commandment_message="BlasphemyError: Unholy variable names at line {line}",
        confession=Severity.MORTAL,
        confession_message="Blasphemous variable name detected",
    ),
    RuleDescriptor(
        rule_id="incomplete-trinity",
        predicate=_incomplete_trinity,
        commandment=Commandment.WARNING,
        commandment_message=(
            "Trinity pattern at line {line} is incomplete. "
            "Father, Son, and Holy Ghost are required."
        ),
    ),
    RuleDescriptor(
        rule_id="secular-var",
        predicate=_secular_var,
        confession=Severity.VENIAL,
        confession_message="Use 'let' instead of secular 'var'",
    ),
    RuleDescriptor(
        rule_id="infinite-loop",
        predicate=_infinite_loop,
        confession=Severity.VENIAL,
        confession_message="Infinite loops show lack of faith in termination",
    ),
    RuleDescriptor(
        rule_id="unconfessed-try",
        predicate=_unconfessed_try,
        confession=Severity.MORTAL,
        confession_message="Errors must be confessed, not caught",
    ),
)


# =============================================================================
# Folds
# =============================================================================

def check(
    statements: Sequence[Statement],
    permissive: bool = False,
    catalog: Sequence[RuleDescriptor] = CATALOG,
) -> List[Diagnostic]:
    """
    Evaluate the commandments, stopping at the first fatal match.

    Statements are visited in line order and each is tested against the
    catalog in order, so the earliest offending line wins.

    Args:
        statements: Classified statements
        permissive: Downgrade FATAL_UNLESS_PERMISSIVE rules to warnings
        catalog: Rule descriptors to evaluate

    Returns:
        Warnings reported along the way

    Raises:
        HardViolation: On the first fatal match
    """
    commandments = [rule for rule in catalog if rule.commandment is not None]
    warnings: List[Diagnostic] = []
    for stmt in statements:
        for rule in commandments:
            if not rule.predicate(stmt, ""):
                continue

            fatal = rule.commandment is Commandment.FATAL or (
                rule.commandment is Commandment.FATAL_UNLESS_PERMISSIVE and not permissive
            )
            if fatal:
                raise HardViolation(
                    rule.rule_id,
                    stmt.line_number,
                    rule.commandment_message.format(line=stmt.line_number),
                )

            template = rule.permissive_message or rule.commandment_message
            message = template.format(line=stmt.line_number)
            logger.debug(f"Commandment warning: {message}")
            warnings.append(Diagnostic(
                rule_id=rule.rule_id,
                severity=Severity.VENIAL,
                line_number=stmt.line_number,
                message=message,
            ))
    return warnings


def confess(
    statements: Sequence[Statement],
    raw_text: str,
    catalog: Sequence[RuleDescriptor] = CATALOG,
) -> Report:
    """
    Evaluate every confession rule against every statement.

    Never short-circuits. Diagnostics are ordered by catalog, then by line.

    Args:
        statements: Classified statements
        raw_text: Full script text (for document-wide rules)
        catalog: Rule descriptors to evaluate

    Returns:
        Report with venial/mortal counts and all diagnostics
    """
    report = Report()
    for rule in catalog:
        if rule.confession is None:
            continue
        for stmt in statements:
            if not rule.predicate(stmt, raw_text):
                continue
            report.diagnostics.append(Diagnostic(
                rule_id=rule.rule_id,
                severity=rule.confession,
                line_number=stmt.line_number,
                message=rule.confession_message,
            ))
            if rule.confession is Severity.MORTAL:
                report.mortal_count += 1
            elif rule.confession is Severity.VENIAL:
                report.venial_count += 1

    logger.debug(
        f"Confession complete: {report.venial_count} venial, {report.mortal_count} mortal"
    )
    return report


def check_covenants(statements: Sequence[Statement]) -> bool:
    """Return True if any statement makes a covenant or promise."""
    has_covenants = False
    for stmt in statements:
        if stmt.is_covenant:
            has_covenants = True
            logger.debug(f"Covenant detected at line {stmt.line_number}: {stmt.text!r}")
    return has_covenants
