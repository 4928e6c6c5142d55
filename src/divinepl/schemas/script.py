# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Statement, diagnostic and prophecy schemas for DivinePL.

Flow:
- script text → scan → ScanResult (Statements + Announcements)
- Statements → check / confess → Diagnostics / Report
- Statements + text + random source → prophesy → ProphecyNotes
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


@dataclass(frozen=True)
class Statement:
    """One classified logical line of a script.

    Flags are computed once by the classifier and never recomputed.
    """
    line_number: int  # 1-based physical line
    text: str  # trimmed, never empty
    has_revelation: bool = False
    is_miracle: bool = False
    is_covenant: bool = False


@dataclass(frozen=True)
class Announcement:
    """Message extracted from an inline revelation("...") or print("...") call."""
    line_number: int
    kind: str  # "revelation" | "print"
    message: str


@dataclass(frozen=True)
class ScanResult:
    """Everything one classification pass produces."""
    statements: Tuple[Statement, ...] = ()
    announcements: Tuple[Announcement, ...] = ()
    prayer_lines: Tuple[int, ...] = ()  # single-line 🙏 prayers


class Severity(Enum):
    """Diagnostic severity.

    VENIAL is a warning, MORTAL is an error.
    """

    INFO = "info"
    VENIAL = "venial"
    MORTAL = "mortal"


@dataclass(frozen=True)
class Diagnostic:
    """One reported rule match."""
    rule_id: str
    severity: Severity
    line_number: int
    message: str


# Remediation lines, selected by which sin categories are present
VENIAL_PENANCE = (
    "Replace 'var' with 'let' and add proper blessings to functions",
    "Avoid infinite loops by adding faithful termination conditions",
)
MORTAL_PENANCE = (
    "Rename blasphemous variables to virtuous alternatives",
    "Replace 'try/catch' with 'confess' for proper error handling",
    "Remove all 'kill' statements and implement graceful process lifecycle",
)


@dataclass
class Report:
    """Aggregate result of a confession pass."""
    venial_count: int = 0
    mortal_count: int = 0
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.venial_count + self.mortal_count

    @property
    def passed(self) -> bool:
        """A script passes confession when it carries no mortal sins."""
        return self.mortal_count == 0

    @property
    def penance(self) -> List[str]:
        lines: List[str] = []
        if self.venial_count > 0:
            lines.extend(VENIAL_PENANCE)
        if self.mortal_count > 0:
            lines.extend(MORTAL_PENANCE)
        return lines


class NoteSource(Enum):
    """Where a prophecy note came from."""

    HEURISTIC = "heuristic"
    RANDOM_CORPUS = "random_corpus"


@dataclass(frozen=True)
class ProphecyNote:
    """A speculative observation about future risk."""
    source: NoteSource
    text: str
