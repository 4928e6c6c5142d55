# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Classifier - Turn DivinePL script text into Statements.

One pass over the physical lines:
- Prayer blocks (BEGIN/END PRAYER marker lines) are suppressed entirely
- Single-line prayers (🙏 ...) and // comments produce no Statement
- Every other non-empty line becomes exactly one Statement

Inline revelation("...") and print("...") calls are extracted as
Announcements on any line outside a prayer block, comments included.
"""

import logging
from typing import List, Optional

from divinepl.schemas import Announcement, ScanResult, Statement


logger = logging.getLogger(__name__)

PRAYER_GLYPH = "\U0001F64F"
BLOCK_BEGIN = f"{PRAYER_GLYPH} BEGIN PRAYER {PRAYER_GLYPH}"
BLOCK_END = f"{PRAYER_GLYPH} END PRAYER {PRAYER_GLYPH}"
COMMENT_MARKER = "//"

# (kind, opening token, closing token)
ANNOUNCEMENT_CALLS = (
    ("revelation", 'revelation("', '")'),
    ("print", 'print("', '")'),
)


def extract_between(text: str, start: str, end: str) -> Optional[str]:
    """
    Return the text between the first `start` and the first `end` after it.

    Returns None when either delimiter is missing.

    Example:
        >>> extract_between('revelation("a") revelation("b")', 'revelation("', '")')
        'a'
    """
    start_idx = text.find(start)
    if start_idx == -1:
        return None
    body_start = start_idx + len(start)
    end_idx = text.find(end, body_start)
    if end_idx == -1:
        return None
    return text[body_start:end_idx]


def physical_lines(text: str) -> List[str]:
    r"""
    Split text at "\n" (and "\r\n") only.

    Other characters str.splitlines() treats as breaks (form feed, vertical
    tab, U+2028, ...) stay inside their line. A trailing newline does not
    start an extra line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _make_statement(line_number: int, text: str) -> Statement:
    return Statement(
        line_number=line_number,
        text=text,
        has_revelation="revelation" in text,
        is_miracle=text.startswith("miracle"),
        is_covenant="covenant" in text or "promise" in text,
    )


def _extract_announcements(line_number: int, text: str) -> List[Announcement]:
    found = []
    for kind, start, end in ANNOUNCEMENT_CALLS:
        message = extract_between(text, start, end)
        if message is not None:
            found.append(Announcement(line_number=line_number, kind=kind, message=message))
    return found


def scan(source_text: str) -> ScanResult:
    """
    Classify script text into Statements and Announcements.

    Args:
        source_text: Raw script text (may be empty)

    Returns:
        ScanResult with statements and announcements in line order
    """
    statements: List[Statement] = []
    announcements: List[Announcement] = []
    prayer_lines: List[int] = []
    inside_block = False
    block_opened_at = 0

    for line_number, raw_line in enumerate(physical_lines(source_text), start=1):
        line = raw_line.strip()
        if not line:
            continue

        if line == BLOCK_BEGIN:
            inside_block = True
            block_opened_at = line_number
            logger.debug(f"Entering prayer block at line {line_number}")
            continue

        if line == BLOCK_END:
            if inside_block:
                logger.debug(f"Leaving prayer block at line {line_number}")
            inside_block = False
            continue

        if inside_block:
            continue

        announcements.extend(_extract_announcements(line_number, line))

        if line.startswith(PRAYER_GLYPH):
            prayer_lines.append(line_number)
            continue

        if line.startswith(COMMENT_MARKER):
            continue

        statements.append(_make_statement(line_number, line))

    if inside_block:
        logger.debug(f"Prayer block opened at line {block_opened_at} never ends; rest of script suppressed")

    return ScanResult(
        statements=tuple(statements),
        announcements=tuple(announcements),
        prayer_lines=tuple(prayer_lines),
    )


def classify(source_text: str) -> List[Statement]:
    """Classify script text into Statements (announcements discarded)."""
    return list(scan(source_text).statements)
