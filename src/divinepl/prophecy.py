# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Prophecy - speculative notes about a script's future risks.

Deterministic heuristics over the raw text come first, in catalog order,
followed by exactly three picks (with replacement) from PROJECT_INSIGHTS
made through the caller's random source.
"""

import logging
import random
from typing import Callable, List, Sequence, Tuple

from divinepl.classifier import physical_lines
from divinepl.schemas import NoteSource, ProphecyNote, Statement


logger = logging.getLogger(__name__)

INSIGHT_DRAWS = 3
LARGE_SCRIPT_LINES = 100
COMPLEX_FUNCTION_LENGTH = 100

PROJECT_INSIGHTS = (
    "The path of deployment shall be fraught with environmental differences. Prepare with containerization.",
    "A great refactoring shall be needed by the third version. Plan accordingly.",
    "Security vulnerabilities shall manifest if input validation is neglected.",
    "The user interface shall require redesign as requirements evolve.",
    "Test coverage will prove insufficient in areas not yet considered.",
    "Technical debt shall accumulate in the areas of error handling.",
    "Documentation shall become outdated unless integrated with the development process.",
    "Dependencies shall age and require updating, bringing both blessings and trials.",
)

# (condition over raw text, note)
HEURISTICS: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (
        lambda text: "while" in text and "break" not in text,
        "Infinite loop risk detected. Add a divine exit condition to prevent eternal execution.",
    ),
    (
        lambda text: "let " in text and "covenant" not in text,
        "Future maintainers will appreciate constants declared as 'covenant' for important values.",
    ),
    (
        lambda text: len(physical_lines(text)) > LARGE_SCRIPT_LINES and "module" not in text,
        "As this code grows, consider divine modularization through the Holy Trinity pattern.",
    ),
    (
        lambda text: "data" in text and "validate" not in text,
        "Future security concerns: add divine validation to all data inputs to prevent unholy injections.",
    ),
)


def count_complex_functions(statements: Sequence[Statement]) -> int:
    """Count long function-like statements."""
    return sum(
        1
        for stmt in statements
        if ("function" in stmt.text or "=>" in stmt.text)
        and len(stmt.text) > COMPLEX_FUNCTION_LENGTH
    )


def prophesy(
    statements: Sequence[Statement],
    raw_text: str,
    random_source: random.Random,
) -> List[ProphecyNote]:
    """
    Generate prophecy notes for a script.

    Args:
        statements: Classified statements
        raw_text: Full script text
        random_source: Source for the corpus draws; seed it for reproducible output

    Returns:
        Heuristic notes followed by three corpus notes
    """
    notes: List[ProphecyNote] = []
    for condition, text in HEURISTICS:
        if condition(raw_text):
            notes.append(ProphecyNote(source=NoteSource.HEURISTIC, text=text))

    # Counted but not turned into a note
    complex_functions = count_complex_functions(statements)
    if complex_functions:
        logger.debug(f"{complex_functions} complex function(s) found; no prophecy emitted for them")

    for _ in range(INSIGHT_DRAWS):
        notes.append(ProphecyNote(
            source=NoteSource.RANDOM_CORPUS,
            text=random_source.choice(PROJECT_INSIGHTS),
        ))
    return notes
