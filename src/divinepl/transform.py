# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Miracle transformation - sanctify secular source code.

Ordered plain-text replacements, each applied to the output of the last.
"""

from divinepl.classifier import BLOCK_BEGIN, BLOCK_END


REPLACEMENTS = (
    ("function ", "bless function "),
    ("class ", "covenant class "),
    ("async function", "miracle async function"),
    ("throw new Error", "confess new Sin"),
    ("try {", "attempt_salvation {"),
    ("catch (", "forgive ("),
    ("console.log", "revelation"),
    ("for (", "preach ("),
    ("return", "ascend with"),
)

HEADER = (
    "// Transformed by the Divine Miracle of DivinePL\n"
    "// This code has been sanctified from its secular origins\n\n"
    f"{BLOCK_BEGIN}\n"
    "Lord, bless this transformed code\n"
    "Guide it to run with divine efficiency\n"
    "Protect it from bugs and runtime errors\n"
    f"{BLOCK_END}\n\n"
)

FOOTER = (
    "\n\n// End of sanctified code\n"
    "// \"In the beginning was the code, and the code was with God.\" - DivinePL 1:1\n"
)


def sanctify(source: str) -> str:
    """Return the sanctified version of secular source text."""
    body = source
    for secular, divine in REPLACEMENTS:
        body = body.replace(secular, divine)
    return HEADER + body + FOOTER
