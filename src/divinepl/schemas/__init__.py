# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""DivinePL script schemas."""

from divinepl.schemas.script import (
    Announcement,
    Diagnostic,
    NoteSource,
    ProphecyNote,
    Report,
    ScanResult,
    Severity,
    Statement,
)

__all__ = [
    "Announcement",
    "Diagnostic",
    "NoteSource",
    "ProphecyNote",
    "Report",
    "ScanResult",
    "Severity",
    "Statement",
]
