# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Sabbath gate: no divine work on Sundays."""

from datetime import date
from typing import Optional

SUNDAY = 6  # date.weekday()


class SabbathError(Exception):
    """Raised when work is attempted on the Sabbath."""

    pass


def is_sabbath(today: date) -> bool:
    return today.weekday() == SUNDAY


def check_sabbath(
    today: Optional[date] = None,
    override: bool = False,
    dev_mode: bool = False,
) -> None:
    """Refuse to proceed on Sunday.

    The override only takes effect together with dev mode.

    Raises:
        SabbathError: On Sunday without override + dev mode.
    """
    today = today or date.today()
    if is_sabbath(today) and not (override and dev_mode):
        raise SabbathError("RestError: Remember the Sabbath day, to keep it holy (Exodus 20:8)")
