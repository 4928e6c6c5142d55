# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""DivinePL - interpreter, linter and prophet for .divine scripts."""

__version__ = "0.1.0"
