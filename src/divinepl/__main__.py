# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Main entry point for running divinepl as a module."""

from divinepl.cli import main

if __name__ == "__main__":
    main()
