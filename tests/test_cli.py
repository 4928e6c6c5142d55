# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Tests for the divinepl CLI."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from divinepl import __version__
from divinepl.cli import app
from divinepl.config import CONFIG_ENV_VAR, CONFIG_FILENAME


runner = CliRunner()

MONDAY = date(2025, 12, 15)
SUNDAY = date(2025, 12, 14)


@pytest.fixture
def workspace(monkeypatch, tmp_path):
    """Empty working directory on a weekday."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr("divinepl.cli._today", lambda: MONDAY)
    return tmp_path


def _script(root: Path, content: str, name: str = "genesis.divine") -> str:
    path = root / name
    path.write_text(content)
    return str(path)


class TestVersion:
    def test_version(self, workspace):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestSabbathGate:
    """Tests for the Sunday gate in the CLI callback."""

    def test_sunday_blocks(self, workspace, monkeypatch):
        monkeypatch.setattr("divinepl.cli._today", lambda: SUNDAY)
        result = runner.invoke(app, ["bible", "light"])
        assert result.exit_code == 1
        assert "RestError" in result.output

    def test_sunday_override_in_dev_mode(self, workspace, monkeypatch):
        monkeypatch.setattr("divinepl.cli._today", lambda: SUNDAY)
        result = runner.invoke(app, ["--dev", "--override-sabbath", "bible", "light"])
        assert result.exit_code == 0

    def test_sabbath_mode_off(self, workspace, monkeypatch):
        monkeypatch.setattr("divinepl.cli._today", lambda: SUNDAY)
        (workspace / CONFIG_FILENAME).write_text('{"sabbath_mode": false}')
        result = runner.invoke(app, ["bible", "light"])
        assert result.exit_code == 0

    def test_version_works_on_sunday(self, workspace, monkeypatch):
        monkeypatch.setattr("divinepl.cli._today", lambda: SUNDAY)
        assert runner.invoke(app, ["version"]).exit_code == 0

    def test_invalid_config(self, workspace):
        (workspace / CONFIG_FILENAME).write_text("[1, 2]")
        result = runner.invoke(app, ["bible", "light"])
        assert result.exit_code == 1
        assert "Config error" in result.output


class TestRun:
    """Tests for divinepl run."""

    def test_run_clean_script_in_dev_mode(self, workspace):
        path = _script(workspace, 'bless Program {\n  revelation("Hello")\n}\n')
        result = runner.invoke(app, ["--dev", "run", path, "--seed", "1"])
        assert result.exit_code == 0
        assert "Hello" in result.output
        assert "JUDGMENT DAY" in result.output

    def test_run_violation(self, workspace):
        path = _script(workspace, "let a = 1\nfunction foo() { }\n")
        result = runner.invoke(app, ["run", path])
        assert result.exit_code == 1
        assert "SinError: Function at line 2 lacks divine blessing" in result.output

    def test_run_missing_file(self, workspace):
        result = runner.invoke(app, ["run", "nowhere.divine"])
        assert result.exit_code == 1
        assert "Failed to read the scripture" in result.output


class TestConfess:
    """Tests for divinepl confess."""

    def test_clean(self, workspace):
        path = _script(workspace, "bless Program {}\n")
        result = runner.invoke(app, ["confess", path])
        assert result.exit_code == 0
        assert "free from sin" in result.output

    def test_venial(self, workspace):
        path = _script(workspace, "function foo() { }\n")
        result = runner.invoke(app, ["confess", path, "--strict"])
        assert result.exit_code == 0
        assert "Venial Sin: 1 - Function lacks divine blessing" in result.output
        assert "(1 venial, 0 mortal)" in result.output
        assert "Venial sins can be forgiven" in result.output

    def test_mortal(self, workspace):
        path = _script(workspace, "let satan = 1\n")
        result = runner.invoke(app, ["confess", path])
        assert result.exit_code == 0
        assert "Mortal Sin: 1 - Blasphemous variable name detected" in result.output
        assert "Suggested Penance:" in result.output
        assert "Rename blasphemous variables" in result.output

    def test_mortal_strict(self, workspace):
        path = _script(workspace, "let satan = 1\n")
        assert runner.invoke(app, ["confess", path, "--strict"]).exit_code == 1

    def test_confession_disabled(self, workspace):
        (workspace / CONFIG_FILENAME).write_text('{"allow_confession": false}')
        path = _script(workspace, "bless Program {}\n")
        result = runner.invoke(app, ["confess", path])
        assert result.exit_code == 1
        assert "not allowed" in result.output


class TestProphesy:
    """Tests for divinepl prophesy."""

    def test_seeded_output_is_reproducible(self, workspace):
        path = _script(workspace, "while (x) {\n  let a = data;\n}\n")
        first = runner.invoke(app, ["prophesy", path, "--seed", "3"])
        second = runner.invoke(app, ["prophesy", path, "--seed", "3"])
        assert first.exit_code == 0
        assert first.output == second.output
        assert "Infinite loop risk detected" in first.output
        assert "DIVINE TODOs" in first.output
        assert "FINAL REVELATION" in first.output


class TestBible:
    """Tests for divinepl bible."""

    def test_exact_topic(self, workspace):
        result = runner.invoke(app, ["bible", "light"])
        assert result.exit_code == 0
        assert "Genesis 1:3" in result.output
        assert "[light]" not in result.output

    def test_keyword_topic(self, workspace):
        result = runner.invoke(app, ["bible", "genesis"])
        assert "[creation]" in result.output
        assert "[light]" in result.output

    def test_unknown_topic(self, workspace):
        result = runner.invoke(app, ["bible", "kubernetes"])
        assert "No direct verse found" in result.output
        assert "Divine Programming Guidance:" in result.output


class TestNew:
    """Tests for divinepl new."""

    def test_creates_project(self, workspace):
        result = runner.invoke(app, ["new", "eden", "--template", "prophet"])
        assert result.exit_code == 0
        assert (workspace / "eden" / "genesis.divine").exists()
        assert (workspace / "eden" / "holy_trinity" / "son.divine").exists()
        assert "holy_trinity/son.divine" in result.output

    def test_existing_project(self, workspace):
        (workspace / "eden").mkdir()
        result = runner.invoke(app, ["new", "eden"])
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestMiracle:
    """Tests for divinepl miracle."""

    def test_transforms_file(self, workspace):
        source = workspace / "app.js"
        source.write_text("function main() { console.log('hi'); }\n")
        target = workspace / "app.divine"
        result = runner.invoke(app, ["miracle", str(source), str(target)])
        assert result.exit_code == 0
        assert "MIRACLE COMPLETE" in result.output
        assert "bless function main() { revelation('hi'); }" in target.read_text()

    def test_missing_input(self, workspace):
        result = runner.invoke(app, ["miracle", "absent.js", "out.divine"])
        assert result.exit_code == 1
        assert "Failed to read secular code" in result.output


class TestCommandments:
    """Tests for divinepl commandments validate."""

    def test_defaults(self, workspace):
        result = runner.invoke(app, ["commandments", "validate"])
        assert result.exit_code == 0
        assert "defaults apply" in result.output

    def test_valid_file(self, workspace):
        runner.invoke(app, ["new", "eden"])
        result = runner.invoke(app, ["commandments", "validate", "-c", "eden/commandments.config"])
        assert result.exit_code == 0
        assert "father: main" in result.output
        assert "Commandments validation complete!" in result.output

    def test_missing_file(self, workspace):
        result = runner.invoke(app, ["commandments", "validate", "-c", "nope.config"])
        assert result.exit_code == 1
        assert "not found" in result.output
