"""
Tests for the bureau CLI.
"""

import json
import pytest
import tempfile
from pathlib import Path

from bureau.cli import main


def run_cli(tmpdir, *args):
    main(["--project-dir", str(tmpdir), *args])


class TestCli:
    """CLI commands over a temporary project."""

    def test_start_and_current(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            run_cli(tmpdir, "start", "fix-login")
            started = json.loads(capsys.readouterr().out)
            assert started["task_slug"] == "fix-login"

            run_cli(tmpdir, "current")
            assert json.loads(capsys.readouterr().out) == started

    def test_current_without_task(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SystemExit) as exc_info:
                run_cli(tmpdir, "current")
            assert exc_info.value.code == 1
            assert "No current task" in capsys.readouterr().err

    def test_switch_missing(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SystemExit) as exc_info:
                run_cli(tmpdir, "switch", "nope")
            assert exc_info.value.code == 1
            assert "Task not found: nope" in capsys.readouterr().err

    def test_report(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            run_cli(tmpdir, "start", "x")
            capsys.readouterr()
            run_cli(tmpdir, "report", "plan")
            path = Path(json.loads(capsys.readouterr().out)["report_file_to_create"])
            assert path.name == "001-plan.md"
            assert not path.exists()

    def test_recent(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            run_cli(tmpdir, "start", "a")
            run_cli(tmpdir, "start", "b")
            capsys.readouterr()
            run_cli(tmpdir, "recent")
            assert json.loads(capsys.readouterr().out) == {"recent_task_slugs": ["a", "b"]}

    def test_tasks_dir_option(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            run_cli(tmpdir, "--tasks-dir", "work", "start", "x")
            assert (Path(tmpdir) / "work" / "current").is_symlink()
