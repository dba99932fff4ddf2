"""
Tests for the current-task pointer and atomic symlink replacement.
"""

import os
import pytest
import tempfile
from pathlib import Path
from unittest.mock import patch

from bureau.fs import atomic_symlink, validate_component
from bureau.errors import ValidationError
from bureau.pointer import read_current, write_current


class TestAtomicSymlink:
    """Symlink replacement via temp+rename."""

    def test_creates_link(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            link = Path(tmpdir) / "current"
            atomic_symlink("target", link)
            assert os.readlink(link) == "target"

    def test_replaces_existing_link(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            link = Path(tmpdir) / "current"
            atomic_symlink("first", link)
            atomic_symlink("second", link)
            assert os.readlink(link) == "second"
            assert [p.name for p in Path(tmpdir).iterdir()] == ["current"]

    def test_cleans_temp_on_rename_failure(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            link = Path(tmpdir) / "current"
            with patch("bureau.fs.os.replace", side_effect=OSError("rename failed")):
                with pytest.raises(OSError):
                    atomic_symlink("target", link)
            assert list(Path(tmpdir).iterdir()) == []


class TestValidateComponent:
    """Label and suffix checks."""

    def test_accepts_opaque_tokens(self):
        assert validate_component("Fix Login!", "task_slug") == "Fix Login!"

    @pytest.mark.parametrize("value", ["", None, 5, ["x"], "a/b", "a\\b", "a\x00b"])
    def test_rejects(self, value):
        with pytest.raises(ValidationError):
            validate_component(value, "task_slug")

    def test_message_names_argument(self):
        with pytest.raises(ValidationError, match="suffix is required"):
            validate_component("", "suffix")

    def test_non_string_message(self):
        with pytest.raises(ValidationError, match="task_slug must be a string"):
            validate_component(5, "task_slug")

    @pytest.mark.parametrize("value", [".", "..", "..md"])
    def test_dots_are_ordinary(self, value):
        """Values are never used as a whole path component on their own."""
        assert validate_component(value, "suffix") == value


class TestCurrentPointer:
    """Reading and writing the current link."""

    def test_no_link(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert read_current(Path(tmpdir)) is None

    def test_round_trip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "2026-10-19-x").mkdir()
            write_current(root, "2026-10-19-x")
            assert read_current(root) == "2026-10-19-x"

    def test_link_is_relative(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "2026-10-19-x").mkdir()
            write_current(root, "2026-10-19-x")
            assert os.readlink(root / "current") == "2026-10-19-x"

    def test_survives_relocation(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir) / "a"
            root.mkdir()
            (root / "2026-10-19-x").mkdir()
            write_current(root, "2026-10-19-x")

            moved = Path(tmpdir) / "b"
            root.rename(moved)
            assert read_current(moved) == "2026-10-19-x"

    def test_dangling_link(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            os.symlink("2026-10-19-gone", root / "current")
            assert read_current(root) is None

    def test_malformed_target(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "scratch").mkdir()
            os.symlink("scratch", root / "current")
            assert read_current(root) is None

    def test_absolute_target_resolves_by_name(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "2026-10-19-x").mkdir()
            os.symlink(str(root / "2026-10-19-x"), root / "current")
            assert read_current(root) == "2026-10-19-x"

    def test_current_is_regular_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "current").write_text("2026-10-19-x")
            assert read_current(root) is None
