"""
Directory and report catalogs.

The only read paths into the task tree. Both catalogs re-scan the filesystem
on every call and degrade to an empty listing on any OS error: callers treat
"nothing there" and "could not look" the same way.

Report listings are sorted lexicographically. With agent-written files of
mixed number widths this is NOT numeric order (``100-x.md`` sorts before
``11-y.md``); use reports.next_report_number for the high-water mark.
"""

import os
import re
from pathlib import Path

from bureau.constants import (
    REPORT_WINDOW_HEAD,
    REPORT_WINDOW_MAX,
    REPORT_WINDOW_TAIL,
)
from bureau.naming import parse_directory_name

REPORT_NAME_RE = re.compile(r"^[0-9]+-.*\.md\Z", re.DOTALL)


def list_task_directories(root: Path) -> list[str]:
    """
    List valid task directory names under root, sorted.

    Creates root if it does not exist. Entries that are not real directories
    (including symlinks such as ``current``) or whose names do not parse are
    left out.

    Args:
        root: Task root directory

    Returns:
        Sorted directory names, or [] if root cannot be created or read
    """
    try:
        Path(root).mkdir(parents=True, exist_ok=True)
        with os.scandir(root) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_dir(follow_symlinks=False)
                and parse_directory_name(entry.name) is not None
            ]
    except OSError:
        return []
    return sorted(names)


def is_report_name(name: str) -> bool:
    """Check whether a filename follows the report naming grammar."""
    return REPORT_NAME_RE.match(name) is not None


def scan_reports(task_dir: Path) -> list[str]:
    """
    List every report filename in task_dir, sorted, without truncation.

    Returns [] if the directory is missing or unreadable.
    """
    try:
        names = os.listdir(task_dir)
    except OSError:
        return []
    return sorted(name for name in names if is_report_name(name))


def bounded_window(names: list[str]) -> list[str]:
    """Keep the earliest and latest entries of a long listing."""
    if len(names) <= REPORT_WINDOW_MAX:
        return list(names)
    return names[:REPORT_WINDOW_HEAD] + names[-REPORT_WINDOW_TAIL:]


def list_reports(task_dir: Path) -> list[str]:
    """Sorted report filenames in task_dir, bounded to the listing window."""
    return bounded_window(scan_reports(task_dir))
