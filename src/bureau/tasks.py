"""
Task allocation - day-scoped task directories with a current pointer.

Every operation takes a fresh snapshot of the task root, decides from it, and
performs at most one mutation (create a directory, or replace the pointer).
Nothing is cached between calls; agents may add, remove, or misname
directories at any time.

Layout:
    <root>/
    ├── current -> 2026-10-19b-fix-login
    ├── 2026-10-19-fix-login/
    │   ├── 001-plan.md
    │   └── 002-review.md
    └── 2026-10-19b-fix-login/
"""

import os
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Optional

from bureau.catalog import list_reports, list_task_directories
from bureau.constants import MAX_TASKS_PER_DAY, RECENT_DAYS
from bureau.errors import (
    AllocationExhaustedError,
    MutationError,
    TaskConflictError,
    TaskNotFoundError,
)
from bureau.fs import validate_component
from bureau.naming import format_directory_name, parse_directory_name, task_date
from bureau.pointer import read_current, write_current


@dataclass
class TaskInfo:
    """Snapshot of one task and its (windowed) reports."""
    task_slug: str
    reports_dir: Path
    report_file_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "task_slug": self.task_slug,
            "reports_dir": str(self.reports_dir),
            "report_file_names": list(self.report_file_names),
        }


def today_utc() -> date:
    """Today's calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def task_info(root: Path, directory_name: Optional[str]) -> Optional[TaskInfo]:
    """
    Build TaskInfo for a task directory.

    Returns None if directory_name is empty or not a task directory name.
    """
    if not directory_name:
        return None
    parsed = parse_directory_name(directory_name)
    if parsed is None:
        return None

    reports_dir = Path(root) / directory_name
    return TaskInfo(
        task_slug=parsed.label,
        reports_dir=reports_dir,
        report_file_names=list_reports(reports_dir),
    )


def current_task_info(root: Path) -> Optional[TaskInfo]:
    """Info for the task the current pointer resolves to, or None."""
    return task_info(root, read_current(root))


def _point_at(root: Path, directory_name: str) -> None:
    try:
        write_current(root, directory_name)
    except OSError as e:
        raise MutationError(
            f"Could not update current task to {directory_name}: {e}"
        ) from e


def next_task_directory_name(
    root: Path, label: str, today: Optional[date] = None
) -> str:
    """
    Find the first unused directory name for label on today's date.

    Probes disambiguators 0, 1, 2, ... re-listing the root for each probe.
    Names held by any entry (files and symlinks included) are skipped.

    Raises:
        AllocationExhaustedError: If MAX_TASKS_PER_DAY names are all taken
    """
    day = today or today_utc()
    for disambiguator in range(MAX_TASKS_PER_DAY):
        candidate = format_directory_name(day, disambiguator, label)
        if candidate in list_task_directories(root):
            continue
        if not os.path.lexists(Path(root) / candidate):
            return candidate

    raise AllocationExhaustedError(
        f"Too many tasks named {label!r} for {day.isoformat()} "
        f"(max {MAX_TASKS_PER_DAY})"
    )


def start_new_task(
    root: Path, label: str, today: Optional[date] = None
) -> TaskInfo:
    """
    Create a new task directory for label and make it current.

    Args:
        root: Task root directory (created if missing)
        label: Task slug, used verbatim in the directory name
        today: Date to allocate under (default: today, UTC)

    Returns:
        TaskInfo for the new task

    Raises:
        ValidationError: If label is empty or contains a path separator
        AllocationExhaustedError: If no free name remains for the day
        TaskConflictError: If the chosen directory appeared before creation
        MutationError: If the directory or pointer cannot be written
    """
    validate_component(label, "task_slug")
    directory_name = next_task_directory_name(root, label, today=today)

    task_dir = Path(root) / directory_name
    try:
        task_dir.mkdir()
    except FileExistsError as e:
        raise TaskConflictError(
            f"Task directory already exists, retry: {directory_name}"
        ) from e
    except OSError as e:
        raise MutationError(f"Could not create task directory {directory_name}: {e}") from e

    _point_at(root, directory_name)
    return task_info(root, directory_name)


def find_task_directory(root: Path, label: str) -> Optional[str]:
    """Most recent task directory whose label equals label exactly."""
    for name in reversed(list_task_directories(root)):
        parsed = parse_directory_name(name)
        if parsed and parsed.label == label:
            return name
    return None


def switch_task(root: Path, label: str) -> TaskInfo:
    """
    Make the most recent task with this label current.

    Never creates a directory. The pointer is left untouched on failure.

    Raises:
        ValidationError: If label is empty
        TaskNotFoundError: If no task carries label
        MutationError: If the pointer cannot be replaced
    """
    validate_component(label, "task_slug")
    directory_name = find_task_directory(root, label)
    if directory_name is None:
        raise TaskNotFoundError(f"Task not found: {label}")

    _point_at(root, directory_name)
    return task_info(root, directory_name)


def list_recent_tasks(
    root: Path, days: int = RECENT_DAYS, today: Optional[date] = None
) -> list[str]:
    """
    Labels of tasks dated within the last `days` days, oldest first.

    The window is inclusive: with days=30 a task dated exactly 30 days ago is
    kept. Names that do not parse to a real date are skipped.
    """
    cutoff = (today or today_utc()) - timedelta(days=days)

    labels = []
    for name in list_task_directories(root):
        day = task_date(name)
        if day is None or day < cutoff:
            continue
        labels.append(parse_directory_name(name).label)
    return labels
