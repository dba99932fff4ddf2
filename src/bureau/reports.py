"""
Report allocation - sequential report filenames inside the current task.

Reports are written by agents, not by bureau, so numbering is derived from
whatever files are actually present. The next number is the highest number
seen plus one, computed over the full listing (never the bounded window).
"""

import re
from pathlib import Path

from bureau.catalog import scan_reports
from bureau.constants import REPORT_EXTENSION, REPORT_NUMBER_WIDTH
from bureau.errors import NoCurrentTaskError
from bureau.fs import validate_component
from bureau.pointer import read_current

_LEADING_NUMBER_RE = re.compile(r"^([0-9]+)-")


def report_number(name: str) -> int:
    """Leading sequence number of a report filename (0 if none)."""
    match = _LEADING_NUMBER_RE.match(name)
    return int(match.group(1)) if match else 0


def next_report_number(task_dir: Path) -> int:
    """
    Next unused report number in task_dir.

    Idempotent until a new report file appears. Duplicate numbers written by
    agents do not stall progress since only the maximum matters.
    """
    numbers = [report_number(name) for name in scan_reports(task_dir)]
    return max(numbers, default=0) + 1


def format_report_name(number: int, suffix: str) -> str:
    """Format a report filename, zero-padding numbers below 1000."""
    return f"{number:0{REPORT_NUMBER_WIDTH}d}-{suffix}{REPORT_EXTENSION}"


def start_new_report_file(root: Path, suffix: str) -> Path:
    """
    Name the next report file in the current task.

    The file is NOT created: callers write it themselves.

    Args:
        root: Task root directory
        suffix: Report suffix, e.g. "code-review"

    Returns:
        Path of the report file to create

    Raises:
        ValidationError: If suffix is empty
        NoCurrentTaskError: If no current task resolves
    """
    validate_component(suffix, "suffix")

    directory_name = read_current(root)
    if directory_name is None:
        raise NoCurrentTaskError("No current task")

    task_dir = Path(root) / directory_name
    return task_dir / format_report_name(next_report_number(task_dir), suffix)
