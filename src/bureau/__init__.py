"""
bureau - Filesystem-backed task and report numbering for AI agents.

Terminology:
    task        = day-scoped unit of work, one directory under the task root
    report      = numbered markdown file inside a task directory
    current     = symlink naming the active task
    slug        = agent-supplied task label

The filesystem is the only record. Agents may write, misnumber, or delete
files at any time; every call re-derives state from what is on disk.
"""

__version__ = "0.1.0"

from bureau.catalog import (
    bounded_window,
    list_reports,
    list_task_directories,
    scan_reports,
)
from bureau.errors import (
    AllocationExhaustedError,
    BureauError,
    MutationError,
    NoCurrentTaskError,
    TaskConflictError,
    TaskNotFoundError,
    ValidationError,
)
from bureau.naming import (
    TaskName,
    format_date_prefix,
    parse_date_prefix,
    parse_directory_name,
)
from bureau.pointer import read_current, write_current
from bureau.reports import (
    format_report_name,
    next_report_number,
    start_new_report_file,
)
from bureau.tasks import (
    TaskInfo,
    current_task_info,
    list_recent_tasks,
    start_new_task,
    switch_task,
    task_info,
)

__all__ = [
    # Name codec
    "TaskName",
    "format_date_prefix",
    "parse_date_prefix",
    "parse_directory_name",
    # Catalogs
    "list_task_directories",
    "list_reports",
    "scan_reports",
    "bounded_window",
    # Current pointer
    "read_current",
    "write_current",
    # Tasks
    "TaskInfo",
    "task_info",
    "current_task_info",
    "start_new_task",
    "switch_task",
    "list_recent_tasks",
    # Reports
    "next_report_number",
    "format_report_name",
    "start_new_report_file",
    # Errors
    "BureauError",
    "ValidationError",
    "TaskNotFoundError",
    "NoCurrentTaskError",
    "AllocationExhaustedError",
    "MutationError",
    "TaskConflictError",
]
