"""
Bureau filesystem structure constants.

Central source of truth for directory names, window sizes, and limits.
"""

from pathlib import Path

# ============================================================================
# DIRECTORY STRUCTURE
# ============================================================================

# Task root, relative to the project directory
TASKS_DIR = "_tasks"

# Symlink inside the task root naming the active task
CURRENT_LINK = "current"

# ============================================================================
# REPORT LISTING WINDOW
# ============================================================================

# Listings at or below this size are returned whole
REPORT_WINDOW_MAX = 50

# Otherwise keep the earliest HEAD and the latest TAIL entries
REPORT_WINDOW_HEAD = 20
REPORT_WINDOW_TAIL = 30

# Report file extension
REPORT_EXTENSION = ".md"

# Minimum digits for allocated report numbers
REPORT_NUMBER_WIDTH = 3

# ============================================================================
# TASK ALLOCATION
# ============================================================================

# Runaway-loop guard for the same-day disambiguator probe.
# Escape ordinals stay three digits wide (and so sort correctly) up to 999.
MAX_TASKS_PER_DAY = 999

# Recency window for list_recent_tasks (days, inclusive)
RECENT_DAYS = 30

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_tasks_root(project_dir: Path, tasks_dir: str = TASKS_DIR) -> Path:
    """Get the task root for a project."""
    return Path(project_dir) / tasks_dir


def get_current_link(root: Path) -> Path:
    """Get the current-task symlink path inside a task root."""
    return Path(root) / CURRENT_LINK
