"""
Current-task pointer.

The active task is recorded as a relative symlink ``<root>/current`` pointing
at a task directory name. A missing, dangling, or malformed link simply means
there is no current task.
"""

import os
from pathlib import Path
from typing import Optional

from bureau.constants import get_current_link
from bureau.fs import atomic_symlink
from bureau.naming import parse_directory_name


def read_current(root: Path) -> Optional[str]:
    """
    Resolve the current task directory name.

    Args:
        root: Task root directory

    Returns:
        Directory name, or None if the link is absent, broken, or does not
        name a task directory
    """
    try:
        target = os.readlink(get_current_link(root))
    except OSError:
        return None

    # Absolute targets from older writers still resolve by base name
    name = os.path.basename(os.path.normpath(target))
    if parse_directory_name(name) is None:
        return None
    if not (Path(root) / name).is_dir():
        return None
    return name


def write_current(root: Path, directory_name: str) -> None:
    """
    Point the current-task link at directory_name.

    The link stores the bare name (relative to root) so the tree can be moved
    without breaking it. Replacement is atomic.

    Raises:
        OSError: If the link cannot be created or replaced
    """
    atomic_symlink(directory_name, get_current_link(root))
