"""
Filesystem primitives for agent-shared task trees (stdlib-only).

The task tree is the system of record and may be edited by agents at any
time, so every mutation here is a single atomic step:
- Symlink replacement via temp+rename (readers see the old or the new link)
- Path components checked before they are joined onto the task root
"""

import os
from pathlib import Path
from uuid import uuid4

from bureau.errors import ValidationError

_FORBIDDEN = ("/", "\\", "\x00")


def validate_component(value: str | None, what: str) -> str:
    """
    Check that value can be joined onto a directory as one name.

    Labels and suffixes are otherwise opaque: no slug syntax is enforced.

    Args:
        value: Agent-supplied token
        what: Argument name for the error message

    Returns:
        The value unchanged

    Raises:
        ValidationError: If value is missing, not a string, or contains a
            path separator
    """
    if value is None or value == "":
        raise ValidationError(f"{what} is required")
    if not isinstance(value, str):
        raise ValidationError(f"{what} must be a string")
    if any(ch in value for ch in _FORBIDDEN):
        raise ValidationError(f"{what} must not contain path separators: {value!r}")
    return value


def atomic_symlink(target: str, link: Path) -> None:
    """
    Atomically point link at target using symlink+rename.

    The link is created under a temporary name in the same directory and
    renamed over the old one, so there is never a moment with no link or
    with two links.

    Args:
        target: Link contents (kept relative by callers)
        link: Path of the symlink to create or replace
    """
    link = Path(link)
    tmp_link = link.with_name(f".{link.name}.{uuid4().hex}.tmp")

    os.symlink(target, tmp_link)
    try:
        # POSIX rename replaces an existing symlink atomically
        os.replace(tmp_link, link)
    except OSError:
        if os.path.lexists(tmp_link):
            os.unlink(tmp_link)
        raise
