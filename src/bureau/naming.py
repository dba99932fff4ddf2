"""
Name codec for task directories.

A task directory is named ``<date prefix>-<label>``. The date prefix is an ISO
calendar date plus an optional same-day disambiguation suffix:

    2026-10-19          first task of the day       (disambiguator 0)
    2026-10-19b         second task                 (disambiguator 1)
    2026-10-19y         25th task                   (disambiguator 24)
    2026-10-19z026      26th task onwards           (disambiguator 25+)

Suffixes sort lexicographically in allocation order, so a sorted directory
listing is chronological. Pure functions only, no I/O.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

# Letters b..y cover disambiguators 1..24
LETTER_BASE = ord("a")
LAST_LETTER_INDEX = 24

# Escape form: "z" + ordinal, zero-padded to this width
ESCAPE_CHAR = "z"
ESCAPE_WIDTH = 3

# Smallest ordinal the escape form produces (disambiguator 25)
FIRST_ESCAPE_ORDINAL = LAST_LETTER_INDEX + 2

# date, then optional suffix (escape form, or a single letter; bare "z" is legacy)
_PREFIX = r"[0-9]{4}-[0-9]{2}-[0-9]{2}(?:z[0-9]{3,}|[b-z])?"
DIRECTORY_NAME_RE = re.compile(rf"^({_PREFIX})-(.+)\Z", re.DOTALL)
DATE_PREFIX_RE = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})(?:z([0-9]{3,})|([b-z]))?\Z")


@dataclass(frozen=True)
class TaskName:
    """Parsed task directory name."""
    date_prefix: str
    label: str

    @property
    def directory_name(self) -> str:
        return f"{self.date_prefix}-{self.label}"


def format_date_prefix(day: date, disambiguator: int) -> str:
    """
    Format a calendar date and same-day disambiguator as a date prefix.

    Args:
        day: Calendar date of the task
        disambiguator: Ordinal of the task within the day (0-based)

    Returns:
        Prefix string, e.g. "2026-10-19", "2026-10-19b", "2026-10-19z026"

    Raises:
        ValueError: If disambiguator is negative
    """
    if disambiguator < 0:
        raise ValueError(f"Disambiguator must be >= 0, got {disambiguator}")

    base = day.isoformat()
    if disambiguator == 0:
        return base
    if disambiguator <= LAST_LETTER_INDEX:
        return base + chr(LETTER_BASE + disambiguator)
    return f"{base}{ESCAPE_CHAR}{disambiguator + 1:0{ESCAPE_WIDTH}d}"


def format_directory_name(day: date, disambiguator: int, label: str) -> str:
    """Build the full task directory name for a label."""
    return f"{format_date_prefix(day, disambiguator)}-{label}"


def parse_directory_name(name: str) -> Optional[TaskName]:
    """
    Split a task directory name into date prefix and label.

    Returns None for anything that does not follow the naming grammar.
    """
    match = DIRECTORY_NAME_RE.match(name)
    if not match:
        return None
    return TaskName(date_prefix=match.group(1), label=match.group(2))


def parse_date_prefix(prefix: str) -> Optional[tuple[date, int]]:
    """
    Invert format_date_prefix.

    A bare legacy "z" suffix maps to disambiguator 25. Returns None when the
    prefix is malformed or its date part is not a real calendar date.
    """
    match = DATE_PREFIX_RE.match(prefix)
    if not match:
        return None

    try:
        day = date.fromisoformat(match.group(1))
    except ValueError:
        return None

    ordinal, letter = match.group(2), match.group(3)
    if ordinal is not None:
        if int(ordinal) < FIRST_ESCAPE_ORDINAL:
            return None
        return day, int(ordinal) - 1
    if letter is not None:
        return day, ord(letter) - LETTER_BASE
    return day, 0


def task_date(name: str) -> Optional[date]:
    """Calendar date of a task directory name, suffix stripped."""
    parsed = parse_directory_name(name)
    if parsed is None:
        return None
    prefix = parse_date_prefix(parsed.date_prefix)
    return prefix[0] if prefix else None
