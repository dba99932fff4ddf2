"""
Tool handlers for bureau MCP server.

Maps MCP tool calls to bureau task and report operations.
"""

import os
from pathlib import Path
from typing import Any

from bureau.constants import TASKS_DIR, get_tasks_root
from bureau.reports import start_new_report_file
from bureau.tasks import (
    TaskInfo,
    current_task_info,
    list_recent_tasks,
    start_new_task,
    switch_task,
)


class BureauToolHandlers:
    """Handlers for bureau MCP tools."""

    def __init__(self, project_dir: Path, tasks_dir: str = TASKS_DIR):
        """
        Initialize tool handlers.

        Args:
            project_dir: Project directory containing the task root.
            tasks_dir: Task root name, relative to project_dir.
        """
        self.project_dir = Path(project_dir)
        self.root = get_tasks_root(self.project_dir, tasks_dir)

    def _display_path(self, path: Path) -> str:
        """Show paths relative to the project directory when inside it."""
        try:
            return str(Path(path).relative_to(self.project_dir))
        except ValueError:
            return os.fspath(path)

    def _task_result(self, info: TaskInfo) -> dict[str, Any]:
        result = info.to_dict()
        result["reports_dir"] = self._display_path(info.reports_dir)
        return result

    def handle_current_task(self) -> dict[str, Any]:
        """
        Get the current task.

        Returns:
            Task info, or {"error": "No current task"}
        """
        info = current_task_info(self.root)
        if info is None:
            return {"error": "No current task"}
        return self._task_result(info)

    def handle_start_new_task(self, task_slug: str | None = None) -> dict[str, Any]:
        """
        Create a new task directory and make it current.

        Args:
            task_slug: Slug for the task

        Returns:
            Info for the new task
        """
        return self._task_result(start_new_task(self.root, task_slug))

    def handle_switch_task(self, task_slug: str | None = None) -> dict[str, Any]:
        """
        Switch the current task.

        Args:
            task_slug: Slug of an existing task

        Returns:
            Info for the task switched to
        """
        return self._task_result(switch_task(self.root, task_slug))

    def handle_list_recent_tasks(self) -> dict[str, Any]:
        """List task slugs from the last 30 days, oldest first."""
        return {"recent_task_slugs": list_recent_tasks(self.root)}

    def handle_start_new_report_file(self, suffix: str | None = None) -> dict[str, Any]:
        """
        Name the next report file in the current task.

        Args:
            suffix: Report suffix

        Returns:
            {"report_file_to_create": path}
        """
        path = start_new_report_file(self.root, suffix)
        return {"report_file_to_create": self._display_path(path)}
