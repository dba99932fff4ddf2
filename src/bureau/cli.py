"""
bureau CLI - task and report numbering from the shell.

Terminology:
  task    = day-scoped directory under the task root
  report  = numbered markdown file in a task
  current = the active task (symlink)
"""

import argparse
import json
import sys
from pathlib import Path

from bureau import __version__
from bureau.constants import RECENT_DAYS, TASKS_DIR, get_tasks_root
from bureau.errors import BureauError
from bureau.reports import start_new_report_file
from bureau.tasks import current_task_info, list_recent_tasks, start_new_task, switch_task


def _root(args) -> Path:
    return get_tasks_root(args.project_dir or Path.cwd(), args.tasks_dir)


def _emit(data) -> None:
    print(json.dumps(data, indent=2))


def cmd_current(args):
    info = current_task_info(_root(args))
    if info is None:
        print("No current task", file=sys.stderr)
        sys.exit(1)
    _emit(info.to_dict())


def cmd_start(args):
    _emit(start_new_task(_root(args), args.slug).to_dict())


def cmd_switch(args):
    _emit(switch_task(_root(args), args.slug).to_dict())


def cmd_recent(args):
    _emit({"recent_task_slugs": list_recent_tasks(_root(args), days=args.days)})


def cmd_report(args):
    path = start_new_report_file(_root(args), args.suffix)
    _emit({"report_file_to_create": str(path)})


def cmd_serve(args):
    from bureau.mcp.server import BureauMCPServer

    BureauMCPServer(project_dir=args.project_dir, tasks_dir=args.tasks_dir).start()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="bureau",
        description="Filesystem-backed task and report numbering for AI agents",
        epilog="task = dated directory | report = NNN-suffix.md | current = active task",
    )
    parser.add_argument("--version", "-V", action="version", version=f"bureau {__version__}")
    parser.add_argument("--project-dir", "-C", type=Path, help="Project directory (default: cwd)")
    parser.add_argument("--tasks-dir", default=TASKS_DIR, help=f"Task root name (default: {TASKS_DIR})")
    subparsers = parser.add_subparsers(dest="command", required=True)

    current_parser = subparsers.add_parser("current", help="Show the current task")
    current_parser.set_defaults(func=cmd_current)

    start_parser = subparsers.add_parser(
        "start",
        help="Start a new task",
        description="Create a dated task directory and make it current",
    )
    start_parser.add_argument("slug", help="Task slug, e.g. fix-login")
    start_parser.set_defaults(func=cmd_start)

    switch_parser = subparsers.add_parser(
        "switch",
        help="Switch the current task",
        description="Point current at the most recent task with this slug",
    )
    switch_parser.add_argument("slug", help="Slug of an existing task")
    switch_parser.set_defaults(func=cmd_switch)

    recent_parser = subparsers.add_parser("recent", help="List recent task slugs")
    recent_parser.add_argument("--days", type=int, default=RECENT_DAYS, help=f"Window in days (default: {RECENT_DAYS})")
    recent_parser.set_defaults(func=cmd_recent)

    report_parser = subparsers.add_parser(
        "report",
        help="Name the next report file",
        description="Print the path of the next numbered report in the current task (not created)",
    )
    report_parser.add_argument("suffix", help="Report suffix, e.g. code-review")
    report_parser.set_defaults(func=cmd_report)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server on stdio")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except BureauError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
