"""
MCP server implementation for bureau.

Exposes task and report allocation as MCP tools.
Uses stdlib-only JSON-RPC over stdio (no external dependencies).
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from bureau import __version__
from bureau.constants import TASKS_DIR
from bureau.errors import BureauError

from .handlers import BureauToolHandlers

# Message framing on stdio
FRAMING_HEADERS = "headers"   # Content-Length: N\r\n\r\n{...}
FRAMING_LINES = "lines"       # {...}\n

_TASK_SLUG_SCHEMA = {
    "type": "object",
    "properties": {
        "task_slug": {
            "type": "string",
            "description": 'Slug for the task (e.g., "some-urgent-task")',
        },
    },
    "required": ["task_slug"],
}


class BureauMCPServer:
    """
    MCP server exposing bureau operations.

    Implements JSON-RPC 2.0 over stdio for MCP protocol compliance.
    """

    VERSION = "2024-11-05"
    SERVER_NAME = "bureau"
    SERVER_VERSION = __version__

    def __init__(
        self,
        project_dir: Path | None = None,
        tasks_dir: str = TASKS_DIR,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        """
        Initialize bureau MCP server.

        Args:
            project_dir: Project directory containing the task root.
                        Defaults to current working directory.
            tasks_dir: Task root name, relative to project_dir.
            stdin, stdout, stderr: Streams (default: the sys streams)
        """
        self.project_dir = project_dir or Path.cwd()
        self.handlers = BureauToolHandlers(self.project_dir, tasks_dir=tasks_dir)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._initialized = False
        self._running = False

    def _get_tools(self) -> list[dict[str, Any]]:
        """Get list of available tools."""
        return [
            {
                "name": "current_task",
                "description": "Returns current task info including task slug, reports directory, and report file names",
                "inputSchema": {"type": "object", "properties": {}, "required": []},
            },
            {
                "name": "start_new_task",
                "description": "Creates a new task directory and makes it the current task",
                "inputSchema": _TASK_SLUG_SCHEMA,
            },
            {
                "name": "switch_task",
                "description": "Switches current task to the specified one",
                "inputSchema": {
                    **_TASK_SLUG_SCHEMA,
                    "properties": {
                        "task_slug": {
                            "type": "string",
                            "description": "Slug of the task to switch to",
                        },
                    },
                },
            },
            {
                "name": "list_recent_tasks",
                "description": "Lists all task directories from the last 30 days",
                "inputSchema": {"type": "object", "properties": {}, "required": []},
            },
            {
                "name": "start_new_report_file",
                "description": "Returns the name of the next sequentially numbered report file",
                "inputSchema": {
                    "type": "object",
                    "properties": {
                        "suffix": {
                            "type": "string",
                            "description": 'Suffix for the report file (e.g., "code-review")',
                        },
                    },
                    "required": ["suffix"],
                },
            },
        ]

    def _handle_request(self, request: dict[str, Any]) -> dict[str, Any]:
        """
        Handle a single JSON-RPC request.

        Args:
            request: JSON-RPC request object

        Returns:
            JSON-RPC response object
        """
        method = request.get("method", "")
        params = request.get("params") or {}
        request_id = request.get("id")

        try:
            result = self._dispatch_method(method, params)
            return {"jsonrpc": "2.0", "id": request_id, "result": result}
        except Exception as e:
            return {
                "jsonrpc": "2.0",
                "id": request_id,
                "error": {"code": -32603, "message": str(e)},
            }

    def _dispatch_method(self, method: str, params: dict[str, Any]) -> Any:
        """Dispatch method to handler."""
        if method == "initialize":
            return self._handle_initialize(params)
        elif method in ("initialized", "notifications/initialized"):
            return None  # Notification, no response needed
        elif method == "tools/list":
            return {"tools": self._get_tools()}
        elif method == "tools/call":
            return self._handle_tool_call(params)
        elif method == "ping":
            return {}
        else:
            raise ValueError(f"Unknown method: {method}")

    def _handle_initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle initialize request."""
        self._initialized = True
        return {
            "protocolVersion": self.VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {
                "name": self.SERVER_NAME,
                "version": self.SERVER_VERSION,
            },
        }

    def _call_tool(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        if tool_name == "current_task":
            return self.handlers.handle_current_task()
        elif tool_name == "start_new_task":
            return self.handlers.handle_start_new_task(task_slug=arguments.get("task_slug"))
        elif tool_name == "switch_task":
            return self.handlers.handle_switch_task(task_slug=arguments.get("task_slug"))
        elif tool_name == "list_recent_tasks":
            return self.handlers.handle_list_recent_tasks()
        elif tool_name == "start_new_report_file":
            return self.handlers.handle_start_new_report_file(suffix=arguments.get("suffix"))
        else:
            raise ValueError(f"Unknown tool: {tool_name}")

    def _handle_tool_call(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle tools/call request."""
        tool_name = params.get("name", "")
        arguments = params.get("arguments") or {}

        # Bureau errors are tool-level failures the agent can act on
        try:
            result = self._call_tool(tool_name, arguments)
            is_error = False
        except BureauError as e:
            result = {"error": str(e)}
            is_error = True

        return {
            "content": [{"type": "text", "text": json.dumps(result, indent=2)}],
            "isError": is_error,
        }

    def _read_message(self) -> tuple[dict[str, Any] | None, str]:
        """Read a JSON-RPC message from stdin, with its framing."""
        # Skip blank keep-alive lines
        line = self.stdin.readline()
        while line in ("\r\n", "\n"):
            line = self.stdin.readline()
        if not line:
            return None, FRAMING_LINES

        if line.lstrip().startswith("{"):
            return json.loads(line), FRAMING_LINES

        # Read headers
        headers = {}
        while line and line not in ("\r\n", "\n"):
            if ":" in line:
                key, value = line.split(":", 1)
                headers[key.strip().lower()] = value.strip()
            line = self.stdin.readline()

        # Get content length
        content_length = int(headers.get("content-length", 0))
        if content_length == 0:
            return None, FRAMING_HEADERS

        # Read content
        content = self.stdin.read(content_length)
        return json.loads(content), FRAMING_HEADERS

    def _write_message(self, message: dict[str, Any], framing: str = FRAMING_LINES) -> None:
        """Write a JSON-RPC message to stdout."""
        content = json.dumps(message)
        if framing == FRAMING_HEADERS:
            header = f"Content-Length: {len(content.encode('utf-8'))}\r\n\r\n"
            self.stdout.write(header)
            self.stdout.write(content)
        else:
            self.stdout.write(content + "\n")
        self.stdout.flush()

    def _log(self, message: str) -> None:
        self.stderr.write(f"{message}\n")
        self.stderr.flush()

    def start(self) -> None:
        """Start the MCP server (blocking)."""
        self._running = True

        while self._running:
            try:
                request, framing = self._read_message()
                if request is None:
                    break

                response = self._handle_request(request)

                # Don't send response for notifications (no id)
                if "id" in request:
                    self._write_message(response, framing)

            except json.JSONDecodeError as e:
                self._log(f"Invalid JSON: {e}")
                continue
            except KeyboardInterrupt:
                break
            except Exception as e:
                # Log error but continue
                self._log(f"Error: {e}")

    def stop(self) -> None:
        """Stop the MCP server."""
        self._running = False


def main(argv: list[str] | None = None):
    """Entry point for MCP server."""
    import argparse

    parser = argparse.ArgumentParser(description="Bureau MCP Server")
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Project directory containing the task root",
    )
    parser.add_argument(
        "--tasks-dir",
        default=TASKS_DIR,
        help=f"Task root name inside the project directory (default: {TASKS_DIR})",
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Test mode: print server info and exit",
    )

    args = parser.parse_args(argv)

    server = BureauMCPServer(project_dir=args.project_dir, tasks_dir=args.tasks_dir)

    if args.test:
        print(f"Bureau MCP Server v{server.SERVER_VERSION}")
        print(f"Project: {server.project_dir}")
        print(f"Tasks: {server.handlers.root}")
        print(f"Tools: {len(server._get_tools())}")
        return

    server.start()


if __name__ == "__main__":
    main()
