""" 
MCP Server Wrapping the Task Board API (`mcp_server.py`)
"""

import os

from mcp.server.fastmcp import FastMCP

from taskboard.api_client import TaskApiClient

# Initialize MCP server
mcp = FastMCP("Task Board MCP Server")

client = TaskApiClient(os.environ.get("TASKBOARD_URL", "http://localhost:3002"))
_signed_in = False


def ensure_signed_in():
    global _signed_in
    if not _signed_in:
        client.sign_in(os.environ.get("TASKBOARD_USER", "Jane"))
        _signed_in = True


@mcp.resource("todo://list")
def list_tasks() -> list:
    """Fetch the task list, incomplete tasks first."""
    return client.find_tasks(limit=20, order_by={"completed": "asc"})


@mcp.tool()
def add_task(title: str) -> dict:
    """Add a new task."""
    return client.save_task({"title": title})


@mcp.tool()
def complete_task(task_id: int, completed: bool = True) -> dict:
    """Mark a task as completed (or not)."""
    return client.save_task({"id": task_id, "completed": completed})


@mcp.tool()
def delete_task(task_id: int) -> str:
    """Delete a task."""
    client.delete_task(task_id)
    return f"Deleted task {task_id}"


@mcp.tool()
def set_all_completed(completed: bool) -> dict:
    """Set the completed flag on every task. Needs an admin user."""
    ensure_signed_in()
    return client.set_all(completed)["data"]


if __name__ == "__main__":
    # Run MCP server with stdio transport for local testing
    mcp.run(transport="stdio")
