"""Teamwork task URL parsing."""

import re
from urllib.parse import urlparse

# Matches the task id in every Teamwork task URL flavour:
# /#/tasks/123, /#tasks/123, /app/tasks/123, /tasks/123
TASK_ID_PATTERN = re.compile(r"(?:^|/|#)tasks/(\d+)")


def parse_task_id(url: str) -> str | None:
    """Return the numeric task id from a Teamwork task URL, or None.

    Looks in both the path and the fragment since older Teamwork links put
    the route after ``#``.
    """
    parsed = urlparse(url)
    match = TASK_ID_PATTERN.search(f"{parsed.path}#{parsed.fragment}")
    return match.group(1) if match else None


def task_api_url(url: str, task_id: str) -> str:
    """Build the v1 task endpoint on the same Teamwork site as ``url``."""
    host = urlparse(url).netloc
    return f"https://{host}/tasks/{task_id}.json"
