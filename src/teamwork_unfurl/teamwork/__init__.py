"""Teamwork integration: task URL parsing, API client, and task resolution."""

from teamwork_unfurl.teamwork.client import (
    close_client,
    fetch_task,
    get_teamwork_client,
    reset_client,
)
from teamwork_unfurl.teamwork.resolver import resolve_task
from teamwork_unfurl.teamwork.urls import parse_task_id

__all__ = [
    "close_client",
    "fetch_task",
    "get_teamwork_client",
    "parse_task_id",
    "reset_client",
    "resolve_task",
]
