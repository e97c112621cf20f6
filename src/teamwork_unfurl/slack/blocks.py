"""Pure functions building Slack Block Kit unfurl attachments for Teamwork tasks.

An attachment is a task header section, a "created by" context line, a
divider, and a trailing section of fields. The fields section always carries
Project, Status and List; the remaining fields are appended in a fixed order
only when the task has the data.
"""

import copy
from collections.abc import Callable

from teamwork_unfurl.models.slack import Attachment, SharedLink
from teamwork_unfurl.models.task import TaskRecord

INVALID_TASK_TEXT = "TW API error or Invalid Task."

# Never mutated; fallback_attachment deep-copies it per call.
_FALLBACK_BLOCKS: tuple[dict, ...] = (
    {
        "type": "context",
        "elements": [{"type": "plain_text", "text": INVALID_TASK_TEXT}],
    },
)

FieldProvider = Callable[[SharedLink, TaskRecord], dict | None]


def _mrkdwn(text: str) -> dict:
    """Create a mrkdwn text object."""
    return {"type": "mrkdwn", "text": text}


def _section_block(text: str) -> dict:
    """Create a section block with mrkdwn text."""
    return {"type": "section", "text": _mrkdwn(text)}


def _fields_block(fields: list[dict]) -> dict:
    """Create a section block made of fields."""
    return {"type": "section", "fields": fields}


def _context_block(text: str) -> dict:
    """Create a context block with one plain_text element."""
    return {"type": "context", "elements": [{"type": "plain_text", "text": text}]}


def _divider_block() -> dict:
    """Create a divider block."""
    return {"type": "divider"}


def format_due_date(due_date: str) -> str:
    """Render a Teamwork ``YYYYMMDD`` due date for the Due field.

    Keeps the slice offsets the card has always used: "20230115" -> "202-1-5".
    """
    return f"{due_date[0:3]}-{due_date[4:5]}-{due_date[6:7]}"


def format_estimate(minutes: int) -> str:
    """Render minutes as unpadded ``hours:minutes`` (125 -> "2:5")."""
    return f"{minutes // 60}:{minutes % 60}"


# -- Field providers: each returns one field or None --


def _project_field(link: SharedLink, task: TaskRecord) -> dict:
    return _mrkdwn(
        f"*Project:*  <https://{link.domain}/projects/{task.project_id}|{task.project_name}>"
    )


def _status_field(link: SharedLink, task: TaskRecord) -> dict:
    return _mrkdwn(f"*Status:*  {task.status}")


def _list_field(link: SharedLink, task: TaskRecord) -> dict:
    return _mrkdwn(
        f"*List:*  <https://{link.domain}/tasklists/{task.list_id}|{task.list_name}>"
    )


def _assignee_field(link: SharedLink, task: TaskRecord) -> dict | None:
    if not task.assignee_first_name:
        return None
    return _mrkdwn(f"*Assignee:*  {task.assignee_first_name}")


def _parent_field(link: SharedLink, task: TaskRecord) -> dict | None:
    parent = task.parent_task
    if parent is None:
        return None
    return _mrkdwn(f"*Parent:*  <https://{link.domain}/tasks/{parent.id}|{parent.title}>")


def _board_field(link: SharedLink, task: TaskRecord) -> dict | None:
    if not task.board_column_name:
        return None
    return _mrkdwn(f"*Board:*  {task.board_column_name}")


def _due_field(link: SharedLink, task: TaskRecord) -> dict | None:
    if not task.due_date:
        return None
    return _mrkdwn(f"*Due:*  {format_due_date(task.due_date)}")


def _estimated_field(link: SharedLink, task: TaskRecord) -> dict | None:
    if not task.estimated_minutes:
        return None
    return _mrkdwn(f"*Estimated:*  {format_estimate(task.estimated_minutes)}")


FIELD_PROVIDERS: tuple[FieldProvider, ...] = (
    _project_field,
    _status_field,
    _list_field,
    _assignee_field,
    _parent_field,
    _board_field,
    _due_field,
    _estimated_field,
)


def build_fields(link: SharedLink, task: TaskRecord) -> list[dict]:
    """Run every field provider in order, dropping the ones with no data."""
    fields = []
    for provider in FIELD_PROVIDERS:
        field = provider(link, task)
        if field is not None:
            fields.append(field)
    return fields


def fallback_attachment(url: str) -> Attachment:
    """Return a fresh copy of the "invalid task" attachment tagged with ``url``."""
    return Attachment(url=url, blocks=copy.deepcopy(list(_FALLBACK_BLOCKS)))


def build_attachment(link: SharedLink, task: TaskRecord | None) -> Attachment:
    """Build the unfurl attachment for one shared link.

    Returns the fallback attachment when ``task`` is None.
    """
    if task is None:
        return fallback_attachment(link.url)

    blocks = [
        _section_block(f"*Task:* <{link.url}|{task.title}>"),
        _context_block(f"Created by: {task.creator_first_name} {task.creator_last_name}"),
        _divider_block(),
        _fields_block(build_fields(link, task)),
    ]
    return Attachment(url=link.url, blocks=blocks)
