"""Normalized Teamwork task record.

Teamwork's v1 ``/tasks/{id}.json`` endpoint returns hyphenated keys inside a
``todo-item`` object. ``TaskRecord.from_teamwork`` maps that payload onto
snake_case fields, turning empty values into ``None`` so the attachment
builder only has to check for presence.
"""

from pydantic import BaseModel, ConfigDict, Field


class ParentTask(BaseModel):
    """Reference to a task's parent."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    title: str


class TaskRecord(BaseModel):
    """Task data the attachment builder renders."""

    # Teamwork sends ids as integers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    title: str
    creator_first_name: str
    creator_last_name: str
    project_id: str
    project_name: str
    status: str
    list_id: str
    list_name: str
    assignee_first_name: str | None = None
    parent_task: ParentTask | None = None
    board_column_name: str | None = None
    due_date: str | None = Field(default=None, pattern=r"^\d{8}$")
    estimated_minutes: int | None = Field(default=None, ge=0)

    @classmethod
    def from_teamwork(cls, item: dict) -> "TaskRecord":
        """Build a TaskRecord from a raw Teamwork ``todo-item`` dict.

        Raises pydantic.ValidationError if a mandatory field is missing or
        an optional one is malformed.
        """
        assignee = None
        if item.get("responsible-party-id"):
            assignee = item.get("responsible-party-firstname") or None

        parent = None
        raw_parent = item.get("parent-task")
        if raw_parent and raw_parent.get("id"):
            parent = ParentTask(id=raw_parent["id"], title=raw_parent.get("content", ""))

        board_column = item.get("boardColumn") or {}

        return cls(
            id=item.get("id"),
            title=item.get("content"),
            creator_first_name=item.get("creator-firstname"),
            creator_last_name=item.get("creator-lastname"),
            project_id=item.get("project-id"),
            project_name=item.get("project-name"),
            status=item.get("status"),
            list_id=item.get("todo-list-id"),
            list_name=item.get("todo-list-name"),
            assignee_first_name=assignee,
            parent_task=parent,
            board_column_name=board_column.get("name") or None,
            due_date=item.get("due-date") or None,
            estimated_minutes=item.get("estimated-minutes") or None,
        )
