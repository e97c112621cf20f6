"""Data models for the unfurl pipeline."""

from teamwork_unfurl.models.slack import Attachment, LinkSharedEvent, SharedLink
from teamwork_unfurl.models.task import ParentTask, TaskRecord

__all__ = [
    "Attachment",
    "LinkSharedEvent",
    "ParentTask",
    "SharedLink",
    "TaskRecord",
]
