"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from teamwork_unfurl.app import app
from teamwork_unfurl.models.slack import SharedLink
from teamwork_unfurl.models.task import ParentTask, TaskRecord

DOMAIN = "acme.teamwork.com"
TASK_URL = f"https://{DOMAIN}/#/tasks/12345"


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def link() -> SharedLink:
    """A shared link to a Teamwork task."""
    return SharedLink(url=TASK_URL, domain=DOMAIN)


@pytest.fixture()
def minimal_task() -> TaskRecord:
    """A task with only the mandatory fields."""
    return TaskRecord(
        id="12345",
        title="Fix login redirect",
        creator_first_name="Ada",
        creator_last_name="Lovelace",
        project_id="100",
        project_name="Website",
        status="new",
        list_id="200",
        list_name="Backlog",
    )


@pytest.fixture()
def full_task(minimal_task: TaskRecord) -> TaskRecord:
    """A task with every optional field populated."""
    return minimal_task.model_copy(
        update={
            "assignee_first_name": "Grace",
            "parent_task": ParentTask(id="999", title="Auth epic"),
            "board_column_name": "In Progress",
            "due_date": "20230115",
            "estimated_minutes": 125,
        }
    )


@pytest.fixture()
def raw_todo_item() -> dict:
    """A Teamwork v1 ``todo-item`` payload with every field the card uses."""
    return {
        "id": 12345,
        "content": "Fix login redirect",
        "creator-firstname": "Ada",
        "creator-lastname": "Lovelace",
        "project-id": 100,
        "project-name": "Website",
        "status": "new",
        "todo-list-id": 200,
        "todo-list-name": "Backlog",
        "responsible-party-id": "42",
        "responsible-party-firstname": "Grace",
        "parent-task": {"id": "999", "content": "Auth epic"},
        "boardColumn": {"id": 7, "name": "In Progress", "color": "#fff"},
        "due-date": "20230115",
        "estimated-minutes": 125,
    }
