"""Slack Events API router with signature verification."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from teamwork_unfurl.slack.handlers import handle_slack_event
from teamwork_unfurl.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    background_tasks: BackgroundTasks,
    payload: dict = Depends(verify_slack_request),
) -> JSONResponse:
    """Receive Slack webhook events.

    Slack retries (X-Slack-Retry-Num header) are acknowledged immediately
    so a slow first delivery is not unfurled twice.
    """
    if request.headers.get("X-Slack-Retry-Num"):
        return JSONResponse({"ok": True})

    return handle_slack_event(payload, background_tasks)
