"""Slack event dispatch for link_shared events."""

import logging

from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from teamwork_unfurl.models.slack import LinkSharedEvent
from teamwork_unfurl.slack.unfurl import unfurl_event

logger = logging.getLogger(__name__)


def handle_slack_event(payload: dict, background_tasks: BackgroundTasks) -> JSONResponse:
    """Dispatch a Slack event based on its type.

    - url_verification: return the challenge token
    - event_callback: process the contained event
    - anything else: acknowledge with 200
    """
    if payload.get("type") == "url_verification":
        return JSONResponse({"challenge": payload["challenge"]})

    if payload.get("type") == "event_callback":
        event = payload.get("event", {})
        handle_link_shared_event(event, background_tasks)

    return JSONResponse({"ok": True})


def handle_link_shared_event(event: dict, background_tasks: BackgroundTasks) -> None:
    """Validate a link_shared event and schedule its unfurl in the background.

    Other event types and events without links are ignored. Malformed
    link_shared payloads are logged and dropped.
    """
    if event.get("type") != "link_shared":
        return

    try:
        link_event = LinkSharedEvent.model_validate(event)
    except ValidationError as exc:
        logger.warning("Malformed link_shared event: %s", exc)
        return

    if not link_event.links:
        return

    logger.info(
        "Dispatching %d link(s) from message %s in channel %s",
        len(link_event.links),
        link_event.message_ts,
        link_event.channel,
    )
    background_tasks.add_task(unfurl_event, link_event)
