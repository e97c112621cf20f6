"""Unfurl aggregation: resolve every shared link concurrently and submit one chat.unfurl.

Per-link failures never escape: the resolver collapses them to None and the
builder turns None into the fallback attachment. A failed chat.unfurl call is
logged and dropped.
"""

import asyncio
import logging

from slack_sdk.errors import SlackApiError

from teamwork_unfurl.logging_config import debug_dump
from teamwork_unfurl.models.slack import Attachment, LinkSharedEvent, SharedLink
from teamwork_unfurl.slack.blocks import build_attachment
from teamwork_unfurl.slack.client import get_slack_client
from teamwork_unfurl.teamwork.resolver import resolve_task

logger = logging.getLogger(__name__)


async def attachment_for_link(link: SharedLink) -> Attachment:
    """Resolve one link against Teamwork and build its attachment."""
    task = await resolve_task(link)
    return build_attachment(link, task)


def key_by_url(attachments: list[Attachment]) -> dict[str, dict]:
    """Key attachments by URL and strip the url from each value.

    Iterates in list order, so when two attachments share a URL the later
    one wins.
    """
    unfurls: dict[str, dict] = {}
    for attachment in attachments:
        unfurls[attachment.url] = attachment.to_unfurl()
    return unfurls


async def unfurl_links(links: list[SharedLink]) -> dict[str, dict]:
    """Build the URL-keyed unfurls mapping for all links of one event."""
    attachments = await asyncio.gather(*[attachment_for_link(link) for link in links])
    return key_by_url(list(attachments))


async def unfurl_event(event: LinkSharedEvent) -> None:
    """Unfurl every link in a link_shared event via chat.unfurl.

    Never raises on a failed submission; the message is just left without
    previews.
    """
    debug_dump("Slack Event", event.model_dump())
    unfurls = await unfurl_links(event.links)

    try:
        client = await get_slack_client()
        await client.chat_unfurl(
            channel=event.channel,
            ts=event.message_ts,
            unfurls=unfurls,
        )
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        logger.error(
            "chat.unfurl rejected for %s in channel %s: %s",
            event.message_ts,
            event.channel,
            error_code,
            exc_info=True,
        )
        return
    except Exception:
        logger.error(
            "chat.unfurl failed for %s in channel %s",
            event.message_ts,
            event.channel,
            exc_info=True,
        )
        return

    logger.info(
        "Unfurled %d link(s) for message %s in channel %s",
        len(unfurls),
        event.message_ts,
        event.channel,
    )
