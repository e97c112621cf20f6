"""Slack ingress and egress: event handling, signature verification, and link unfurling."""

from teamwork_unfurl.slack.blocks import build_attachment, fallback_attachment
from teamwork_unfurl.slack.client import get_slack_client, reset_client
from teamwork_unfurl.slack.router import router
from teamwork_unfurl.slack.unfurl import key_by_url, unfurl_event, unfurl_links

__all__ = [
    "build_attachment",
    "fallback_attachment",
    "get_slack_client",
    "key_by_url",
    "reset_client",
    "router",
    "unfurl_event",
    "unfurl_links",
]
