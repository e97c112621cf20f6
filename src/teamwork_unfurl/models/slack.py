"""Slack-side models: shared links, the link_shared event, and unfurl attachments."""

from pydantic import BaseModel, ConfigDict


class SharedLink(BaseModel):
    """A single link from a link_shared event."""

    model_config = ConfigDict(frozen=True)

    url: str
    domain: str  # e.g. "acme.teamwork.com"


class LinkSharedEvent(BaseModel):
    """A Slack link_shared event with the fields the unfurl pipeline needs."""

    channel: str
    message_ts: str  # Slack message ts, e.g., "1234567890.123456"
    links: list[SharedLink]
    user: str | None = None
    unfurl_id: str | None = None
    source: str | None = None  # "conversations_history" or "composer"


class Attachment(BaseModel):
    """Preview document for one shared link.

    ``url`` records which link the blocks belong to; it is stripped before
    the attachment goes out in a chat.unfurl call.
    """

    url: str
    blocks: list[dict]

    def to_unfurl(self) -> dict:
        """Return the chat.unfurl wire shape (blocks only, no url)."""
        return self.model_dump(exclude={"url"})
