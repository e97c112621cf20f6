"""Task resolution: shared link -> normalized TaskRecord, or None.

resolve_task never raises. Lookup failures and missing tasks collapse to
None so the caller renders the same fallback card for both.
"""

import logging

from teamwork_unfurl.logging_config import debug_dump
from teamwork_unfurl.models.slack import SharedLink
from teamwork_unfurl.models.task import TaskRecord
from teamwork_unfurl.teamwork.client import fetch_task

logger = logging.getLogger(__name__)


async def resolve_task(link: SharedLink) -> TaskRecord | None:
    """Look up the Teamwork task behind ``link``."""
    try:
        item = debug_dump("Teamwork Task", await fetch_task(link.url))
        if not item:
            logger.warning("Teamwork task not found: %s", link.url)
            return None
        return TaskRecord.from_teamwork(item)
    except Exception as exc:
        logger.warning("Teamwork lookup failed for %s: %s", link.url, exc, exc_info=True)
        return None
