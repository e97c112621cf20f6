"""Slack request signature verification as a FastAPI dependency."""

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from teamwork_unfurl.config import get_settings


async def verify_slack_request(request: Request) -> dict:
    """Verify the Slack request signature and return the parsed JSON payload.

    The signature is checked against the raw body bytes before any JSON
    parsing. Raises HTTPException(403) if the signature is invalid.
    """
    settings = get_settings()
    body = await request.body()

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)

    if not verifier.is_valid(body=body.decode("utf-8"), timestamp=timestamp, signature=signature):
        raise HTTPException(status_code=403, detail="Invalid Slack signature")

    return await request.json()
