"""FastAPI application with lifespan and health endpoints."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from teamwork_unfurl.config import get_settings
from teamwork_unfurl.logging_config import configure_logging
from teamwork_unfurl.slack.router import router as slack_router
from teamwork_unfurl.teamwork.client import close_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging on startup, close the Teamwork client on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield
    await close_client()


app = FastAPI(
    title="Teamwork Unfurl",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    """Plain-text liveness check."""
    return "pong"


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "teamwork-unfurl",
        "version": "0.1.0",
    }


def main() -> None:
    """Run the app under uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
