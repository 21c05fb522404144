"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse

from wedding_bot.api.diagnostics import router as diagnostics_router
from wedding_bot.api.line_models import LineEvent, LineWebhook
from wedding_bot.app_logging import configure_logging
from wedding_bot.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    _report_missing_settings(container, logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(diagnostics_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness probe."""
        return "OK"

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/line/webhook")
    async def line_webhook(payload: LineWebhook, request: Request) -> Response:
        """Handle a batch of LINE webhook events concurrently."""
        state_container: AppContainer = request.app.state.container
        try:
            await asyncio.gather(
                *(
                    _handle_event(state_container, event)
                    for event in payload.events
                )
            )
        except Exception:
            logger.exception("Webhook error")
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(status_code=status.HTTP_200_OK)

    return app


async def _handle_event(container: AppContainer, event: LineEvent) -> None:
    """Route a single event; only message events are handled."""
    if event.type != "message" or event.message is None:
        return
    await container.event_handler.handle_message(
        user_id=event.source.user_id if event.source else None,
        reply_token=event.reply_token,
        message_type=event.message.type,
        text=event.message.text,
    )


def _report_missing_settings(container: AppContainer, logger: logging.Logger) -> None:
    """Log missing credentials without preventing startup."""
    missing_line = container.settings.missing_line_settings()
    if missing_line:
        logger.error("Missing LINE env vars. Please set %s", " and ".join(missing_line))
    missing_supabase = container.settings.missing_supabase_settings()
    if missing_supabase:
        logger.error(
            "Missing Supabase env vars. Please set %s", " and ".join(missing_supabase)
        )
