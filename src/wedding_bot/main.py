"""Run the webhook server with uvicorn."""

import uvicorn

from wedding_bot.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured port."""
    settings = Settings()
    uvicorn.run("wedding_bot.api.asgi:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
