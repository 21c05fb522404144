"""ASGI entrypoint for the wedding bot API."""

from wedding_bot.api.app import create_app
from wedding_bot.containers import build_container

app = create_app(build_container())
