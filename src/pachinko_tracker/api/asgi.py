"""ASGI entrypoint for the pachinko session tracker API."""

from pachinko_tracker.api.app import create_app
from pachinko_tracker.containers import build_container

app = create_app(build_container())
