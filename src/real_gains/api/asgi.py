"""ASGI entrypoint for the Real Gains API."""

from real_gains.api.app import create_app
from real_gains.containers import build_container

app = create_app(build_container())
