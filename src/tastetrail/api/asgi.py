"""ASGI entrypoint for the TasteTrail API."""

from tastetrail.api.app import create_app
from tastetrail.containers import build_container

app = create_app(build_container())
