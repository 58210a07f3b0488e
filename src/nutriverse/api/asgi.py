"""ASGI entrypoint for the NutriVerse API."""

from nutriverse.api.app import create_app
from nutriverse.containers import build_container

app = create_app(build_container())
