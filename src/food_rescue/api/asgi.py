"""ASGI entrypoint for the food rescue API."""

from food_rescue.api.app import create_app
from food_rescue.containers import build_container

app = create_app(build_container())
