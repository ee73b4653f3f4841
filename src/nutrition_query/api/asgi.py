"""ASGI entrypoint for the nutrition query API."""

from nutrition_query.api.app import create_app
from nutrition_query.containers import build_container

app = create_app(build_container())
