"""ASGI entrypoint for the donor impact API."""

from donor_impact.api.app import create_app
from donor_impact.containers import build_container

app = create_app(build_container())
