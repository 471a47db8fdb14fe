"""ASGI entrypoint for the fluorescence scan subgraph."""

from fluorescence_scan.api.app import create_app
from fluorescence_scan.containers import build_container

app = create_app(build_container())
