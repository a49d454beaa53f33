"""Serverless entrypoint exposing the donor impact ASGI app."""

import sys
from pathlib import Path

_SRC_DIR = Path(__file__).resolve().parent.parent / "src"
if _SRC_DIR.is_dir() and str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from donor_impact.api.asgi import app  # noqa: E402

__all__ = ["app"]
