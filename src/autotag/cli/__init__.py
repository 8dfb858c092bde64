"""Command line interface for autotag."""

from __future__ import annotations

from autotag.cli.app import app

__all__ = ["app"]
