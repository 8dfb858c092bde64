"""Configuration management for autotag."""

from __future__ import annotations

from autotag.config.loader import load_config
from autotag.config.models import AutotagConfig

__all__ = [
    "AutotagConfig",
    "load_config",
]
