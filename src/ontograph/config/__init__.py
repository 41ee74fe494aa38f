"""
Configuration layer for ontograph.

Configuration is:
- Explicit (passed to constructors, never read from globals)
- Typed (frozen dataclasses)
- Optionally sourced from ONTOGRAPH_* environment variables via load_config
"""

from ontograph.config.settings import (
    GraphConfig,
    LoaderConfig,
    OntographConfig,
)
from ontograph.config.environment import load_config

__all__ = [
    "GraphConfig",
    "LoaderConfig",
    "OntographConfig",
    "load_config",
]
