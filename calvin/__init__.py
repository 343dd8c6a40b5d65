"""
calvin - which day, whose calendar

Resolves short date expressions typed on the command line ("tomorrow",
"next monday", "next week", "2025-12-25") into concrete calendar dates,
and maps a bare username onto a calendar ID.

Components:
- dateparse/: Relative date expression resolver and result models
- config_models.py: ~/.calvin configuration (pydantic)
- logging_config.py: structlog setup
- cli.py: `calvin` command line entry point

Usage:
    from calvin.dateparse import resolve

    result = resolve(["alice", "next", "week"])
    for day in result.dates:
        ...
"""

import os
from pathlib import Path

__version__ = "0.2.0"


def config_dir() -> Path:
    """Directory holding the user's calvin configuration."""
    override = os.environ.get("CALVIN_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".calvin"


__all__ = [
    "__version__",
    "config_dir",
]
