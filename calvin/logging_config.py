"""
Log rendering for the calvin CLI, using structlog's ProcessorFormatter.

Modules log through plain ``logging.getLogger(__name__)``, so library
callers that never call setup_logging() get stdlib behaviour (warnings on
stderr). The CLI calls setup_logging() to render those records with
structlog: short console lines by default, JSON lines with timestamps
when CALVIN_LOG_FORMAT=json. Output always goes to stderr.

Usage:
    from calvin.logging_config import setup_logging
    setup_logging()
"""

from __future__ import annotations

import logging
import os
import sys

import structlog


def _renderer(json_output: bool) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    if level is None:
        level = os.environ.get("CALVIN_LOG_LEVEL", "WARNING")

    if json_output is None:
        json_output = os.environ.get("CALVIN_LOG_FORMAT", "").lower() == "json"

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    # Timestamps only matter once lines are shipped somewhere
    if json_output:
        pre_chain.append(structlog.processors.TimeStamper(fmt="iso"))

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)


__all__ = ["setup_logging"]
