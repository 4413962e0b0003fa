from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog


_SHARED_PROCESSORS: list[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _formatter(renderer: Any) -> structlog.stdlib.ProcessorFormatter:
    chain: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if isinstance(renderer, structlog.processors.JSONRenderer):
        chain.append(structlog.processors.format_exc_info)
    chain.append(renderer)
    return structlog.stdlib.ProcessorFormatter(foreign_pre_chain=_SHARED_PROCESSORS, processors=chain)


def setup_logging(
    *,
    level: str | None = None,
    log_file: str | None = None,
    fmt: str | None = None,
) -> None:
    """
    Route structlog and stdlib records (httpx included) through one handler set.

    stderr only; stdout is left to the CLI summary.
    - LOG_LEVEL: default INFO
    - LOG_FORMAT: json (default) | console, for the stderr handler
    - LOG_FILE: optional JSON-lines file, always JSON
    """
    lvl = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    file_path = log_file or os.getenv("LOG_FILE")
    render_fmt = (fmt or os.getenv("LOG_FORMAT", "json")).lower()

    root = logging.getLogger()
    root.setLevel(lvl)
    root.handlers.clear()

    console_renderer = (
        structlog.dev.ConsoleRenderer(colors=False) if render_fmt == "console" else structlog.processors.JSONRenderer()
    )
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_formatter(console_renderer))
    root.addHandler(console)

    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(file_path, encoding="utf-8")
        fh.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        root.addHandler(fh)

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(**kwargs: Any):
    # Lazy: the proxy resolves the configuration on first use, not at import.
    return structlog.get_logger(**kwargs)
