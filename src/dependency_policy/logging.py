"""Route dependency-policy diagnostics to stderr through structlog.

The check report (options announcement, verdict, error list) is plain
``print`` output. Everything logged here goes to stderr so a workflow step
can capture or parse the report without log lines mixed in. ``--json`` runs
of ``scripts/check.py`` switch the log lines to JSON as well.
"""

from __future__ import annotations

import logging
import sys

import structlog


PACKAGE_LOGGER = "dependency_policy"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single stderr handler rendering structlog events.

    Args:
        verbose: Let ``dependency_policy`` debug events through (manifest
            sizes, each violation found). Otherwise only warnings such as an
            unknown package type or an unreadable manifest are shown.
        log_json: Render one JSON object per event instead of console lines.
    """
    pkg_level = logging.DEBUG if verbose else logging.WARNING

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    # Replace handlers left by an earlier call in the same process.
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(pkg_level)
