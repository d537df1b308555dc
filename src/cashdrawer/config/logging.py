"""Log setup for the cashdrawer CLI.

Records from ``logging.getLogger(__name__)`` and ``structlog.get_logger``
end up on one stderr handler, rendered for a terminal or as JSON lines
(``--log-json``). Each line carries the ``op`` being run, bound by
:func:`cashdrawer.services.telemetry.traced`.
"""

from __future__ import annotations

import logging
import sys
from decimal import Decimal

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

PACKAGE_LOGGER = "cashdrawer"


def amounts_as_text(_logger: WrappedLogger, _name: str, event_dict: EventDict) -> EventDict:
    """Write Decimal amounts as ``"8.13"`` rather than ``Decimal('8.13')``."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
    return event_dict


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        amounts_as_text,
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging to stderr through structlog.

    The package logs at DEBUG with *verbose*, otherwise WARNING; other
    libraries stay at WARNING either way. Calling again replaces the
    previous setup.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
