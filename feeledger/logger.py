import logging
import re
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    """
    Some servers log the message a second time in the extra `color_message`, but we
    don't need it. This processor drops the key from the event dict if it exists.
    """
    event_dict.pop("color_message", None)
    return event_dict


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the feeledger package"""

    # Leave an existing structlog setup owned by the host application alone
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class FeeLedgerStructLogger:
    """
    Structured logger for the feeledger package.

    `bind` returns a new logger carrying the extra key/value pairs, so every
    component keeps its own context. `bind_context` writes to the structlog
    context variables instead, which every logger in the current context picks up.
    """

    def __init__(self, log_name: str = "feeledger", logger=None):
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    @staticmethod
    def _to_snake_case(name):
        """Convert CamelCase to snake_case"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()

    def bind(self, **new_values: Any) -> "FeeLedgerStructLogger":
        return FeeLedgerStructLogger(logger=self.logger.bind(**new_values))

    def bind_context(self, *args, **new_values: Any):
        """
        Bind values to the shared logger context.

        Args:
            *args: Objects that have an 'id' attribute (keyed by their snake_case class name)
            **new_values: Key-value pairs to bind to the context
        """
        for arg in args:
            if hasattr(arg, 'id'):
                key = self._to_snake_case(type(arg).__name__)
                structlog.contextvars.bind_contextvars(**{key: arg.id})
            else:
                self.logger.error(
                    "Unsupported argument when trying to log.",
                    invalid_argument=type(arg).__name__
                )

        structlog.contextvars.bind_contextvars(**new_values)

    @staticmethod
    def unbind_context(*keys: str):
        """Unbind keys from the shared logger context"""
        structlog.contextvars.unbind_contextvars(*keys)

    def debug(self, event: Optional[str] = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: Optional[str] = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: Optional[str] = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: Optional[str] = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: Optional[str] = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: Optional[str] = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_feeledger_logger(log_name: str = "feeledger") -> FeeLedgerStructLogger:
    """Return a structured logger for a feeledger component."""
    return FeeLedgerStructLogger(log_name)


def init_logger(config):
    """
    Initialize the structured logger for the feeledger package.

    Args:
        config: SystemConfig (or any object exposing DEBUG, log_level and json_logs)

    Returns:
        FeeLedgerStructLogger: Configured structured logger instance
    """
    log_level = getattr(config, "log_level", "INFO")
    log_level = getattr(log_level, "value", log_level)
    if getattr(config, "DEBUG", False):
        log_level = "DEBUG"

    setup_logging(json_logs=getattr(config, "json_logs", False), log_level=log_level)

    return FeeLedgerStructLogger("feeledger")
