import os
import logging
from logging.handlers import RotatingFileHandler
import structlog
from structlog.stdlib import ProcessorFormatter, BoundLogger, add_logger_name
from structlog.processors import (
    JSONRenderer,
    TimeStamper,
    add_log_level,
    format_exc_info,
)
from rich.logging import RichHandler
from structlog.dev import ConsoleRenderer


XDG_STATE_HOME = os.environ.get("XDG_STATE_HOME") or os.path.expanduser(
    "~/.local/state"
)
LOG_FILE_PATH = os.path.join(XDG_STATE_HOME, "dotpanel", "dotpanel.log")
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2

LOGGER_NAME = "dotpanel"
# file gets everything, the console only progress
FILE_LOG_LEVEL = logging.DEBUG
CONSOLE_LOG_LEVEL = logging.INFO


def setup_logging(
    console_level: int = CONSOLE_LOG_LEVEL,
    file_level: int = FILE_LOG_LEVEL,
    log_file: str = LOG_FILE_PATH,
) -> BoundLogger:
    """
    Route the panel's structlog events through the "dotpanel" stdlib logger:
    JSON lines to a rotating file and a rich console handler.
    """
    pre_chain = [
        add_log_level,
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        format_exc_info,
    ]
    structlog.configure(
        processors=pre_chain
        + [
            add_logger_name,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    panel_logger = logging.getLogger(LOGGER_NAME)
    panel_logger.setLevel(min(console_level, file_level))
    panel_logger.propagate = False
    for handler in panel_logger.handlers[:]:
        panel_logger.removeHandler(handler)

    os.makedirs(os.path.dirname(log_file), exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=pre_chain + [add_logger_name],
            processor=JSONRenderer(),
        )
    )
    panel_logger.addHandler(file_handler)

    console_handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        show_time=False,
    )
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processor=ConsoleRenderer(colors=False),
            fmt="%(message)s",
        )
    )
    panel_logger.addHandler(console_handler)
    return structlog.get_logger(LOGGER_NAME)
