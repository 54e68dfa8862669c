"""Logging configuration for discord_router.

Provides secret sanitization and structlog + stdlib integration.

Logger hierarchy (stdlib dotted names, structlog wraps them):
    root                      → ConsoleHandler (terminal)
      └─ discord_router       → RotatingFileHandler → discord_router.log
           ├─ discord_router.router
           ├─ discord_router.api
           ├─ discord_router.loader
           └─ discord_router.bot
"""

import logging
import logging.handlers
import re
import sys
from typing import Any, Dict

import structlog

LOGGER_PREFIX = "discord_router"

# ---------------------------------------------------------------------------
# Secret sanitization
# ---------------------------------------------------------------------------

_SECRET_PATTERNS = [
    # Authorization header values
    re.compile(r"(?:Bot|Bearer)\s+[A-Za-z0-9_.\-]{20,}"),
    # Bare Discord bot tokens: base64 user id . timestamp . hmac
    re.compile(r"[A-Za-z0-9_\-]{23,28}\.[A-Za-z0-9_\-]{6,7}\.[A-Za-z0-9_\-]{27,40}"),
]

_REDACTED = "***REDACTED***"


def _scrub_value(value: str) -> str:
    """Scrub tokens from a single string value."""
    for pattern in _SECRET_PATTERNS:
        value = pattern.sub(_REDACTED, value)
    return value


def sanitize_secrets(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """structlog processor that scrubs bot tokens from log events.

    Walks all string values in the event dict (one level into lists,
    tuples and dicts) and replaces matches with a placeholder.
    """
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _scrub_value(value)
        elif isinstance(value, (list, tuple)):
            event_dict[key] = type(value)(
                _scrub_value(v) if isinstance(v, str) else v
                for v in value
            )
        elif isinstance(value, dict):
            event_dict[key] = {
                k: _scrub_value(v) if isinstance(v, str) else v
                for k, v in value.items()
            }
    return event_dict


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

def setup_logging(config=None) -> None:
    """Configure structured logging.

    Sets up:
    1. Root logger: console handler on stderr (stdout is left free for
       piping bot output).
    2. "discord_router" logger: RotatingFileHandler when the config
       names a log directory.

    Args:
        config: Optional Config instance. The first call (before config
                loads) uses defaults with cache_logger_on_first_use=False;
                a second call with the real config caches loggers.
    """
    if config is not None:
        log_dir = config.log_dir
        root_level_name = config.logging_level.upper()
        max_bytes = config.logging_max_file_size_mb * 1024 * 1024
        backup_count = config.logging_backup_count
        cache_loggers = True
    else:
        log_dir = None
        root_level_name = "INFO"
        max_bytes = 10 * 1024 * 1024  # 10 MB
        backup_count = 5
        cache_loggers = False

    root_level = getattr(logging, root_level_name, logging.INFO)

    file_handlers_ok = False
    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handlers_ok = True
        except OSError as exc:
            # Fall back to console-only; the bot must not crash on logging failure
            print(
                f"WARNING: Cannot create log directory {log_dir}: {exc}. "
                "Falling back to console-only logging.",
                file=sys.stderr,
            )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers filter by level
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(root_level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    )
    root_logger.addHandler(console_handler)

    pkg_logger = logging.getLogger(LOGGER_PREFIX)
    pkg_logger.setLevel(root_level)
    pkg_logger.handlers.clear()
    pkg_logger.propagate = True

    if file_handlers_ok:
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{LOGGER_PREFIX}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(root_level)
        file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.format_exc_info,
                structlog.dev.ConsoleRenderer(colors=False),
            ],
        ))
        pkg_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            sanitize_secrets,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )
