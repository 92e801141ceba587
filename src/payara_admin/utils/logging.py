"""Structured logging for admin client runs.

Events go to stderr so the CLI can print server responses on stdout.
"""

import logging
import re
import sys
from typing import Optional

import structlog
from structlog.contextvars import bind_contextvars

from payara_admin.core.exceptions import ConfigurationError

REDACTED = "[REDACTED]"

# asadmin options and headers that carry credentials
CREDENTIAL_KEYS = frozenset({
    "password",
    "passwordfile",
    "admin_password",
    "authorization",
    "token",
    "secret",
})

_URL_USERINFO = re.compile(r"(?P<scheme>https?://)[^/@\s]+@")


def _mask_credentials(_, __, event_dict: dict) -> dict:
    """Hide credential fields and user:password parts of logged URLs."""
    for key, value in event_dict.items():
        if key.lower() in CREDENTIAL_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, str) and "@" in value:
            event_dict[key] = _URL_USERINFO.sub(r"\g<scheme>" + REDACTED + "@", value)
    return event_dict


def _level_number(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {log_level}")
    return level


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog for a CLI or library run.

    httpx logs through the standard library, so that is routed to the same
    stream at the same level.
    """
    level = _level_number(log_level)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.set_exc_info,
            _mask_credentials,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def bind_deploy_context(target: Optional[str] = None, name: Optional[str] = None) -> None:
    """Tag every following event with the deployment target and application."""
    if target:
        bind_contextvars(target=target)
    if name:
        bind_contextvars(application=name)
