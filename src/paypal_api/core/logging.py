import logging
import sys

import structlog

from paypal_api.core.config import PayPalSettings


def get_log_renderer(settings: PayPalSettings):
    """JSON lines when requested, pretty console output otherwise."""
    if settings.log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty(), sort_keys=False)


def configure_logging(settings: PayPalSettings) -> None:
    """Set up structlog on top of stdlib logging.

    Opt-in: the library never calls this itself, hosts that already configure
    structlog can skip it.
    """
    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            get_log_renderer(settings),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("paypal_api")
    logger.handlers = [handler]
    logger.setLevel(settings.log_level.upper())
    logger.propagate = False


# Event names
class ClientEvents:
    """Standard names for client log events"""

    API_REQUEST = "api.request"
    API_ERROR = "api.error"
    TOKEN_REFRESHED = "auth.token_refreshed"
    TOKEN_REFRESH_FAILED = "auth.token_refresh_failed"
