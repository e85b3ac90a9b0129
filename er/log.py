import sys

from loguru import logger

from er.config import LOG_LEVEL

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_configured = False


def configure_logging(level=None):
    """Send diagnostics to stderr once per process."""
    global _configured
    if _configured and level is None:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or LOG_LEVEL).upper(),
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _configured = True
