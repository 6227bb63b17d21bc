"""Logging helpers with secret masking."""

from __future__ import annotations

import logging
import re
import sys


_SECRET_RE = re.compile(
    r"\b([\w.-]*(?:key|token|secret|pass)[\w.-]*)=(.+)", re.IGNORECASE | re.DOTALL
)


class SecretFilter(logging.Filter):
    """Mask ``key=value`` pairs whose key looks like a credential.

    The value is taken to run to the end of the message, so secrets containing
    spaces are hidden whole.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _SECRET_RE.sub(lambda m: f"{m.group(1)}=***", message)
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


logger = logging.getLogger("agent")
logger.addFilter(SecretFilter())


def configure_logging(level: str = "WARNING") -> logging.Handler:
    """Send ``agent`` log records to stderr at ``level``.

    Command results go to stdout, so log lines are kept off it.  Calling this
    again replaces the handler installed by the previous call.
    """
    for handler in list(logger.handlers):
        if getattr(handler, "_agent_cli", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler.addFilter(SecretFilter())
    handler._agent_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return handler
