"""Error types and graceful-degradation helpers for the image cascade.

Provider failures are never surfaced to callers of resolve_image(). Transport
problems are raised as ProviderTransportError inside the adapter, then caught
at the adapter boundary and turned into a transport_error result.
"""

from typing import Optional

from src.utils.logger import logger


class ProviderTransportError(Exception):
    """Network failure, timeout, non-2xx status or malformed JSON from a provider."""

    def __init__(self, reason: str, status: Optional[int] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status = status


def _log_error(operation_name: str, exception: Exception, log_level: str = "warning") -> None:
    """Log a degraded operation. Only "error" includes the traceback."""
    msg = f"{operation_name}: {exception}"
    if log_level == "error":
        logger.error(msg, exc_info=exception)
    else:
        (logger.debug if log_level == "debug" else logger.warning)(msg)


async def safe_execute_async(coro, operation_name: str, log_level: str = "warning", default_return=None):
    """Await coro, returning default_return instead of raising.

    The resolver wraps each provider stage in it (None becomes a
    transport_error result) and validate_image_url wraps its probe requests
    (failures become False).

    Args:
        coro: Coroutine to await.
        operation_name: Prefix of the log line, e.g. "Validate image URL <url>".
        log_level: "debug", "warning" or "error".
        default_return: Value returned when coro raises.
    """
    try:
        return await coro
    except Exception as e:
        _log_error(operation_name, e, log_level)
        return default_return
