"""Choose between the store and the sample data for a read."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from loguru import logger

from surfjournal.config import Settings
from surfjournal.services.result import ReadResult

T = TypeVar("T")


async def read_with_fallback(
    settings: Settings,
    fetch: Callable[[], Awaitable[ReadResult[T]]],
    fallback: Callable[[], T],
    label: str,
) -> T:
    """
    Serve ``fallback()`` when mock mode is on or when ``fetch`` reports a
    store failure; otherwise return the fetched value.
    """
    if settings.mock_mode:
        if settings.debug_mock:
            logger.debug("Mock mode: serving sample {}", label)
        return fallback()

    result = await fetch()
    if result.failed:
        logger.warning("Store read failed for {}, serving sample data: {}", label, result.error)
        return fallback()
    return result.value
