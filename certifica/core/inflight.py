# =============================================
# certifica/core/inflight.py
# =============================================
"""In-flight registry that rejects duplicate submissions of a mutation"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Set
import logging

from certifica.core.exceptions import DuplicateSubmissionError

logger = logging.getLogger(__name__)


class InFlightRegistry:
    """
    Tracks mutation keys that are currently being processed.

    A key is held for the lifetime of one request. Distinct keys never wait
    on each other; a second request with a held key fails immediately.
    Check-and-add runs without awaiting, so it is atomic on the event loop.
    """

    def __init__(self):
        self._keys: Set[str] = set()

    def is_held(self, key: str) -> bool:
        return key in self._keys

    def acquire(self, key: str) -> None:
        if key in self._keys:
            logger.warning(f"Duplicate submission rejected: {key}")
            raise DuplicateSubmissionError(key)
        self._keys.add(key)

    def release(self, key: str) -> None:
        self._keys.discard(key)

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        self.acquire(key)
        try:
            yield
        finally:
            self.release(key)

    def reset(self) -> None:
        self._keys.clear()


# Global registry instance
inflight_registry = InFlightRegistry()
