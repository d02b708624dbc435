"""Identity allocation for catalog products.

Every product gets its identifier from an allocator exactly once, at
creation. Identifiers are positive, strictly increasing in allocation
order and never handed out twice by the same allocator.
"""

from __future__ import annotations

import logging
import threading

from catalog.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class IdentityAllocator:
    """Monotonic counter handing out product identifiers.

    The read-and-increment in ``next_id`` runs under a lock so products
    built from several threads still get distinct identifiers.
    """

    def __init__(self, start: int = 1) -> None:
        self._check_start(start)
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the current counter value and advance it by one."""
        with self._lock:
            allocated = self._next
            self._next += 1
        logger.debug("Allocated product id %d", allocated)
        return allocated

    def peek(self) -> int:
        """The identifier the next call to ``next_id`` will return."""
        with self._lock:
            return self._next

    def reset(self, start: int = 1) -> None:
        """Rewind the counter.

        Only meant for tests and freshly bootstrapped catalogs: products
        created before the reset keep their identifiers, so reusing an
        allocator across a reset can produce duplicates.
        """
        self._check_start(start)
        with self._lock:
            self._next = start
        logger.debug("Identity allocator reset to %d", start)

    @staticmethod
    def _check_start(start: int) -> None:
        if not isinstance(start, int) or start < 1:
            raise ValidationError(
                f"Product identifiers must start at a positive integer, got {start!r}"
            )


# Process-wide allocator used when no other one is injected.
DEFAULT_ALLOCATOR = IdentityAllocator()
