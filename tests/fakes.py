"""Test doubles.

``FakeIdentityAllocator`` hands out a scripted sequence of ids so tests
can build products with identifiers of their choosing through the
regular ``create()`` factories.
"""

from __future__ import annotations

from catalog.domain.model.identity import IdentityAllocator


class FakeIdentityAllocator(IdentityAllocator):

    def __init__(self, ids: list[int]) -> None:
        super().__init__()
        self._ids = list(ids)
        self.calls = 0

    def next_id(self) -> int:
        self.calls += 1
        return self._ids.pop(0)

    def peek(self) -> int:
        return self._ids[0]
