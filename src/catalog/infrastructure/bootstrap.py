"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.domain.model.identity import DEFAULT_ALLOCATOR, IdentityAllocator
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def identity_allocator() -> IdentityAllocator:
    # Shared by every catalog in the process so ids never repeat.
    return DEFAULT_ALLOCATOR


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()
