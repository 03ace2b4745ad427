"""
Music Domain Services

Domain services containing logic that doesn't naturally fit
within a single entity.
"""

from __future__ import annotations

import random
from typing import TypeVar

T = TypeVar("T")


class ShuffleDomainService:
    """Domain service for reordering track sequences."""

    @staticmethod
    def fisher_yates(items: list[T], rng: random.Random) -> None:
        """Uniformly permute ``items`` in place.

        Walks from the last index down to 1, swapping each element with one
        drawn uniformly from ``[0, i]``.

        Args:
            items: The list to permute. Mutated in place.
            rng: Source of randomness; seed it for reproducible orderings.
        """
        for i in range(len(items) - 1, 0, -1):
            j = rng.randint(0, i)
            items[i], items[j] = items[j], items[i]
