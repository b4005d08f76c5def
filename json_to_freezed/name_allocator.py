"""
Class name allocation for one generation run.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class NameAllocator:
    """Hands out collision-free class names.

    The first request for a candidate returns it unchanged, later requests
    append the request count: ``Address``, ``Address2``, ``Address3``...
    A name is never handed out twice, even when a literal candidate such as
    ``Address2`` was requested before the second ``Address``.

    One allocator is shared by the whole decomposition of a document and
    discarded afterwards.
    """

    def __init__(self):
        # candidate -> number of times it was requested
        self._counts: dict[str, int] = {}
        self._issued: set[str] = set()

    def allocate(self, candidate: str) -> str:
        """Return a unique class name for the candidate."""
        count = self._counts.get(candidate, 0) + 1
        name = candidate if count == 1 else f"{candidate}{count}"
        while name in self._issued:
            count += 1
            name = f"{candidate}{count}"

        if name != candidate:
            logger.debug("Class name %s already taken, using %s", candidate, name)

        self._counts[candidate] = count
        self._issued.add(name)
        return name

    @property
    def issued(self) -> frozenset[str]:
        """Every name handed out so far."""
        return frozenset(self._issued)
