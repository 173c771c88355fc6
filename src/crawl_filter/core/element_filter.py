"""Tracks which page elements have been seen during a scanning session.

Used by the trainer to tell new links, forms and cookies apart from ones
already folded in by earlier pages. One instance is shared by every worker
of a session and is cleared by :meth:`ElementFilter.reset` when a new
session starts.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Hashable, Iterator, List, Set, Union

from .config import ResetPolicy
from .models import Category, Element

logger = logging.getLogger(__name__)

CategoryLike = Union[Category, str]


def flatten_elements(elements: Any) -> Iterator[Element]:
    """Yields elements from a single element or any nesting of collections.

    ``None`` entries are dropped. Strings and mappings are treated as single
    values, never as collections.
    """

    if elements is None:
        return
    if hasattr(elements, "identity") or isinstance(elements, (str, bytes, Mapping)):
        yield elements
        return
    if isinstance(elements, Iterable):
        for item in elements:
            yield from flatten_elements(item)
        return
    yield elements


class ElementFilter:
    """Per-category membership sets guarded by a single lock.

    Updates to any category serialize on the same lock. Reads are lock free:
    membership tests and inserts on a ``set`` are atomic in CPython.
    """

    def __init__(self, reset_policy: ResetPolicy = ResetPolicy.UNSYNCHRONIZED) -> None:
        self.reset_policy = ResetPolicy(reset_policy)
        self._lock = threading.Lock()
        self._sets: Dict[Category, Set[Hashable]] = {category: set() for category in Category}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Discards every tracked identity.

        With ``ResetPolicy.UNSYNCHRONIZED`` the lock is replaced and the sets
        are cleared without waiting for updates already in flight. With
        ``ResetPolicy.LOCKED`` the current lock is held while clearing, so
        the reset waits for running updates to finish.
        """

        if self.reset_policy is ResetPolicy.LOCKED:
            with self._lock:
                self._clear()
        else:
            self._lock = threading.Lock()
            self._clear()
        logger.debug("Element filter reset (%s)", self.reset_policy.value)

    def _clear(self) -> None:
        # cleared in place so references handed out by category() stay live
        for members in self._sets.values():
            members.clear()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def category(self, category: CategoryLike) -> Set[Hashable]:
        """Returns the live identity set for ``category``. Do not mutate it."""

        return self._sets[Category(category)]

    def includes(self, category: CategoryLike, identity: Hashable) -> bool:
        return identity in self._sets[Category(category)]

    def includes_element(self, element: Element) -> bool:
        """True if the element's identity is present in any category."""

        identity = element.identity
        for category in Category:
            if identity in self._sets[category]:
                return True
        return False

    __contains__ = includes_element

    def counts(self) -> Dict[Category, int]:
        return {category: len(members) for category, members in self._sets.items()}

    def __len__(self) -> int:
        return sum(len(members) for members in self._sets.values())

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------
    def update(self, category: CategoryLike, elements: Any) -> int:
        """Adds unseen elements to ``category`` and returns how many were new."""

        category = Category(category)
        items: List[Element] = list(flatten_elements(elements))
        if not items:
            return 0

        with self._lock:
            members = self._sets[category]
            new_count = 0
            for element in items:
                identity = element.identity
                if identity in members:
                    continue
                members.add(identity)
                new_count += 1

        logger.debug(
            "Filtered %d %s, %d new", len(items), category.attribute, new_count
        )
        return new_count

    def update_from_page(self, page: Any) -> int:
        """Folds freshly extracted page elements in, one locked update per category.

        The three updates are not one transaction; other updates or a reset
        may run between them.
        """

        return sum(
            self.update(category, getattr(page, category.attribute))
            for category in Category
        )

    def update_from_page_cache(self, page: Any) -> int:
        """Like :meth:`update_from_page` but reads ``page.cache`` instead of
        triggering a new extraction. Missing cache entries count as empty."""

        cache = page.cache or {}
        return sum(self.update(category, cache.get(category)) for category in Category)
