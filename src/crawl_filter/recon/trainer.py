"""Decides which pages are worth further analysis based on new elements."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List

from ..core.element_filter import ElementFilter
from .page import Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingResult:
    url: str
    new_elements: int

    @property
    def should_train(self) -> bool:
        return self.new_elements > 0


@dataclass
class Trainer:
    """Feeds pages through the session's element filter."""

    element_filter: ElementFilter
    results: List[TrainingResult] = field(default_factory=list)
    _results_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def push(self, page: Page, *, use_cache: bool = False) -> TrainingResult:
        """Counts new elements on ``page``.

        With ``use_cache`` the page's previously extracted elements are used
        and the body is not parsed again.
        """

        if use_cache:
            new_elements = self.element_filter.update_from_page_cache(page)
        else:
            new_elements = self.element_filter.update_from_page(page)

        result = TrainingResult(url=page.url, new_elements=new_elements)
        with self._results_lock:
            self.results.append(result)

        if result.should_train:
            logger.debug("%s introduced %d new elements", page.url, new_elements)
        else:
            logger.debug("%s has nothing new, skipping", page.url)
        return result

    def push_all(self, pages: Iterable[Page], *, use_cache: bool = False) -> List[TrainingResult]:
        return [self.push(page, use_cache=use_cache) for page in pages]

    @property
    def pages_to_train(self) -> List[str]:
        return [result.url for result in self.results if result.should_train]
