from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import FilterConfig
from .element_filter import ElementFilter

logger = logging.getLogger(__name__)


@dataclass
class ScanSession:
    """Owns the element filter for the lifetime of one scanning session."""

    config: FilterConfig = field(default_factory=FilterConfig)
    element_filter: ElementFilter = field(init=False)
    started: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.element_filter = ElementFilter(reset_policy=self.config.reset_policy)

    def start(self) -> ElementFilter:
        """Begins a session with an empty filter and returns it."""

        self.element_filter.reset()
        self.started = True
        logger.info("Scan session started (reset policy: %s)", self.config.reset_policy.value)
        return self.element_filter

    def __enter__(self) -> ElementFilter:
        return self.start()

    def __exit__(self, *_exc_info) -> None:
        self.started = False
