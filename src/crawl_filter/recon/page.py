from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from ..core.models import Category, Cookie, Form, Link
from .extract import extract_cookies, extract_forms, extract_links


@dataclass(slots=True)
class Page:
    """A fetched document and the elements extracted from it.

    Every extraction stores its result in ``cache`` so later passes can be
    counted without parsing ``body`` again.
    """

    url: str
    body: str = ""
    cookie_jar: List[dict] = field(default_factory=list)
    cache: Dict[Category, list] = field(default_factory=dict)
    _soup: Optional[BeautifulSoup] = field(default=None, init=False, repr=False, compare=False)

    @property
    def soup(self) -> BeautifulSoup:
        if self._soup is None:
            self._soup = BeautifulSoup(self.body or "", "html.parser")
        return self._soup

    @property
    def links(self) -> List[Link]:
        return self._store(Category.LINK, extract_links(self.soup, self.url))

    @property
    def forms(self) -> List[Form]:
        return self._store(Category.FORM, extract_forms(self.soup, self.url))

    @property
    def cookies(self) -> List[Cookie]:
        return self._store(Category.COOKIE, extract_cookies(self.cookie_jar, self.url))

    def elements(self, category: Category | str) -> list:
        return getattr(self, Category(category).attribute)

    def _store(self, category: Category, elements: list) -> list:
        self.cache[category] = elements
        return elements
