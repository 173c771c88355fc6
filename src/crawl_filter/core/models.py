"""Element types tracked by the filter and the categories they belong to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Hashable, Protocol, Tuple

from .urls import normalize_url, split_params


class Category(str, Enum):
    """Closed set of element kinds; iteration order is link, form, cookie."""

    LINK = "link"
    FORM = "form"
    COOKIE = "cookie"

    @property
    def attribute(self) -> str:
        """Name of the page attribute that yields elements of this kind."""

        return f"{self.value}s"


class Element(Protocol):
    category: ClassVar[Category]

    @property
    def identity(self) -> Hashable: ...


@dataclass(frozen=True)
class Link:
    """A hyperlink; parameter values do not contribute to its identity."""

    category: ClassVar[Category] = Category.LINK

    url: str
    params: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_url(cls, url: str) -> "Link":
        base, params = split_params(url)
        return cls(url=base, params=params)

    @property
    def identity(self) -> Tuple[str, str, Tuple[str, ...]]:
        names = tuple(sorted({name for name, _ in self.params}))
        return (self.category.value, normalize_url(self.url), names)


@dataclass(frozen=True)
class Form:
    """An HTML form identified by method, action and input names."""

    category: ClassVar[Category] = Category.FORM

    action: str
    method: str = "GET"
    inputs: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def identity(self) -> Tuple[str, str, str, Tuple[str, ...]]:
        return (
            self.category.value,
            self.method.upper(),
            normalize_url(self.action),
            tuple(sorted(set(self.inputs))),
        )


@dataclass(frozen=True)
class Cookie:
    category: ClassVar[Category] = Category.COOKIE

    name: str
    value: str = ""
    domain: str = ""
    path: str = "/"

    @classmethod
    def from_dict(cls, raw: dict, default_domain: str = "") -> "Cookie":
        return cls(
            name=raw.get("name") or "",
            value=raw.get("value") or "",
            domain=raw.get("domain") or default_domain,
            path=raw.get("path") or "/",
        )

    @property
    def identity(self) -> Tuple[str, str, str, str]:
        domain = self.domain.lstrip(".").lower()
        return (self.category.value, self.name, domain, self.path or "/")
