"""BeautifulSoup based extraction of links, forms and cookies."""

from __future__ import annotations

from typing import Iterable, List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from ..core.models import Cookie, Form, Link
from ..core.urls import hostname_of, resolve_link, split_params

IGNORED_INPUT_TYPES = {"submit", "button", "reset", "image"}
LINK_TAGS = ["a", "area"]


def extract_links(soup: BeautifulSoup, page_url: str) -> List[Link]:
    links: List[Link] = []

    # a page reached with a query string is itself a parameterized link
    if split_params(page_url)[1]:
        links.append(Link.from_url(page_url))

    for anchor in soup.find_all(LINK_TAGS):
        resolved = resolve_link(page_url, anchor.get("href"))
        if not resolved:
            continue
        links.append(Link.from_url(resolved))
    return links


def extract_forms(soup: BeautifulSoup, page_url: str) -> List[Form]:
    forms: List[Form] = []
    for form in soup.find_all("form"):
        action = form.get("action") or page_url
        method = (form.get("method") or "GET").upper()
        inputs = _collect_input_names(form.find_all(["input", "textarea", "select"]))
        forms.append(
            Form(action=urljoin(page_url, action), method=method, inputs=tuple(inputs))
        )
    return forms


def extract_cookies(cookie_jar: Optional[Iterable[dict]], page_url: str) -> List[Cookie]:
    if not cookie_jar:
        return []

    default_domain = hostname_of(page_url)
    cookies: List[Cookie] = []
    for raw in cookie_jar:
        if not raw or not raw.get("name"):
            continue
        cookies.append(Cookie.from_dict(raw, default_domain=default_domain))
    return cookies


def _collect_input_names(elements) -> List[str]:
    names: List[str] = []
    for element in elements:
        tag_name = element.name.lower() if element.name else None
        input_type = (element.get("type") or "").lower()
        if tag_name == "input" and input_type in IGNORED_INPUT_TYPES:
            continue
        name = element.get("name")
        if name:
            names.append(name)
    return names
