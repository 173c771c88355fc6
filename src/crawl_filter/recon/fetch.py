"""HTTP page acquisition backed by requests."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from urllib.parse import urlparse

import requests

from .page import Page

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class PageFetchError(RuntimeError):
    """Raised when a page cannot be retrieved."""


def prepare_session(cookies: Optional[Iterable[dict]] = None) -> requests.Session:
    session = requests.Session()
    for cookie in cookies or ():
        name = cookie.get("name")
        value = cookie.get("value")
        domain = cookie.get("domain")
        if name and value:
            if domain:
                session.cookies.set(name, value, domain=domain)
            else:
                session.cookies.set(name, value)
    return session


def _export_cookies(jar, fallback_domain: str) -> List[dict]:
    exported: List[dict] = []
    for cookie in jar:
        exported.append(
            {
                "name": cookie.name,
                "value": cookie.value or "",
                "domain": cookie.domain or fallback_domain,
                "path": cookie.path or "/",
            }
        )
    return exported


def fetch_page(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    cookies: Optional[Iterable[dict]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Page:
    """Downloads ``url`` and wraps the response in a :class:`Page`."""

    owns_session = session is None
    http = prepare_session(cookies) if owns_session else session
    try:
        try:
            response = http.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise PageFetchError(f"Failed to fetch {url}: {exc}") from exc

        final_url = response.url or url
        hostname = urlparse(final_url).hostname or ""
        logger.debug("Fetched %s (%s)", final_url, response.status_code)
        return Page(
            url=final_url,
            body=response.text or "",
            cookie_jar=_export_cookies(http.cookies, hostname),
        )
    finally:
        if owns_session:
            http.close()
