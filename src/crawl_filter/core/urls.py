"""URL helpers shared by element identities and page extraction."""

from __future__ import annotations

from typing import Optional, Tuple
from urllib.parse import parse_qsl, urljoin, urlparse, urlunparse

ALLOWED_SCHEMES = {"http", "https"}


def normalize_url(url: str) -> str:
    """Canonical form used inside identities.

    Scheme and host are lowercased, the query is dropped and so is the
    fragment, unless it is an SPA route (``#/...``). A query inside an SPA
    route is dropped as well.
    """

    parsed = urlparse(url.strip())
    route, _ = _split_route(parsed.fragment)
    sanitized = parsed._replace(
        scheme=parsed.scheme.lower(),
        netloc=parsed.netloc.lower(),
        path=parsed.path or "/",
        params="",
        query="",
        fragment=route,
    )
    return urlunparse(sanitized)


def split_params(url: str) -> Tuple[str, Tuple[Tuple[str, str], ...]]:
    """Separates parameters from ``url``, including those of an SPA route."""

    parsed = urlparse(url)
    route, route_query = _split_route(parsed.fragment)
    fragment = route if route else parsed.fragment
    params = tuple(parse_qsl(parsed.query, keep_blank_values=True))
    params += tuple(parse_qsl(route_query, keep_blank_values=True))
    return urlunparse(parsed._replace(query="", fragment=fragment)), params


def _split_route(fragment: str) -> Tuple[str, str]:
    """Returns ``(route, query)`` for ``/route?query`` fragments, else ``("", "")``."""

    if not fragment.startswith("/"):
        return "", ""
    route, _, query = fragment.partition("?")
    return route, query


def resolve_link(base_url: str, href: Optional[str]) -> Optional[str]:
    """Resolves ``href`` against ``base_url`` keeping only http(s) targets."""

    if not href:
        return None

    href = href.strip()
    if href.startswith("#/"):
        # SPA routes hang off the site root, not the current document
        parsed = urlparse(base_url)
        joined = f"{parsed.scheme}://{parsed.netloc}/{href}"
    else:
        joined = urljoin(base_url, href)

    if urlparse(joined).scheme.lower() not in ALLOWED_SCHEMES:
        return None
    return joined


def hostname_of(url: str) -> str:
    return (urlparse(url).hostname or "").lower()
