"""Rendered page acquisition through Playwright, for SPA targets."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from playwright.sync_api import Page as BrowserPage, sync_playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .page import Page

logger = logging.getLogger(__name__)

NAVIGATION_TIMEOUT = 8000


def capture_page(browser_page: BrowserPage) -> Page:
    """Snapshots the current DOM and cookie jar of a Playwright page."""

    try:
        html = browser_page.content()
    except Exception:
        html = ""

    try:
        cookies = [dict(cookie) for cookie in browser_page.context.cookies()]
    except Exception:
        cookies = []

    return Page(url=browser_page.url, body=html, cookie_jar=cookies)


def capture_pages(
    urls: Iterable[str],
    *,
    headless: bool = True,
    cookies: Optional[List[dict]] = None,
) -> List[Page]:
    """Visits each URL in one browser context and returns the captured pages.

    URLs that fail to load are logged and skipped.
    """

    pages: List[Page] = []
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=headless)
        context = browser.new_context()
        browser_page = context.new_page()

        try:
            for url in urls:
                if cookies:
                    _apply_cookies(context, url, cookies)
                try:
                    browser_page.goto(url, timeout=NAVIGATION_TIMEOUT)
                except PlaywrightTimeoutError:
                    logger.debug("Timed out loading %s", url)
                    continue
                except Exception:
                    logger.debug("Navigation to %s failed", url, exc_info=True)
                    continue

                _wait_settled(browser_page)
                pages.append(capture_page(browser_page))
        finally:
            browser.close()

    return pages


def _apply_cookies(context, url: str, cookies: List[dict]) -> None:
    # Playwright needs either a url or a domain/path pair per cookie
    prepared = []
    for cookie in cookies:
        entry = {"name": cookie["name"], "value": cookie["value"]}
        if cookie.get("domain"):
            entry["domain"] = cookie["domain"]
            entry["path"] = cookie.get("path") or "/"
        else:
            entry["url"] = url
        prepared.append(entry)
    context.add_cookies(prepared)


def _wait_settled(browser_page: BrowserPage) -> None:
    try:
        browser_page.wait_for_load_state("networkidle", timeout=3000)
    except Exception:
        try:
            browser_page.wait_for_load_state("domcontentloaded", timeout=1500)
        except Exception:
            browser_page.wait_for_timeout(300)
