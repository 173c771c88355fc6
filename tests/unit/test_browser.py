from types import SimpleNamespace

from crawl_filter.recon import browser  # type: ignore[import]


def make_browser_page(content, cookies):
    return SimpleNamespace(
        url="https://app.example.com/#/login",
        content=content,
        context=SimpleNamespace(cookies=cookies),
    )


def test_capture_page_snapshots_dom_and_cookies():
    browser_page = make_browser_page(
        lambda: "<form action='/api/login' method='post'><input name='email'></form>",
        lambda: [{"name": "token", "value": "t", "domain": ".example.com", "path": "/"}],
    )

    page = browser.capture_page(browser_page)

    assert page.url == "https://app.example.com/#/login"
    assert [form.identity for form in page.forms] == [
        ("form", "POST", "https://app.example.com/api/login", ("email",))
    ]
    assert [cookie.identity for cookie in page.cookies] == [("cookie", "token", "example.com", "/")]


def test_capture_page_tolerates_browser_errors():
    def broken():
        raise RuntimeError("target closed")

    page = browser.capture_page(make_browser_page(broken, broken))

    assert page.body == ""
    assert page.cookie_jar == []
