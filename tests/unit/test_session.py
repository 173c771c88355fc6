from types import SimpleNamespace

from tests.helpers.filter_imports import Category, FilterConfig, ResetPolicy, ScanSession


def test_session_builds_filter_with_configured_policy():
    session = ScanSession(FilterConfig(reset_policy=ResetPolicy.LOCKED))

    assert session.element_filter.reset_policy is ResetPolicy.LOCKED
    assert session.started is False


def test_start_resets_previous_session_state():
    session = ScanSession()
    element_filter = session.start()
    element_filter.update(Category.LINK, SimpleNamespace(identity="seen"))

    assert session.start() is element_filter
    assert element_filter.includes(Category.LINK, "seen") is False


def test_context_manager_scopes_the_session():
    session = ScanSession()

    with session as element_filter:
        assert session.started is True
        assert element_filter.update(Category.FORM, SimpleNamespace(identity="f")) == 1

    assert session.started is False
