from tests.helpers.filter_imports import ElementFilter, Page, Trainer, TrainingResult

HTML = "<a href='/a'>a</a><a href='/b'>b</a><form action='/s'><input name='q'></form>"


def test_push_marks_pages_with_new_elements_for_training():
    trainer = Trainer(ElementFilter())

    first = trainer.push(Page(url="https://example.com/", body=HTML))
    second = trainer.push(Page(url="https://example.com/other", body=HTML))

    assert first == TrainingResult(url="https://example.com/", new_elements=3)
    assert first.should_train is True
    assert second.should_train is False
    assert trainer.pages_to_train == ["https://example.com/"]


def test_push_with_cache_skips_extraction():
    trainer = Trainer(ElementFilter())
    page = Page(url="https://example.com/", body=HTML)

    assert trainer.push(page, use_cache=True).new_elements == 0

    page.links
    assert trainer.push(page, use_cache=True).new_elements == 2


def test_push_all_keeps_order():
    trainer = Trainer(ElementFilter())
    pages = [Page(url=f"https://example.com/{index}", body=HTML) for index in range(3)]

    results = trainer.push_all(pages)

    assert [result.new_elements for result in results] == [3, 0, 0]
    assert trainer.results == results
