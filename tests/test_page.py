import pytest

from gracejoin.page import Page, PageFullError
from gracejoin.record import RECORDS_PER_PAGE, Record


def _filled(count):
    return Page(Record(str(i), f"d{i}") for i in range(count))


def test_new_page_is_empty():
    page = Page()
    assert len(page) == 0
    assert page.empty()
    assert not page.full()


def test_fill_to_capacity():
    page = _filled(RECORDS_PER_PAGE)
    assert page.full()
    assert len(page) == RECORDS_PER_PAGE
    with pytest.raises(PageFullError):
        page.load_record(Record("x", "y"))


def test_init_over_capacity_raises():
    with pytest.raises(PageFullError):
        _filled(RECORDS_PER_PAGE + 1)


def test_load_pair_appends_in_order():
    page = Page()
    page.load_pair(Record("k", "left"), Record("k", "right"))
    assert [r.data for r in page] == ["left", "right"]


def test_load_pair_needs_two_slots():
    page = _filled(RECORDS_PER_PAGE - 1)
    with pytest.raises(PageFullError):
        page.load_pair(Record("a", "b"), Record("a", "c"))
    assert len(page) == RECORDS_PER_PAGE - 1


def test_getitem_and_iteration():
    page = _filled(3)
    assert page[1].data == "d1"
    assert [r.key for r in page] == ["0", "1", "2"]


def test_load_page_replaces_and_is_independent():
    source = _filled(2)
    target = _filled(5)
    target.load_page(source)
    assert [r.key for r in target] == ["0", "1"]
    source.load_record(Record("z", "z"))
    assert len(target) == 2


def test_copy_is_independent():
    page = _filled(2)
    duplicate = page.copy()
    page.reset()
    assert page.empty()
    assert [r.key for r in duplicate] == ["0", "1"]


def test_str_lists_records():
    page = Page([Record("a", "1"), Record("b", "2")])
    assert str(page) == (
        "Record with key=a and data=1\nRecord with key=b and data=2\n"
    )