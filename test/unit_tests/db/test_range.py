import pytest
from sqlalchemy import select

from postboard.db import MemberTable
from postboard.db.range.range import MAX_OFFSET, PageRequest, apply_page_to_statement, apply_range_to_statement
from postboard.db.sorting import Sort, SortOrder
from postboard.settings import app_settings


def compiled(stmt) -> str:
    return str(stmt.compile(compile_kwargs={"literal_binds": True}))


@pytest.mark.parametrize(
    "page,expected",
    [(0, 1), (-3, 1), (None, 1), (1, 1), (2, 2), (42, 42)]
    + [("7", 7), (" 3 ", 3), ("abc", 1), ("2.5", 1), ("", 1), (True, 1)],
)
def test_page_request_clamps_page(page, expected):
    assert PageRequest(page=page).page == expected


@pytest.mark.parametrize(
    "page_size,expected",
    [(100, 5), (31, 5), (0, 5), (-1, 5), (None, 5), (1, 1), (10, 10), (30, 30)]
    + [("12", 12), ("x", 5), ("", 5), ("99", 5)],
)
def test_page_request_page_size_policy(page_size, expected):
    assert PageRequest(page_size=page_size).page_size == expected


def test_page_request_defaults():
    page_request = PageRequest()

    assert page_request.page == 1
    assert page_request.page_size == app_settings.DEFAULT_PAGE_SIZE
    assert page_request.sort == []
    assert page_request.offset == 0


def test_page_request_follows_settings(monkeypatch):
    monkeypatch.setattr(app_settings, "DEFAULT_PAGE_SIZE", 20)
    monkeypatch.setattr(app_settings, "MAX_PAGE_SIZE", 50)

    assert PageRequest().page_size == 20
    assert PageRequest(page_size=40).page_size == 40
    assert PageRequest(page_size=51).page_size == 20


def test_page_request_keeps_sort():
    sort = [Sort(field="username", order=SortOrder.DESC)]

    assert PageRequest(page=3, page_size=10, sort=sort).sort == sort


@pytest.mark.parametrize("page,page_size,offset", [(1, 5, 0), (2, 5, 5), (3, 10, 20)])
def test_page_request_offset(page, page_size, offset):
    assert PageRequest(page=page, page_size=page_size).offset == offset


def test_apply_page_to_statement():
    stmt = apply_page_to_statement(select(MemberTable), PageRequest(page=3, page_size=10))

    assert compiled(stmt).endswith("LIMIT 10 OFFSET 20")


def test_apply_range_to_statement():
    stmt = apply_range_to_statement(select(MemberTable), 5, 8)

    assert compiled(stmt).endswith("LIMIT 3 OFFSET 5")


@pytest.mark.parametrize("range_start,range_end", [(5, 5), (6, 5)])
def test_apply_range_to_statement_invalid_range(range_start, range_end):
    with pytest.raises(ValueError, match="range start must be lower than end"):
        apply_range_to_statement(select(MemberTable), range_start, range_end)


@pytest.mark.parametrize("page", [10**20, str(10**20), MAX_OFFSET])
def test_page_request_caps_page_to_addressable_offset(page):
    page_request = PageRequest(page=page, page_size=app_settings.MAX_PAGE_SIZE)

    assert page_request.page == MAX_OFFSET // app_settings.MAX_PAGE_SIZE
    assert page_request.offset + page_request.page_size <= MAX_OFFSET


def test_page_request_keeps_page_within_cap():
    last_page = MAX_OFFSET // app_settings.MAX_PAGE_SIZE

    assert PageRequest(page=last_page).page == last_page
