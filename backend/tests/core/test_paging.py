"""Paged Results — count and fetch over one filter, metadata from the true total.

Tests:
    - skip/take derived from parameters; at most page_size items
    - total_pages stays correct for out-of-range pages
    - Empty order falls back to name ascending
    - X-Pagination JSON shape
"""

import json
from dataclasses import dataclass
from uuid import uuid4

from company_api.core.paging import (
    DEFAULT_ORDER, EmployeeFilter, MetaData, fetch_paged,
)
from company_api.core.request_parameters import RequestParameters
from company_api.core.sorting import SortField


@dataclass
class _Row:
    name: str


class _ListStore:
    """PagedStore over a list; records what it was asked for."""

    def __init__(self, rows):
        self.rows = rows
        self.filters = []
        self.fetch_args = None

    async def count_matching(self, query_filter):
        self.filters.append(query_filter)
        return len(self.rows)

    async def fetch_page(self, query_filter, skip, take, order):
        self.filters.append(query_filter)
        self.fetch_args = (skip, take, list(order))
        return self.rows[skip:skip + take]


def _filter():
    return EmployeeFilter(company_id=uuid4(), min_age=0, max_age=100)


async def test_fetch_paged_slices_and_counts():
    store = _ListStore([_Row(str(i)) for i in range(7)])
    page = await fetch_paged(
        store, _filter(), RequestParameters(page_number=2, page_size=3),
    )
    assert [r.name for r in page.items] == ["3", "4", "5"]
    assert store.fetch_args[:2] == (3, 3)
    assert page.meta_data.total_count == 7
    assert page.meta_data.total_pages == 3


async def test_count_and_fetch_share_the_filter():
    store = _ListStore([_Row("a")])
    query_filter = _filter()
    await fetch_paged(store, query_filter, RequestParameters())
    assert store.filters == [query_filter, query_filter]


async def test_page_past_the_end_is_empty_with_true_totals():
    store = _ListStore([_Row(str(i)) for i in range(5)])
    page = await fetch_paged(
        store, _filter(), RequestParameters(page_number=10, page_size=2),
    )
    assert page.items == []
    assert page.meta_data.total_pages == 3
    assert page.meta_data.current_page == 10


async def test_empty_order_falls_back_to_name():
    store = _ListStore([])
    await fetch_paged(store, _filter(), RequestParameters())
    assert store.fetch_args[2] == list(DEFAULT_ORDER) == [SortField("name")]


async def test_explicit_order_is_passed_through():
    store = _ListStore([])
    order = [SortField("age", True)]
    await fetch_paged(store, _filter(), RequestParameters(), order)
    assert store.fetch_args[2] == order


def test_total_pages_rounds_up():
    assert MetaData(current_page=1, page_size=10, total_count=0).total_pages == 0
    assert MetaData(current_page=1, page_size=10, total_count=10).total_pages == 1
    assert MetaData(current_page=1, page_size=10, total_count=11).total_pages == 2


def test_has_previous_and_next():
    meta = MetaData(current_page=2, page_size=10, total_count=35)
    assert meta.has_previous
    assert meta.has_next
    assert not MetaData(current_page=4, page_size=10, total_count=35).has_next


def test_header_is_camel_case_json():
    meta = MetaData(current_page=2, page_size=5, total_count=12)
    assert json.loads(meta.to_header()) == {
        "currentPage": 2, "pageSize": 5, "totalCount": 12, "totalPages": 3,
    }


def test_blank_search_term_is_ignored():
    assert EmployeeFilter(uuid4(), 0, 10, "   ").normalized_search_term is None
    assert EmployeeFilter(uuid4(), 0, 10, " Kane ").normalized_search_term == "kane"
