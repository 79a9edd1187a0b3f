"""Unit tests for PageResult and slice_page."""

from __future__ import annotations

import pytest

from modules.core.pagination import PageResult, slice_page
from modules.customers.models import Address

pytestmark = pytest.mark.unit


class TestPageResult:
    def test_to_dict_uses_given_content(self):
        page = PageResult(
            content=["raw"], total_elements=1, total_pages=1, number=0, size=10
        )
        assert page.to_dict(["serialized"]) == {
            "content": ["serialized"],
            "total_elements": 1,
            "total_pages": 1,
            "number": 0,
            "size": 10,
        }


class TestSlicePage:
    @pytest.fixture()
    def addresses(self, address_payload):
        return [
            Address.objects.create(**address_payload(number=str(i))) for i in range(5)
        ]

    @pytest.mark.parametrize(
        "rows, size, expected",
        [(0, 10, 0), (5, 3, 2), (6, 3, 2), (7, 3, 3), (1, 100, 1)],
    )
    def test_total_pages(self, address_payload, rows, size, expected):
        for i in range(rows):
            Address.objects.create(**address_payload(number=str(i)))
        page = slice_page(Address.objects.order_by("id"), page=0, size=size)
        assert page.total_elements == rows
        assert page.total_pages == expected

    def test_first_page(self, addresses):
        page = slice_page(Address.objects.order_by("id"), page=0, size=3)
        assert [a.id for a in page.content] == [a.id for a in addresses[:3]]
        assert page.total_elements == 5
        assert page.total_pages == 2

    def test_last_partial_page(self, addresses):
        page = slice_page(Address.objects.order_by("id"), page=1, size=3)
        assert [a.id for a in page.content] == [a.id for a in addresses[3:]]
        assert page.number == 1

    def test_page_past_the_end_is_empty(self, addresses):
        page = slice_page(Address.objects.order_by("id"), page=4, size=3)
        assert page.content == []
        assert page.total_elements == 5
        assert page.total_pages == 2
        assert page.number == 4

    def test_empty_queryset(self):
        page = slice_page(Address.objects.order_by("id"), page=0, size=10)
        assert page.content == []
        assert page.total_elements == 0
        assert page.total_pages == 0
