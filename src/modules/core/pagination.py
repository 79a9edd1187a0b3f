"""Zero-based page slicing shared by repositories.

``PageResult`` mirrors the envelope returned by the paged endpoints:
``content``, ``total_elements``, ``total_pages``, ``number`` and ``size``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, TypeVar

from django.core.paginator import EmptyPage, Paginator
from django.db import models

T = TypeVar("T")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    content: List[T]
    total_elements: int
    total_pages: int
    number: int
    size: int

    def to_dict(self, content: List[Any]) -> Dict[str, Any]:
        """Envelope with already-serialized ``content``."""
        return {
            "content": content,
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
            "number": self.number,
            "size": self.size,
        }


def slice_page(queryset: models.QuerySet, page: int, size: int) -> PageResult:
    """Return page ``page`` (zero-based) of ``size`` rows from an ordered queryset.

    A page past the end yields empty ``content`` with the real totals.
    """
    # No empty first page: an empty queryset reports zero pages.
    paginator = Paginator(queryset, size, allow_empty_first_page=False)
    try:
        content = list(paginator.page(page + 1).object_list)
    except EmptyPage:
        content = []
    return PageResult(
        content=content,
        total_elements=paginator.count,
        total_pages=paginator.num_pages,
        number=page,
        size=size,
    )
