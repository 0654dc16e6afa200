"""Application pagination – Pagination metadata decoded from list responses."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping

PAGE_HEADER = "X-Page"
NEXT_PAGE_HEADER = "X-Next-Page"
PREV_PAGE_HEADER = "X-Prev-Page"
PER_PAGE_HEADER = "X-Per-Page"
TOTAL_PAGES_HEADER = "X-Total-Pages"
TOTAL_HEADER = "X-Total"


@dataclasses.dataclass(frozen=True)
class Pagination:
    """Offset pagination metadata of one list response.

    All fields are non-negative; a value the service did not send is 0.
    """

    page: int = 0
    next_page: int = 0
    prev_page: int = 0
    per_page: int = 0
    total_pages: int = 0
    total: int = 0

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "Pagination":
        """Decode the ``X-Page`` … ``X-Total`` response headers.

        Raises:
            ValueError: a header is present but not a non-negative integer.
        """
        return cls(
            page=_parse(headers, PAGE_HEADER),
            next_page=_parse(headers, NEXT_PAGE_HEADER),
            prev_page=_parse(headers, PREV_PAGE_HEADER),
            per_page=_parse(headers, PER_PAGE_HEADER),
            total_pages=_parse(headers, TOTAL_PAGES_HEADER),
            total=_parse(headers, TOTAL_HEADER),
        )


def _parse(headers: Mapping[str, str], name: str) -> int:
    raw = (headers.get(name) or "").strip()
    if not raw:
        return 0
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"failed to parse {name}: {raw!r} is not an integer") from None
    if value < 0:
        raise ValueError(f"failed to parse {name}: {value} is negative")
    return value


__all__ = [
    "NEXT_PAGE_HEADER",
    "PAGE_HEADER",
    "PER_PAGE_HEADER",
    "PREV_PAGE_HEADER",
    "TOTAL_HEADER",
    "TOTAL_PAGES_HEADER",
    "Pagination",
]
