"""Offset/Limit Pagination — pure page arithmetic shared by queries and routes.

Invariants:
    - Pages are 1-based; anything below 1 (or unparseable) is page 1
    - Offset is never negative
    - page_count is ceiling division; zero rows -> zero pages
"""


def parse_page(raw: str | int | None) -> int:
    """Lenient page parsing: missing/non-numeric/below-one all mean page 1."""
    if raw is None:
        return 1
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return max(page, 1)


def page_offset(page: int, page_size: int) -> int:
    return (max(page, 1) - 1) * page_size


def page_count(total_rows: int, page_size: int) -> int:
    """Number of pages needed to show total_rows at page_size per page."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return -(-total_rows // page_size)
