"""Page layout derived from page-break items."""

from collections.abc import Sequence

from .models import AssignmentItem, PageBreakItem


def split_pages(items: Sequence[AssignmentItem]) -> list[list[AssignmentItem]]:
    """Split *items* into pages at every page break.

    Page-break items separate pages and are not part of any page. There is
    always at least one page, possibly empty.
    """
    pages: list[list[AssignmentItem]] = [[]]
    for item in items:
        if isinstance(item, PageBreakItem):
            pages.append([])
        else:
            pages[-1].append(item)
    return pages


def page_breaks(items: Sequence[AssignmentItem]) -> list[PageBreakItem]:
    """The page-break items in order; break ``i`` ends page ``i``."""
    return [item for item in items if isinstance(item, PageBreakItem)]


def page_gate(items: Sequence[AssignmentItem], page_index: int) -> PageBreakItem | None:
    """Return the page break that closes page *page_index*, if any."""
    breaks = page_breaks(items)
    if 0 <= page_index < len(breaks):
        return breaks[page_index]
    return None
