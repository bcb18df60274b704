"""Page helpers: find, add and remove pages without moving the user."""

from __future__ import annotations

from datapop.domain.document import HostContext
from datapop.domain.layers import Layer


def find_page_with_name(ctx: HostContext, name: str, full_match: bool) -> Layer | None:
    """First page whose name equals *name* (full match) or contains it."""
    for page in ctx.document.pages:
        page_name = page.name or ""
        if full_match:
            if page_name == name:
                return page
        elif name in page_name:
            return page
    return None


def add_page(ctx: HostContext, name: str) -> Layer:
    """Add a blank page named *name*, keeping the current page active."""
    document = ctx.document
    current = document.current_page
    page = document.add_blank_page(name)
    if current is not None:
        document.current_page = current
    return page


def remove_page(ctx: HostContext, page: Layer) -> None:
    """Remove *page*, keeping the current page active when it survives."""
    document = ctx.document
    current = document.current_page
    document.remove_page(page)
    if current is not None and current is not page:
        document.current_page = current
