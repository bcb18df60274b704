"""PageService — find, add and remove document pages."""

from __future__ import annotations

from datapop.domain.pages import add_page, find_page_with_name, remove_page
from datapop.services._helpers import layer_summary
from datapop.services.base import BaseService
from datapop.services.result import ServiceResult


class PageService(BaseService):
    def find(self, name: str, *, full_match: bool = True) -> ServiceResult:
        page = find_page_with_name(self._ctx, name, full_match)
        data = {"page": layer_summary(page) if page is not None else None}
        return ServiceResult.success(op="find_page", data=data)

    def add(self, name: str) -> ServiceResult:
        """Add a page without changing the current page."""
        page = add_page(self._ctx, name)
        return ServiceResult.success(
            op="add_page",
            data={"page": layer_summary(page), "page_count": len(self._ctx.document.pages)},
            mutated=True,
        )

    def remove(self, page_id: str) -> ServiceResult:
        """Remove a page. The last remaining page cannot be removed."""
        op = "remove_page"
        document = self._ctx.document
        page = next((p for p in document.pages if p.id == page_id), None)
        if page is None:
            return self._fail(op, "NOT_FOUND", f"Page not found: {page_id}")
        if len(document.pages) == 1:
            return self._fail(op, "LAST_PAGE", "A document must keep at least one page")

        remove_page(self._ctx, page)
        current = document.current_page
        return ServiceResult.success(
            op=op,
            data={
                "id": page_id,
                "current_page_id": current.id if current is not None else None,
                "page_count": len(document.pages),
            },
            mutated=True,
        )
