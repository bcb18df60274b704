"""Tests for PageService."""

from __future__ import annotations

from datapop.infrastructure.workspace import Workspace
from datapop.services.pages import PageService


class TestPageService:
    def test_find_full_match(self, workspace: Workspace) -> None:
        result = PageService(workspace).find("Symbols")
        assert result.ok
        assert result.data["page"]["id"] == "PAGE-SYMBOLS"

    def test_find_partial(self, workspace: Workspace) -> None:
        assert PageService(workspace).find("Sym").data["page"] is None
        assert PageService(workspace).find("Sym", full_match=False).data["page"]["id"] == "PAGE-SYMBOLS"

    def test_add_keeps_current_page(self, workspace: Workspace) -> None:
        result = PageService(workspace).add("Data")
        assert result.ok
        assert result.mutated is True
        assert result.data["page"]["name"] == "Data"
        assert result.data["page_count"] == 3
        current = workspace.document.current_page
        assert current is not None
        assert current.id == "PAGE-1"

    def test_remove(self, workspace: Workspace) -> None:
        result = PageService(workspace).remove("PAGE-1")
        assert result.ok
        assert result.data == {"id": "PAGE-1", "current_page_id": "PAGE-SYMBOLS", "page_count": 1}

    def test_remove_unknown(self, workspace: Workspace) -> None:
        result = PageService(workspace).remove("NOPE")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_remove_last_page(self, workspace: Workspace) -> None:
        service = PageService(workspace)
        service.remove("PAGE-SYMBOLS")
        result = service.remove("PAGE-1")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "LAST_PAGE"
        assert len(workspace.document.pages) == 1
