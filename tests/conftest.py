"""Shared pytest fixtures for datapop tests.

The sample document is the single source of truth for the layer layout
most tests search through::

    Page 1 (PAGE-1)
      Card (CARD, artboard)
        Title (TITLE, text)
        Subtitle (SUBTITLE, text)
        Avatar Group (AVATAR-GROUP, group)
          Avatar (AVATAR, oval)
          Avatar Image (AVATAR-IMAGE, bitmap)
        Background (BACKGROUND, rectangle)
        Button (BUTTON-INSTANCE, symbol instance of SYM-BUTTON)
        <unnamed> (UNNAMED, text)
        Divider (DIVIDER, shape group)
    Symbols (PAGE-SYMBOLS)
      Button (SYM-BUTTON, symbol master)

Libraries, in registration order: "UI Kit" (Button LIB-BUTTON, Icon
LIB-ICON) and "Icons" (Icon LIB2-ICON, Star LIB2-STAR).
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from datapop.config.settings import DatapopSettings
from datapop.domain.document import Document, HostContext, Library
from datapop.domain.kinds import LayerKind
from datapop.domain.layers import Frame, Layer
from datapop.infrastructure.snapshot import save_snapshot
from datapop.infrastructure.workspace import Workspace


def make_layer(
    layer_id: str,
    name: str | None,
    kind: LayerKind,
    x: float = 0,
    y: float = 0,
    width: float = 0,
    height: float = 0,
    **kwargs,
) -> Layer:
    return Layer(name=name, kind=kind, frame=Frame(x, y, width, height), id=layer_id, **kwargs)


def build_sample_document() -> Document:
    avatar_group = make_layer(
        "AVATAR-GROUP",
        "Avatar Group",
        LayerKind.GROUP,
        10,
        70,
        50,
        50,
        children=[
            make_layer("AVATAR", "Avatar", LayerKind.OVAL, 0, 0, 50, 50),
            make_layer("AVATAR-IMAGE", "Avatar Image", LayerKind.BITMAP, 0, 0, 50, 50),
        ],
    )
    card = make_layer(
        "CARD",
        "Card",
        LayerKind.ARTBOARD,
        0,
        0,
        200,
        300,
        children=[
            make_layer("TITLE", "Title", LayerKind.TEXT, 10, 10, 180, 20),
            make_layer("SUBTITLE", "Subtitle", LayerKind.TEXT, 10, 40, 180, 20),
            avatar_group,
            make_layer("BACKGROUND", "Background", LayerKind.RECTANGLE, 0, 0, 200, 300),
            make_layer(
                "BUTTON-INSTANCE",
                "Button",
                LayerKind.SYMBOL_INSTANCE,
                10,
                250,
                80,
                30,
                symbol_id="SYM-BUTTON",
                overrides={"label": "Go"},
            ),
            make_layer("UNNAMED", None, LayerKind.TEXT, 0, 0, 10, 10),
            make_layer("DIVIDER", "Divider", LayerKind.SHAPE, 10, 60, 180, 1),
        ],
    )
    symbols_page = make_layer(
        "PAGE-SYMBOLS",
        "Symbols",
        LayerKind.PAGE,
        children=[
            make_layer(
                "SYM-BUTTON",
                "Button",
                LayerKind.SYMBOL_MASTER,
                0,
                0,
                80,
                30,
                children=[make_layer("SYM-BUTTON-LABEL", "Label", LayerKind.TEXT, 5, 5, 70, 20)],
            )
        ],
    )
    page = make_layer("PAGE-1", "Page 1", LayerKind.PAGE, children=[card])
    return Document([page, symbols_page], name="Sample", id="DOC-SAMPLE")


def build_library_document(doc_id: str, masters: list[tuple[str, str]]) -> Document:
    page = make_layer(
        f"{doc_id}-PAGE",
        "Symbols",
        LayerKind.PAGE,
        children=[
            make_layer(
                master_id,
                name,
                LayerKind.SYMBOL_MASTER,
                0,
                0,
                24,
                24,
                children=[make_layer(f"{master_id}-SHAPE", "Glyph", LayerKind.RECTANGLE, 0, 0, 24, 24)],
            )
            for master_id, name in masters
        ],
    )
    return Document([page], name=doc_id, id=doc_id)


@pytest.fixture
def document() -> Document:
    return build_sample_document()


@pytest.fixture
def ui_library() -> Library:
    doc = build_library_document("DOC-UI", [("LIB-BUTTON", "Button"), ("LIB-ICON", "Icon")])
    return Library("UI Kit", doc, id="LIB-UI")


@pytest.fixture
def icons_library() -> Library:
    doc = build_library_document("DOC-ICONS", [("LIB2-ICON", "Icon"), ("LIB2-STAR", "Star")])
    return Library("Icons", doc, id="LIB-ICONS")


@pytest.fixture
def ctx(document: Document, ui_library: Library, icons_library: Library) -> HostContext:
    return HostContext(document=document, libraries=[ui_library, icons_library])


@pytest.fixture
def layer(ctx: HostContext) -> Callable[[str], Layer]:
    """Look up a sample layer by id, failing loudly when it is missing."""

    def lookup(layer_id: str) -> Layer:
        found = ctx.document.layer_with_id(layer_id)
        assert found is not None, layer_id
        return found

    return lookup


@pytest.fixture
def settings(tmp_path: Path) -> DatapopSettings:
    return DatapopSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def workspace(settings: DatapopSettings, ctx: HostContext) -> Workspace:
    return Workspace(settings, ctx)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def snapshot_path(tmp_path: Path, ctx: HostContext) -> Path:
    """The sample context saved as ``document.json`` in a temp project root."""
    path = tmp_path / "document.json"
    save_snapshot(ctx, path)
    return path


@pytest.fixture
def _isolated_project(tmp_path: Path, snapshot_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from a temp project holding the sample snapshot.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.delenv("DATAPOP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
