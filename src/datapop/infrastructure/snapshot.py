"""Document snapshots — JSON files the CLI loads, mutates, and saves.

A snapshot holds one document plus its library registry. Libraries embed
their own documents; a library without a document (or with
``enabled = false``) loads as unavailable.

Selection is stored as layer ids in native host order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from datapop.domain.document import Document, HostContext, Library
from datapop.domain.kinds import LayerKind
from datapop.domain.layers import Frame, Layer


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read or is malformed."""


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class FrameModel(BaseModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class LayerModel(BaseModel):
    id: str | None = None
    name: str | None = None
    kind: LayerKind
    frame: FrameModel = Field(default_factory=FrameModel)
    symbol_id: str | None = None
    overrides: dict[str, Any] = Field(default_factory=dict)
    children: list[LayerModel] = Field(default_factory=list)


class DocumentModel(BaseModel):
    id: str | None = None
    name: str = "Untitled"
    pages: list[LayerModel] = Field(default_factory=list)
    current_page: str | None = None
    selection: list[str] = Field(default_factory=list)
    foreign_symbols: list[LayerModel] = Field(default_factory=list)


class LibraryModel(BaseModel):
    id: str | None = None
    name: str
    enabled: bool = True
    document: DocumentModel | None = None


class SnapshotModel(BaseModel):
    document: DocumentModel
    libraries: list[LibraryModel] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Model <-> domain conversion
# ---------------------------------------------------------------------------


def layer_from_model(model: LayerModel) -> Layer:
    kwargs: dict[str, Any] = {}
    if model.id:
        kwargs["id"] = model.id
    return Layer(
        name=model.name,
        kind=model.kind,
        frame=Frame(**model.frame.model_dump()),
        symbol_id=model.symbol_id,
        overrides=dict(model.overrides),
        children=[layer_from_model(child) for child in model.children],
        **kwargs,
    )


def layer_to_model(layer: Layer) -> LayerModel:
    return LayerModel(
        id=layer.id,
        name=layer.name,
        kind=layer.kind,
        frame=FrameModel(
            x=layer.frame.x,
            y=layer.frame.y,
            width=layer.frame.width,
            height=layer.frame.height,
        ),
        symbol_id=layer.symbol_id,
        overrides=dict(layer.overrides),
        children=[layer_to_model(child) for child in layer.children],
    )


def document_from_model(model: DocumentModel) -> Document:
    try:
        document = Document(
            [layer_from_model(page) for page in model.pages],
            name=model.name,
            id=model.id,
        )
        for master in model.foreign_symbols:
            document.add_foreign_symbol(layer_from_model(master))
    except TypeError as exc:
        raise SnapshotError(str(exc)) from exc

    if model.current_page is not None:
        page = next((p for p in document.pages if p.id == model.current_page), None)
        if page is None:
            msg = f"Current page {model.current_page!r} not found"
            raise SnapshotError(msg)
        document.current_page = page

    for layer_id in model.selection:
        layer = document.layer_with_id(layer_id)
        if layer is None:
            msg = f"Selected layer {layer_id!r} not found"
            raise SnapshotError(msg)
        document.select_layer(layer, select=True, extend=True)
    return document


def document_to_model(document: Document) -> DocumentModel:
    current = document.current_page
    return DocumentModel(
        id=document.id,
        name=document.name,
        pages=[layer_to_model(page) for page in document.pages],
        current_page=current.id if current is not None else None,
        selection=[layer.id for layer in document.selected_layers()],
        foreign_symbols=[layer_to_model(master) for master in document.foreign_symbols],
    )


def context_from_model(model: SnapshotModel) -> HostContext:
    libraries = [
        Library(
            lib.name,
            document_from_model(lib.document) if lib.document is not None else None,
            id=lib.id,
            enabled=lib.enabled,
        )
        for lib in model.libraries
    ]
    return HostContext(document=document_from_model(model.document), libraries=libraries)


def context_to_model(ctx: HostContext) -> SnapshotModel:
    return SnapshotModel(
        document=document_to_model(ctx.document),
        libraries=[
            LibraryModel(
                id=lib.id,
                name=lib.name,
                enabled=lib.enabled,
                document=document_to_model(lib.document) if lib.document is not None else None,
            )
            for lib in ctx.libraries
        ],
    )


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def parse_snapshot(raw: str) -> HostContext:
    """Parse snapshot JSON into a host context."""
    try:
        model = SnapshotModel.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Invalid document snapshot: {exc.error_count()} error(s)\n{exc}"
        raise SnapshotError(msg) from exc
    return context_from_model(model)


def load_snapshot(path: Path) -> HostContext:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read document snapshot {path}: {exc.strerror or exc}"
        raise SnapshotError(msg) from exc
    return parse_snapshot(raw)


def save_snapshot(ctx: HostContext, path: Path) -> None:
    """Write *ctx* to *path* as indented JSON. Parent directories are created."""
    path.parent.mkdir(parents=True, exist_ok=True)
    rendered = context_to_model(ctx).model_dump_json(indent=2)
    path.write_text(rendered + "\n", encoding="utf-8")
