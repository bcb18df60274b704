"""Document, library, and host context model.

A :class:`Document` owns ordered pages, the current page, and an ordered
native selection. Libraries expose importable symbol references; importing
one materializes a foreign symbol master inside the importing document.

:class:`HostContext` bundles the document and the library registry and is
passed explicitly into every core operation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from datapop.domain.kinds import LayerKind, is_symbol_master
from datapop.domain.layers import Layer, new_layer_id

logger = logging.getLogger(__name__)

SelectionListener = Callable[[list[Layer]], None]


class LibraryUnavailableError(Exception):
    """Raised when importing from a library whose document cannot be reached."""


class Document:
    """An in-memory design document.

    The native selection keeps layers in the order the host selected them.
    Selection listeners are notified after every change, or once at the end
    of a :meth:`selection_batch`.
    """

    def __init__(
        self,
        pages: Iterable[Layer] = (),
        *,
        name: str = "Untitled",
        id: str | None = None,  # noqa: A002
    ) -> None:
        self.id = id or new_layer_id()
        self.name = name
        self.pages: list[Layer] = []
        self.foreign_symbols: list[Layer] = []
        self.messages: list[str] = []
        self._current_page: Layer | None = None
        self._selection: list[Layer] = []
        self._listeners: list[SelectionListener] = []
        self._batch_depth = 0
        self._selection_dirty = False
        for page in pages:
            self._append_page(page)
        if self.pages:
            self._current_page = self.pages[0]

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def _append_page(self, page: Layer) -> None:
        if page.kind is not LayerKind.PAGE:
            msg = f"Expected a page, got {page.kind}"
            raise TypeError(msg)
        self.pages.append(page)

    @property
    def current_page(self) -> Layer | None:
        return self._current_page

    @current_page.setter
    def current_page(self, page: Layer) -> None:
        if page not in self.pages:
            msg = f"Page {page.id} does not belong to document {self.id}"
            raise ValueError(msg)
        self._current_page = page

    def add_blank_page(self, name: str = "Page") -> Layer:
        """Append an empty page and make it current, like the host does."""
        page = Layer(name=name, kind=LayerKind.PAGE)
        self._append_page(page)
        self._current_page = page
        return page

    def remove_page(self, page: Layer) -> None:
        """Remove *page*. Selected layers on it are deselected."""
        self.pages.remove(page)
        on_page = set(map(id, page.descendants()))
        if any(id(layer) in on_page for layer in self._selection):
            self._selection = [layer for layer in self._selection if id(layer) not in on_page]
            self._selection_changed()
        if self._current_page is page:
            self._current_page = self.pages[0] if self.pages else None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def all_layers(self) -> Iterator[Layer]:
        """Every page, every layer on every page, then foreign symbol masters."""
        for page in self.pages:
            yield page
            yield from page.descendants()
        for master in self.foreign_symbols:
            yield master
            yield from master.descendants()

    def layer_with_id(self, layer_id: str) -> Layer | None:
        for layer in self.all_layers():
            if layer.id == layer_id:
                return layer
        return None

    def symbols(self) -> list[Layer]:
        """All symbol masters: local masters in page order, then imported ones."""
        local = [layer for page in self.pages for layer in page.descendants() if is_symbol_master(layer)]
        return local + list(self.foreign_symbols)

    def foreign_symbol(self, symbol_id: str) -> Layer | None:
        for master in self.foreign_symbols:
            if master.id == symbol_id:
                return master
        return None

    def add_foreign_symbol(self, master: Layer) -> None:
        if not is_symbol_master(master):
            msg = f"Expected a symbol master, got {master.kind}"
            raise TypeError(msg)
        self.foreign_symbols.append(master)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def selected_layers(self) -> list[Layer]:
        """The native selection, in host order."""
        return list(self._selection)

    def select_layer(self, layer: Layer, *, select: bool, extend: bool) -> None:
        """Select or deselect a single layer.

        ``select=True, extend=False`` replaces the selection with *layer*;
        ``select=True, extend=True`` appends it; ``select=False`` removes it.
        """
        if select:
            if not extend:
                self._selection = [layer]
            elif layer not in self._selection:
                self._selection.append(layer)
        elif layer in self._selection:
            self._selection.remove(layer)
        else:
            return
        self._selection_changed()

    def on_selection_change(self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    @contextmanager
    def selection_batch(self) -> Iterator[None]:
        """Defer selection notifications until the outermost batch exits."""
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._selection_dirty:
                self._selection_dirty = False
                self._notify()

    def _selection_changed(self) -> None:
        if self._batch_depth:
            self._selection_dirty = True
        else:
            self._notify()

    def _notify(self) -> None:
        snapshot = self.selected_layers()
        for listener in self._listeners:
            listener(snapshot)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def show_message(self, message: str) -> None:
        """Show a user-facing message (recorded and logged)."""
        self.messages.append(message)
        logger.info("Document message: %s", message)


@dataclass(eq=False)
class SymbolReference:
    """An importable symbol master offered by a library."""

    name: str | None
    id: str
    master: Layer = field(repr=False)
    library: Library = field(repr=False)

    def import_into(self, document: Document) -> Layer:
        """Materialize this reference as a foreign master in *document*.

        Idempotent: a reference already imported returns the existing master.
        """
        existing = document.foreign_symbol(self.id)
        if existing is not None:
            return existing
        if not self.library.valid:
            msg = f"Library {self.library.name!r} is not available"
            raise LibraryUnavailableError(msg)
        local = self.master.duplicate()
        local.id = self.id
        local.name = self.name
        document.add_foreign_symbol(local)
        logger.debug("Imported symbol %s (%s) from library %s", self.name, self.id, self.library.name)
        return local


class Library:
    """An external collection of importable symbol masters.

    A library is valid only while its backing document is reachable.
    """

    def __init__(
        self,
        name: str,
        document: Document | None = None,
        *,
        id: str | None = None,  # noqa: A002
        enabled: bool = True,
    ) -> None:
        self.id = id or new_layer_id()
        self.name = name
        self.document = document
        self.enabled = enabled

    def __repr__(self) -> str:
        return f"Library(name={self.name!r}, id={self.id!r}, valid={self.valid})"

    @property
    def valid(self) -> bool:
        return self.enabled and self.document is not None

    def importable_symbol_references(self, document: Document) -> list[SymbolReference]:
        """References *document* could import. Empty for an invalid library."""
        if not self.valid or self.document is None or self.document is document:
            return []
        return [
            SymbolReference(name=master.name, id=master.id, master=master, library=self)
            for master in self.document.symbols()
        ]


@dataclass
class HostContext:
    """Explicit context for core operations: the active document and its libraries.

    Libraries are consulted in registration order.
    """

    document: Document
    libraries: list[Library] = field(default_factory=list)
