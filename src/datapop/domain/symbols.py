"""Symbol master resolution.

Resolution is an ordered search over sources: the active document's own
masters first, then one source per registered library in registration
order. The first source that yields a master wins.

INVARIANT: A local master always beats a library master with the same
name or id. An unavailable symbol is ``None``, never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Protocol

from datapop.domain.document import HostContext, Library
from datapop.domain.layers import Layer

logger = logging.getLogger(__name__)


class _Symbolic(Protocol):
    name: str | None
    id: str


SymbolCriterion = Callable[[_Symbolic], bool]
SymbolSource = Callable[[SymbolCriterion], "Layer | None"]


def _local_source(ctx: HostContext) -> SymbolSource:
    def search(criterion: SymbolCriterion) -> Layer | None:
        for master in ctx.document.symbols():
            if criterion(master):
                return master
        return None

    return search


def _library_source(ctx: HostContext, library: Library) -> SymbolSource:
    def search(criterion: SymbolCriterion) -> Layer | None:
        if not library.valid:
            logger.debug("Skipping unavailable library %s", library.name)
            return None
        for reference in library.importable_symbol_references(ctx.document):
            if criterion(reference):
                return reference.import_into(ctx.document)
        return None

    return search


def _sources(ctx: HostContext) -> Iterator[SymbolSource]:
    yield _local_source(ctx)
    for library in list(ctx.libraries):
        yield _library_source(ctx, library)


def resolve_symbol_master(ctx: HostContext, criterion: SymbolCriterion) -> Layer | None:
    """Return the first master satisfying *criterion*, importing it if needed."""
    for source in _sources(ctx):
        master = source(criterion)
        if master is not None:
            return master
    return None


def find_symbol_master_with_name(ctx: HostContext, name: str) -> Layer | None:
    master = resolve_symbol_master(ctx, lambda symbol: symbol.name == name)
    if master is None:
        logger.debug("No symbol master named %r", name)
    return master


def find_symbol_master_with_id(ctx: HostContext, symbol_id: str) -> Layer | None:
    master = resolve_symbol_master(ctx, lambda symbol: symbol.id == symbol_id)
    if master is None:
        logger.debug("No symbol master with id %r", symbol_id)
    return master
