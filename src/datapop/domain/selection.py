"""Selection manager.

INVARIANT: :func:`get_selected_layers` returns the host's native selection
order reversed. Grid creation and population depend on this order, so it
is part of the contract.
"""

from __future__ import annotations

from collections.abc import Iterable

from datapop.domain.document import HostContext
from datapop.domain.layers import Layer


def get_selected_layers(ctx: HostContext) -> list[Layer]:
    """Return the current selection, native order reversed."""
    return list(reversed(ctx.document.selected_layers()))


def select_layers(ctx: HostContext, layers: Iterable[Layer]) -> None:
    """Replace the selection with *layers*, selected in sequence order.

    Every selected layer is deselected first. Observers of the document
    only see the final selection.
    """
    document = ctx.document
    with document.selection_batch():
        for layer in get_selected_layers(ctx):
            document.select_layer(layer, select=False, extend=False)
        for layer in layers:
            document.select_layer(layer, select=True, extend=True)
