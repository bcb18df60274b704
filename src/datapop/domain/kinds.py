"""Layer kinds and kind-check helpers.

Layer kinds form a closed enumeration. Kind checks are plain set lookups
over :class:`LayerKind` rather than subtype tests.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datapop.domain.layers import Layer


class LayerKind(StrEnum):
    """Every kind of node a document tree can hold."""

    PAGE = "page"
    ARTBOARD = "artboard"
    GROUP = "group"
    TEXT = "text"
    SHAPE = "shape"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    OVAL = "oval"
    STAR = "star"
    POLYGON = "polygon"
    BITMAP = "bitmap"
    SYMBOL_INSTANCE = "symbol_instance"
    SYMBOL_MASTER = "symbol_master"


# Wildcard for kind filters.
ANY: LayerKind | None = None

PRIMITIVE_SHAPE_KINDS: frozenset[LayerKind] = frozenset(
    {
        LayerKind.RECTANGLE,
        LayerKind.TRIANGLE,
        LayerKind.OVAL,
        LayerKind.STAR,
        LayerKind.POLYGON,
    }
)

# What the generic SHAPE filter matches.
SHAPE_KINDS: frozenset[LayerKind] = PRIMITIVE_SHAPE_KINDS | {LayerKind.SHAPE}

# What an unqualified (ANY) search may return. Bitmaps, symbols and pages
# are never part of an unqualified search.
DEFAULT_QUERY_KINDS: frozenset[LayerKind] = SHAPE_KINDS | {
    LayerKind.GROUP,
    LayerKind.ARTBOARD,
    LayerKind.TEXT,
}

# Kinds that may hold child layers.
CONTAINER_KINDS: frozenset[LayerKind] = frozenset(
    {
        LayerKind.PAGE,
        LayerKind.ARTBOARD,
        LayerKind.GROUP,
        LayerKind.SHAPE,
        LayerKind.SYMBOL_MASTER,
    }
)


def is_symbol_instance(layer: Layer) -> bool:
    return layer.kind is LayerKind.SYMBOL_INSTANCE


def is_symbol_master(layer: Layer) -> bool:
    return layer.kind is LayerKind.SYMBOL_MASTER


def is_layer_group(layer: Layer) -> bool:
    """True for plain groups only; artboards, pages and shape groups are not groups."""
    return layer.kind is LayerKind.GROUP


def is_layer_shape_group(layer: Layer) -> bool:
    return layer.kind in SHAPE_KINDS


def is_layer_bitmap(layer: Layer) -> bool:
    return layer.kind is LayerKind.BITMAP


def is_layer_text(layer: Layer) -> bool:
    return layer.kind is LayerKind.TEXT


def is_artboard(layer: Layer) -> bool:
    return layer.kind is LayerKind.ARTBOARD
