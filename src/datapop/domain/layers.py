"""Layer tree model.

A :class:`Layer` is a node in a document tree. Frames are relative to the
parent's coordinate space. Parents are held weakly: tree membership is the
only ownership relation, a detached subtree keeps its own children alive.

INVARIANT: Layers compare by identity. Two layers with equal attributes
are still different layers.
"""

from __future__ import annotations

import copy
import uuid
import weakref
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from datapop.domain.kinds import CONTAINER_KINDS, LayerKind, is_symbol_instance


def new_layer_id() -> str:
    """Generate a fresh layer identifier (uppercase UUID4)."""
    return str(uuid.uuid4()).upper()


@dataclass
class Frame:
    """Position and size of a layer, relative to its parent."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(eq=False)
class Layer:
    """A node in a document tree.

    Attributes:
        name: Display name. Unnamed layers never match a layer query.
        kind: Closed layer kind.
        frame: Position and size relative to the parent.
        id: Stable identifier, unique within a document.
        symbol_id: For symbol instances, the id of the master they place.
        overrides: For symbol instances, override key -> replacement value.
        children: Ordered child layers (bottom to top).
    """

    name: str | None
    kind: LayerKind
    frame: Frame = field(default_factory=Frame)
    id: str = field(default_factory=new_layer_id)
    symbol_id: str | None = None
    overrides: dict[str, Any] = field(default_factory=dict, repr=False)
    children: list[Layer] = field(default_factory=list, repr=False)
    _parent: weakref.ReferenceType[Layer] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.kind = LayerKind(self.kind)
        initial, self.children = self.children, []
        self.add_layers(initial)

    # ------------------------------------------------------------------
    # Tree structure
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Layer | None:
        return self._parent() if self._parent is not None else None

    def add_layers(self, layers: Iterable[Layer]) -> None:
        """Append *layers* as the topmost children, detaching them from any old parent."""
        layers = list(layers)
        if layers and self.kind not in CONTAINER_KINDS:
            msg = f"{self.kind} layers cannot hold child layers"
            raise TypeError(msg)
        for layer in layers:
            if layer.parent is not None:
                layer.remove_from_parent()
            layer._parent = weakref.ref(self)
            self.children.append(layer)

    def remove_from_parent(self) -> None:
        """Detach this layer from its parent. No-op for a detached layer."""
        parent = self.parent
        if parent is None:
            return
        parent.children.remove(self)
        self._parent = None

    def descendants(self) -> list[Layer]:
        """All layers below this one in pre-order. The layer itself is excluded."""
        result: list[Layer] = []
        stack = list(reversed(self.children))
        while stack:
            layer = stack.pop()
            result.append(layer)
            stack.extend(reversed(layer.children))
        return result

    def ancestors(self) -> Iterator[Layer]:
        """Yield parent, grandparent, ... up to the root."""
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    def parent_group(self) -> Layer | None:
        """The immediate parent when it is a group or a shape group.

        Artboards, symbol masters and pages are not groups.
        """
        parent = self.parent
        if parent is not None and parent.kind in (LayerKind.GROUP, LayerKind.SHAPE):
            return parent
        return None

    def parent_artboard(self) -> Layer | None:
        """Nearest enclosing artboard. Symbol masters count as artboards."""
        for ancestor in self.ancestors():
            if ancestor.kind in (LayerKind.ARTBOARD, LayerKind.SYMBOL_MASTER):
                return ancestor
        return None

    def parent_page(self) -> Layer | None:
        for ancestor in self.ancestors():
            if ancestor.kind is LayerKind.PAGE:
                return ancestor
        return None

    def absolute_origin(self) -> tuple[float, float]:
        """Origin in page coordinates (pages contribute no offset)."""
        x, y = self.frame.x, self.frame.y
        for ancestor in self.ancestors():
            if ancestor.kind is LayerKind.PAGE:
                break
            x += ancestor.frame.x
            y += ancestor.frame.y
        return x, y

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------

    def duplicate(self) -> Layer:
        """Deep copy of this subtree with fresh ids. The copy is detached."""
        return Layer(
            name=self.name,
            kind=self.kind,
            frame=replace(self.frame),
            symbol_id=self.symbol_id,
            overrides=copy.deepcopy(self.overrides),
            children=[child.duplicate() for child in self.children],
        )


def get_symbol_overrides(layer: Layer) -> dict[str, Any]:
    """Return a copy of a symbol instance's overrides."""
    if not is_symbol_instance(layer):
        msg = f"Layer {layer.id} is not a symbol instance"
        raise TypeError(msg)
    return dict(layer.overrides)


def set_symbol_overrides(layer: Layer, overrides: dict[str, Any]) -> dict[str, Any]:
    """Replace a symbol instance's overrides. Returns the new overrides."""
    if not is_symbol_instance(layer):
        msg = f"Layer {layer.id} is not a symbol instance"
        raise TypeError(msg)
    layer.overrides = dict(overrides)
    return layer.overrides
