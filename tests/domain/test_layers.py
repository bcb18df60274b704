"""Tests for the layer tree model."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from datapop.domain.kinds import LayerKind
from datapop.domain.layers import (
    Frame,
    Layer,
    get_symbol_overrides,
    set_symbol_overrides,
)


class TestTreeStructure:
    def test_constructor_children_get_parent(self) -> None:
        child = Layer("child", LayerKind.TEXT)
        group = Layer("group", LayerKind.GROUP, children=[child])
        assert child.parent is group
        assert group.children == [child]

    def test_kind_coerced_from_string(self) -> None:
        assert Layer("t", "text").kind is LayerKind.TEXT  # type: ignore[arg-type]

    def test_identity_equality(self) -> None:
        a = Layer("same", LayerKind.TEXT, id="X")
        b = Layer("same", LayerKind.TEXT, id="X")
        assert a != b
        assert a == a

    def test_add_layers_reparents(self) -> None:
        child = Layer("child", LayerKind.TEXT)
        first = Layer("first", LayerKind.GROUP, children=[child])
        second = Layer("second", LayerKind.GROUP)
        second.add_layers([child])
        assert child.parent is second
        assert first.children == []
        assert second.children == [child]

    def test_non_container_rejects_children(self) -> None:
        text = Layer("t", LayerKind.TEXT)
        with pytest.raises(TypeError):
            text.add_layers([Layer("x", LayerKind.TEXT)])

    def test_remove_from_parent(self) -> None:
        child = Layer("child", LayerKind.TEXT)
        group = Layer("group", LayerKind.GROUP, children=[child])
        child.remove_from_parent()
        assert child.parent is None
        assert group.children == []
        child.remove_from_parent()  # detached: no-op

    def test_descendants_pre_order(self, layer: Callable[[str], Layer]) -> None:
        ids = [d.id for d in layer("CARD").descendants()]
        assert ids == [
            "TITLE",
            "SUBTITLE",
            "AVATAR-GROUP",
            "AVATAR",
            "AVATAR-IMAGE",
            "BACKGROUND",
            "BUTTON-INSTANCE",
            "UNNAMED",
            "DIVIDER",
        ]

    def test_descendants_exclude_root(self, layer: Callable[[str], Layer]) -> None:
        card = layer("CARD")
        assert card not in card.descendants()


class TestParents:
    def test_parent_group(self, layer: Callable[[str], Layer]) -> None:
        assert layer("AVATAR").parent_group() is layer("AVATAR-GROUP")
        assert layer("TITLE").parent_group() is None

    def test_shape_group_counts_as_group(self) -> None:
        rect = Layer("r", LayerKind.RECTANGLE)
        shape = Layer("s", LayerKind.SHAPE, children=[rect])
        Layer("a", LayerKind.ARTBOARD, children=[shape])
        assert rect.parent_group() is shape
        assert shape.parent_group() is None

    def test_parent_artboard(self, layer: Callable[[str], Layer]) -> None:
        assert layer("AVATAR").parent_artboard() is layer("CARD")
        assert layer("CARD").parent_artboard() is None

    def test_symbol_master_counts_as_artboard(self, layer: Callable[[str], Layer]) -> None:
        assert layer("SYM-BUTTON-LABEL").parent_artboard() is layer("SYM-BUTTON")

    def test_parent_page(self, layer: Callable[[str], Layer]) -> None:
        assert layer("AVATAR").parent_page() is layer("PAGE-1")

    def test_absolute_origin(self, layer: Callable[[str], Layer]) -> None:
        card = layer("CARD")
        card.frame.x, card.frame.y = 100, 200
        assert layer("AVATAR").absolute_origin() == (110, 270)


class TestDuplicate:
    def test_deep_copy_with_fresh_ids(self, layer: Callable[[str], Layer]) -> None:
        group = layer("AVATAR-GROUP")
        copy = group.duplicate()
        assert copy.parent is None
        assert copy.id != group.id
        assert [c.name for c in copy.children] == ["Avatar", "Avatar Image"]
        assert {c.id for c in copy.children}.isdisjoint({c.id for c in group.children})

    def test_frame_is_independent(self) -> None:
        original = Layer("r", LayerKind.RECTANGLE, frame=Frame(1, 2, 3, 4))
        copy = original.duplicate()
        copy.frame.x = 99
        assert original.frame.x == 1
        assert copy.frame == Frame(99, 2, 3, 4)

    def test_overrides_are_copied(self, layer: Callable[[str], Layer]) -> None:
        instance = layer("BUTTON-INSTANCE")
        copy = instance.duplicate()
        copy.overrides["label"] = "Stop"
        assert instance.overrides == {"label": "Go"}
        assert copy.symbol_id == "SYM-BUTTON"


class TestSymbolOverrides:
    def test_get_returns_copy(self, layer: Callable[[str], Layer]) -> None:
        overrides = get_symbol_overrides(layer("BUTTON-INSTANCE"))
        overrides["label"] = "changed"
        assert layer("BUTTON-INSTANCE").overrides == {"label": "Go"}

    def test_set_replaces(self, layer: Callable[[str], Layer]) -> None:
        result = set_symbol_overrides(layer("BUTTON-INSTANCE"), {"icon": "star"})
        assert result == {"icon": "star"}
        assert layer("BUTTON-INSTANCE").overrides == {"icon": "star"}

    def test_rejects_non_instances(self, layer: Callable[[str], Layer]) -> None:
        with pytest.raises(TypeError):
            get_symbol_overrides(layer("TITLE"))
        with pytest.raises(TypeError):
            set_symbol_overrides(layer("SYM-BUTTON"), {})
