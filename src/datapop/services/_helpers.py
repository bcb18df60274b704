"""Shared service-layer helper functions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from datapop.domain.layers import Layer


def layer_summary(layer: Layer) -> dict[str, Any]:
    """Flat, JSON-ready description of a layer."""
    parent = layer.parent
    return {
        "id": layer.id,
        "name": layer.name,
        "kind": str(layer.kind),
        "x": layer.frame.x,
        "y": layer.frame.y,
        "width": layer.frame.width,
        "height": layer.frame.height,
        "parent_id": parent.id if parent is not None else None,
    }


def layer_summaries(layers: Iterable[Layer]) -> list[dict[str, Any]]:
    return [layer_summary(layer) for layer in layers]
