"""Grid generation — expand one anchor layer into a rows x columns array.

The anchor is picked by a single linear scan: a layer replaces the current
anchor when its x is smaller OR its y is smaller than the best values seen
so far. With scattered input this does not always pick a layer that is
both leftmost and topmost; callers rely on the scan as-is.

Every originally selected layer is removed before any copy is inserted.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator

from datapop.domain.document import HostContext
from datapop.domain.layers import Layer

logger = logging.getLogger(__name__)

ROWS_COUNT_MESSAGE = "Number of grid rows must be at least 1."
ROWS_MARGIN_MESSAGE = "Grid row margin is invalid."
COLUMNS_COUNT_MESSAGE = "Number of grid columns must be at least 1."
COLUMNS_MARGIN_MESSAGE = "Grid column margin is invalid."


class GridSpec(BaseModel):
    """Rows, columns and the margins between them.

    All four values are required. Missing or non-numeric values are kept
    as ``None`` so that :func:`validate_grid_spec` can report them; a
    margin of ``0`` is a real value, distinct from a missing one. The
    camelCase option keys (``rowsCount`` ...) are accepted as aliases.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    rows_count: float | None = Field(default=None, alias="rowsCount")
    rows_margin: float | None = Field(default=None, alias="rowsMargin")
    columns_count: float | None = Field(default=None, alias="columnsCount")
    columns_margin: float | None = Field(default=None, alias="columnsMargin")

    @field_validator("*", mode="before")
    @classmethod
    def _number_or_none(cls, value: Any) -> float | None:
        if isinstance(value, bool) or value is None:
            return None
        if not isinstance(value, (int, float, str)):
            return None
        try:
            return float(value)
        except (ValueError, OverflowError):
            return None


def _is_count(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value >= 1 and value.is_integer()


def _is_margin(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value >= 0


def validate_grid_spec(spec: GridSpec) -> str | None:
    """Return the user-facing message for the first invalid value, else None."""
    if not _is_count(spec.rows_count):
        return ROWS_COUNT_MESSAGE
    if not _is_margin(spec.rows_margin):
        return ROWS_MARGIN_MESSAGE
    if not _is_count(spec.columns_count):
        return COLUMNS_COUNT_MESSAGE
    if not _is_margin(spec.columns_margin):
        return COLUMNS_MARGIN_MESSAGE
    return None


def select_anchor(layers: Sequence[Layer]) -> Layer:
    """Pick the grid anchor with the OR-based smallest-x / smallest-y scan."""
    anchor = layers[0]
    smallest_x = anchor.frame.x
    smallest_y = anchor.frame.y
    for layer in layers:
        if layer.frame.x < smallest_x or layer.frame.y < smallest_y:
            smallest_x = layer.frame.x
            smallest_y = layer.frame.y
            anchor = layer
    return anchor


def create_grid(ctx: HostContext, selected_layers: Sequence[Layer], spec: GridSpec) -> list[Layer] | None:
    """Replace *selected_layers* with a grid of copies of the anchor layer.

    Returns the copies in row-major order, or None (after showing a
    message) when *spec* is invalid. An invalid spec leaves the document
    untouched. The caller is responsible for updating the selection.

    Selecting a layer together with one of its ancestors is not supported:
    when the inner layer is the anchor the copies go into a container that
    has just been removed.
    """
    message = validate_grid_spec(spec)
    if message is not None:
        ctx.document.show_message(message)
        return None

    layers = list(selected_layers)
    assert layers, "create_grid requires at least one layer"

    anchor = select_anchor(layers)
    width = anchor.frame.width
    height = anchor.frame.height
    parent = anchor.parent_group() or anchor.parent_artboard() or anchor.parent_page()
    assert parent is not None, f"anchor layer {anchor.id} has no parent"

    for layer in layers:
        layer.remove_from_parent()

    start_x = anchor.frame.x
    start_y = anchor.frame.y
    rows = int(spec.rows_count)  # type: ignore[arg-type]
    columns = int(spec.columns_count)  # type: ignore[arg-type]
    rows_margin = spec.rows_margin or 0.0
    columns_margin = spec.columns_margin or 0.0

    new_layers: list[Layer] = []
    for i in range(rows):
        y = start_y + i * (height + rows_margin)
        for j in range(columns):
            copy = anchor.duplicate()
            parent.add_layers([copy])
            copy.frame.x = start_x + j * (width + columns_margin)
            copy.frame.y = y
            new_layers.append(copy)

    logger.debug(
        "Created %dx%d grid from %s (%d layers removed)",
        rows,
        columns,
        anchor.id,
        len(layers),
    )
    return new_layers
