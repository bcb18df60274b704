"""GridService — expand the selection into a grid and select the copies.

Count and margin values left as ``None`` fall back to the ``[grid]``
config section. Validation itself belongs to the core grid generator;
its user-facing message is surfaced as the INVALID_GRID error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datapop.domain.grid import GridSpec, create_grid, select_anchor, validate_grid_spec
from datapop.domain.selection import get_selected_layers, select_layers
from datapop.services._helpers import layer_summaries
from datapop.services.base import BaseService
from datapop.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class GridService(BaseService):
    """Create layer grids from the current (or an explicit) selection."""

    def spec_with_defaults(
        self,
        *,
        rows_count: float | None = None,
        rows_margin: float | None = None,
        columns_count: float | None = None,
        columns_margin: float | None = None,
    ) -> GridSpec:
        defaults = self._workspace.settings.grid
        return GridSpec(
            rows_count=defaults.rows_count if rows_count is None else rows_count,
            rows_margin=defaults.rows_margin if rows_margin is None else rows_margin,
            columns_count=defaults.columns_count if columns_count is None else columns_count,
            columns_margin=defaults.columns_margin if columns_margin is None else columns_margin,
        )

    def create(self, spec: GridSpec, *, layer_ids: Sequence[str] | None = None) -> ServiceResult:
        """Replace the layers with a grid of anchor copies and select the copies.

        Without *layer_ids* the current selection (in selection-manager
        order) is used.
        """
        op = "create_grid"
        if layer_ids:
            layers = self._resolve_layers(op, layer_ids)
            if isinstance(layers, ServiceResult):
                return layers
        else:
            layers = get_selected_layers(self._ctx)

        if not layers:
            return self._fail(op, "NO_SELECTION", "Select the layers to turn into a grid")

        invalid = self._check_grid_layers(op, layers)
        if invalid is not None:
            return invalid

        anchor = select_anchor(layers) if validate_grid_spec(spec) is None else None
        new_layers = create_grid(self._ctx, layers, spec)
        if new_layers is None:
            messages = self._ctx.document.messages
            message = messages[-1] if messages else "Invalid grid specification"
            return self._fail(op, "INVALID_GRID", message)

        select_layers(self._ctx, new_layers)
        logger.debug("Grid replaced %d layer(s) with %d copies", len(layers), len(new_layers))
        return ServiceResult.success(
            op=op,
            data={
                "anchor_id": anchor.id if anchor is not None else None,
                "rows": int(spec.rows_count or 0),
                "columns": int(spec.columns_count or 0),
                "removed": len(layers),
                "count": len(new_layers),
                "items": layer_summaries(new_layers),
            },
            mutated=True,
        )
