"""PopulateService — the populate workflow around the layer core.

1. Read the selection (selection-manager order).
2. Optionally expand it into a grid.
3. Hand the layers, the data payload and the options to a populator.
4. Select the populated layers.

The populator is the data-binding algorithm; the payload is passed
through untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from datapop.domain.grid import GridSpec, create_grid
from datapop.domain.layers import Layer
from datapop.domain.selection import get_selected_layers, select_layers
from datapop.services._helpers import layer_summaries
from datapop.services.base import BaseService
from datapop.services.result import ServiceResult

logger = logging.getLogger(__name__)

SELECT_LAYERS_TO_POPULATE = "Please select the layers you would like to populate."


class Populator(Protocol):
    """Binds a data payload onto layers."""

    def __call__(self, layers: list[Layer], data: Any, options: Mapping[str, Any]) -> None: ...


class PopulateService(BaseService):
    def populate(
        self,
        data: Any,
        populator: Populator,
        *,
        grid: GridSpec | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Populate the selected layers, creating a grid first when *grid* is given."""
        op = "populate"
        ctx = self._ctx

        layers = get_selected_layers(ctx)
        if not layers:
            ctx.document.show_message(SELECT_LAYERS_TO_POPULATE)
            return self._fail(op, "NO_SELECTION", SELECT_LAYERS_TO_POPULATE)

        if grid is not None:
            invalid = self._check_grid_layers(op, layers)
            if invalid is not None:
                return invalid
            grid_layers = create_grid(ctx, layers, grid)
            if grid_layers is None:
                return self._fail(op, "GRID_INVALID", ctx.document.messages[-1])
            layers = grid_layers

        populator(layers, data, dict(options or {}))
        select_layers(ctx, layers)
        logger.debug("Populated %d layer(s)", len(layers))
        return ServiceResult.success(
            op=op,
            data={
                "count": len(layers),
                "grid": grid is not None,
                "items": layer_summaries(layers),
            },
            mutated=True,
        )
