"""SelectionService — read and replace the document selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from datapop.domain.selection import get_selected_layers, select_layers
from datapop.services._helpers import layer_summaries
from datapop.services.base import BaseService
from datapop.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence


class SelectionService(BaseService):
    def get(self) -> ServiceResult:
        """The selection in selection-manager order (native order reversed)."""
        layers = get_selected_layers(self._ctx)
        return ServiceResult.success(
            op="get_selection",
            data={"count": len(layers), "items": layer_summaries(layers)},
        )

    def set(self, layer_ids: Sequence[str]) -> ServiceResult:
        """Replace the selection with the given layers, selected in order."""
        op = "set_selection"
        layers = self._resolve_layers(op, layer_ids)
        if isinstance(layers, ServiceResult):
            return layers
        select_layers(self._ctx, layers)
        return ServiceResult.success(
            op=op,
            data={"count": len(layers), "items": layer_summaries(layers)},
            mutated=True,
        )
