"""BaseService — common foundation for datapop services.

Every service receives a :class:`Workspace` at construction time and works
on its host context. Services never write the snapshot themselves; they
flag mutations on the result and the caller decides when to save.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from datapop.domain.kinds import LayerKind
from datapop.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from datapop.domain.document import HostContext
    from datapop.domain.layers import Layer
    from datapop.infrastructure.workspace import Workspace


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GridService(BaseService):
            def create(self, ...) -> ServiceResult:
                layers = get_selected_layers(self._ctx)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def _ctx(self) -> HostContext:
        return self._workspace.context

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult.failure(op, code, message, **detail)

    def _resolve_layers(self, op: str, layer_ids: Iterable[str]) -> list[Layer] | ServiceResult:
        """Look up *layer_ids* in order, or return a NOT_FOUND failure."""
        layers: list[Layer] = []
        missing: list[str] = []
        for layer_id in layer_ids:
            layer = self._workspace.layer(layer_id)
            if layer is None:
                missing.append(layer_id)
            else:
                layers.append(layer)
        if missing:
            return self._fail(op, "NOT_FOUND", f"Layer not found: {', '.join(missing)}", ids=missing)
        return layers

    def _check_grid_layers(self, op: str, layers: Sequence[Layer]) -> ServiceResult | None:
        """Reject layers a grid cannot be built from, or return None.

        Pages and detached layers have no container for the copies. A layer
        selected together with one of its ancestors would put the copies
        into a container that the grid removes.
        """
        unplaceable = [layer.id for layer in layers if layer.parent is None or layer.kind is LayerKind.PAGE]
        if unplaceable:
            return self._fail(
                op,
                "INVALID_SELECTION",
                "Pages and detached layers cannot be used in a grid",
                ids=unplaceable,
            )
        selected = {id(layer) for layer in layers}
        nested = [layer.id for layer in layers if any(id(ancestor) in selected for ancestor in layer.ancestors())]
        if nested:
            return self._fail(
                op,
                "INVALID_SELECTION",
                "Layers selected together with their own group cannot be used in a grid",
                ids=nested,
            )
        return None
