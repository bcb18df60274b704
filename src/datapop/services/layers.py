"""LayerService — layer queries over the active document.

Searches default to the current page; explicit root ids narrow the search
to those layers. Query defaults come from the ``[query]`` config section.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datapop.domain.kinds import LayerKind
from datapop.domain.predicates import find_layers_in_layers
from datapop.services._helpers import layer_summaries, layer_summary
from datapop.services.base import BaseService
from datapop.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from datapop.domain.layers import Layer

logger = logging.getLogger(__name__)


class LayerService(BaseService):
    """Find layers by name, kind and exclusion rules."""

    def _query(
        self,
        op: str,
        name: str | None,
        *,
        exact_match: bool | None,
        kind: LayerKind | str | None,
        root_ids: Sequence[str] | None,
        subtree_only: bool | None,
        exclude_ids: Sequence[str] | None,
    ) -> list[Layer] | ServiceResult:
        defaults = self._workspace.settings.query
        if exact_match is None:
            exact_match = defaults.exact_match
        if subtree_only is None:
            subtree_only = defaults.subtree_only

        if kind is not None:
            try:
                kind = LayerKind(kind)
            except ValueError:
                return self._fail(op, "INVALID_KIND", f"Unknown layer kind: {kind}")

        if root_ids:
            roots = self._resolve_layers(op, root_ids)
            if isinstance(roots, ServiceResult):
                return roots
        else:
            page = self._ctx.document.current_page
            if page is None:
                return self._fail(op, "NO_PAGE", "Document has no current page")
            roots = [page]

        excluded: list[Layer] | None = None
        if exclude_ids:
            resolved = self._resolve_layers(op, exclude_ids)
            if isinstance(resolved, ServiceResult):
                return resolved
            excluded = resolved

        layers = find_layers_in_layers(name, exact_match, kind, roots, subtree_only, excluded)
        logger.debug("Query %r matched %d layer(s) in %d root(s)", name, len(layers), len(roots))
        return layers

    def find(
        self,
        name: str | None = None,
        *,
        exact_match: bool | None = None,
        kind: LayerKind | str | None = None,
        root_ids: Sequence[str] | None = None,
        subtree_only: bool | None = None,
        exclude_ids: Sequence[str] | None = None,
    ) -> ServiceResult:
        """All matching layers, in root order then tree order."""
        layers = self._query(
            "find_layers",
            name,
            exact_match=exact_match,
            kind=kind,
            root_ids=root_ids,
            subtree_only=subtree_only,
            exclude_ids=exclude_ids,
        )
        if isinstance(layers, ServiceResult):
            return layers
        return ServiceResult.success(
            op="find_layers",
            data={"count": len(layers), "items": layer_summaries(layers)},
        )

    def find_one(
        self,
        name: str | None = None,
        *,
        exact_match: bool | None = None,
        kind: LayerKind | str | None = None,
        root_ids: Sequence[str] | None = None,
        subtree_only: bool | None = None,
        exclude_ids: Sequence[str] | None = None,
    ) -> ServiceResult:
        """The first matching layer; ``layer`` is None when nothing matches."""
        layers = self._query(
            "find_layer",
            name,
            exact_match=exact_match,
            kind=kind,
            root_ids=root_ids,
            subtree_only=subtree_only,
            exclude_ids=exclude_ids,
        )
        if isinstance(layers, ServiceResult):
            return layers
        data: dict[str, Any] = {"layer": layer_summary(layers[0]) if layers else None}
        return ServiceResult.success(op="find_layer", data=data)
