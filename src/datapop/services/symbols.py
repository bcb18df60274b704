"""SymbolService — resolve symbol masters locally or from libraries."""

from __future__ import annotations

from datapop.domain.symbols import find_symbol_master_with_id, find_symbol_master_with_name
from datapop.services._helpers import layer_summary
from datapop.services.base import BaseService
from datapop.services.result import ServiceResult


class SymbolService(BaseService):
    """Look up symbol masters by name or id."""

    def resolve(self, *, name: str | None = None, symbol_id: str | None = None) -> ServiceResult:
        """Resolve a master by exactly one of *name* or *symbol_id*.

        An unavailable symbol is not a failure: ``symbol`` is None and a
        warning is attached. Importing a library master marks the result
        as mutated.
        """
        op = "resolve_symbol"
        if (name is None) == (symbol_id is None):
            return self._fail(op, "INVALID_ARGUMENT", "Pass exactly one of name or symbol id")

        document = self._ctx.document
        imported_before = len(document.foreign_symbols)
        if name is not None:
            master = find_symbol_master_with_name(self._ctx, name)
            criterion = f"name {name!r}"
        else:
            master = find_symbol_master_with_id(self._ctx, symbol_id)  # type: ignore[arg-type]
            criterion = f"id {symbol_id!r}"

        if master is None:
            return ServiceResult.success(
                op=op,
                data={"symbol": None},
                warnings=[f"Symbol unavailable: no master with {criterion}"],
            )

        imported = len(document.foreign_symbols) > imported_before
        return ServiceResult.success(
            op=op,
            data={"symbol": layer_summary(master), "imported": imported},
            mutated=imported,
        )
