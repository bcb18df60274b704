"""Workspace — the single dependency injected into every service.

Owns the snapshot path and the loaded :class:`HostContext`. The snapshot
is read lazily on first access so ``--help`` never touches the disk.
Mutating services call :meth:`Workspace.save` to write the document back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datapop.config.logging import bind_document
from datapop.infrastructure.snapshot import load_snapshot, save_snapshot

if TYPE_CHECKING:
    from pathlib import Path

    from datapop.config.settings import DatapopSettings
    from datapop.domain.document import Document, HostContext
    from datapop.domain.layers import Layer

logger = logging.getLogger(__name__)


class Workspace:
    """Loaded document context plus the settings that located it."""

    def __init__(self, settings: DatapopSettings, context: HostContext | None = None) -> None:
        self.settings = settings
        self.path: Path = settings.resolved_document_path
        self._context = context

    @property
    def context(self) -> HostContext:
        """The host context (loaded from the snapshot on first access)."""
        if self._context is None:
            self._context = load_snapshot(self.path)
            bind_document(document_id=self._context.document.id, document_path=str(self.path))
            logger.debug("Loaded document snapshot %s", self.path)
        return self._context

    @property
    def document(self) -> Document:
        return self.context.document

    def layer(self, layer_id: str) -> Layer | None:
        """Look up a layer (or page) of the active document by id."""
        return self.document.layer_with_id(layer_id)

    def save(self) -> None:
        """Write the current context back to the snapshot path."""
        save_snapshot(self.context, self.path)
        logger.debug("Saved document snapshot %s", self.path)
