"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, datapop.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- datapop.toml sections ---


class DocumentConfig(BaseModel):
    """[document] section."""

    model_config = {"frozen": True}

    path: str = "document.json"


class GridConfig(BaseModel):
    """[grid] section — defaults for ``datapop grid``."""

    model_config = {"frozen": True}

    rows_count: int = 1
    rows_margin: float = 0.0
    columns_count: int = 1
    columns_margin: float = 0.0


class QueryConfig(BaseModel):
    """[query] section — defaults for ``datapop find``."""

    model_config = {"frozen": True}

    exact_match: bool = False
    subtree_only: bool = True
