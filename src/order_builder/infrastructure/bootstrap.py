"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from order_builder.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from order_builder.infrastructure.persistence.json_draft_order_repository import (
    JsonDraftOrderRepository,
)
from order_builder.infrastructure.persistence.json_order_history_repository import (
    JsonOrderHistoryRepository,
)

DATA_DIR_ENV = "ORDER_BUILDER_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(data_dir() / "catalog.json")


def draft_order_repository() -> JsonDraftOrderRepository:
    return JsonDraftOrderRepository(data_dir() / "draft.json")


def order_history_repository() -> JsonOrderHistoryRepository:
    return JsonOrderHistoryRepository(data_dir() / "orders.json")
