"""Application service: Delete Order use case."""

from __future__ import annotations

import logging

from order_builder.domain.exceptions import EntityNotFoundError
from order_builder.domain.repository.order_history_repository import (
    OrderHistoryRepository,
)

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, history_repo: OrderHistoryRepository) -> None:
        self._history_repo = history_repo

    def handle(self, record_id: str) -> None:
        if not self._history_repo.delete(record_id):
            raise EntityNotFoundError(f"Order '{record_id}' not found")
        logger.info("Deleted order %s", record_id)
