"""Application service: Start Order use case.

Begins a fresh order seeded with the catalog add-ons.  Starting over
while a draft exists discards it, which is also how an order is reset.
"""

from __future__ import annotations

import logging

from order_builder.application.draft_session import to_step_dto
from order_builder.application.dto import StepDTO
from order_builder.domain.model.order import Order
from order_builder.domain.repository.catalog_repository import CatalogRepository
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository

logger = logging.getLogger(__name__)


class StartOrderHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        draft_repo: DraftOrderRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._draft_repo = draft_repo

    def handle(self) -> StepDTO:
        if self._draft_repo.load() is not None:
            logger.info("Discarding the order in progress")

        order = Order.create(self._catalog_repo.list_add_ons())
        self._draft_repo.save(order)
        logger.debug("Started order with %d add-ons", len(order.add_ons))
        return to_step_dto(order)
