"""Application service: Set Contract use case (wizard step 3)."""

from __future__ import annotations

from datetime import date

from order_builder.application.draft_session import load_draft
from order_builder.domain.model.order import Contract
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository


class SetContractHandler:

    def __init__(self, draft_repo: DraftOrderRepository) -> None:
        self._draft_repo = draft_repo

    def handle(
        self,
        start_date: date | None = None,
        duration_months: int | None = None,
    ) -> Contract:
        """Update the contract term; the end date follows automatically."""
        order = load_draft(self._draft_repo)
        order.set_contract(start_date=start_date, duration_months=duration_months)
        self._draft_repo.save(order)
        return order.contract
