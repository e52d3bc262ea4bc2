"""Application service: Finalize Order use case.

Validates every wizard step, freezes the order into a history record
with its computed breakdown, and clears the draft.  Nothing is saved
while any step is incomplete.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timezone

from order_builder.application.draft_session import load_draft
from order_builder.application.dto import OrderRecordDTO
from order_builder.application.list_orders import to_record_dto
from order_builder.application.validation import validate_order
from order_builder.domain.exceptions import IncompleteStepError
from order_builder.domain.model.order import Order
from order_builder.domain.model.order_record import OrderRecord, OrderRecordLine
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository
from order_builder.domain.repository.order_history_repository import (
    OrderHistoryRepository,
)
from order_builder.domain.service.pricing import (
    OrderBreakdown,
    line_item_total,
    order_breakdown,
)

logger = logging.getLogger(__name__)


class FinalizeOrderHandler:

    def __init__(
        self,
        draft_repo: DraftOrderRepository,
        history_repo: OrderHistoryRepository,
    ) -> None:
        self._draft_repo = draft_repo
        self._history_repo = history_repo

    def handle(self, today: date | None = None) -> OrderRecordDTO:
        order = load_draft(self._draft_repo)

        errors = validate_order(order, today)
        if errors:
            raise IncompleteStepError(errors)

        record = self._to_record(order, order_breakdown(order))
        self._history_repo.save(record)
        self._draft_repo.clear()

        logger.info("Finalized order %s (total %s)", record.id, record.breakdown["total"])
        return to_record_dto(record)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_record(order: Order, breakdown: OrderBreakdown) -> OrderRecord:
        plan = order.selected_plan
        return OrderRecord(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            customer_name=order.customer.name.strip(),
            product_name=order.product.name,  # type: ignore[union-attr]
            plan_name=plan.name,  # type: ignore[union-attr]
            plan_price=plan.price.to_string(),  # type: ignore[union-attr]
            duration_months=order.contract.duration_months,
            start_date=order.contract.start_date,
            end_date=order.contract.end_date,
            breakdown=breakdown.to_dict(),
            add_ons=[
                OrderRecordLine(
                    add_on_id=addon.id,
                    name=addon.name,
                    quantity=addon.quantity.value,
                    unit_price=addon.unit_price.to_string(),
                    line_total=line_item_total(addon).to_string(),
                )
                for addon in order.add_ons
                if not line_item_total(addon).is_zero()
            ],
        )
