"""Application service: List Orders use case (query)."""

from __future__ import annotations

from order_builder.application.dto import OrderRecordDTO
from order_builder.application.formatting import (
    format_currency,
    format_currency_precise,
    format_duration,
)
from order_builder.domain.model.order_record import OrderRecord
from order_builder.domain.repository.order_history_repository import (
    OrderHistoryRepository,
)


class ListOrdersHandler:

    def __init__(self, history_repo: OrderHistoryRepository) -> None:
        self._history_repo = history_repo

    def handle(self) -> list[OrderRecordDTO]:
        return [to_record_dto(record) for record in self._history_repo.list_all()]


def to_record_dto(record: OrderRecord) -> OrderRecordDTO:
    return OrderRecordDTO(
        id=record.id,
        created_at=record.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        customer_name=record.customer_name,
        product_name=record.product_name,
        plan_name=record.plan_name,
        duration=format_duration(record.duration_months),
        total=format_currency(record.breakdown["total"]),
        mrr=format_currency(record.breakdown["mrr"]),
        add_ons=[
            f"{line.name} x{line.quantity} @ {format_currency_precise(line.unit_price, 3)}"
            f" = {format_currency(line.line_total)}"
            for line in record.add_ons
        ],
    )
