"""Shared helpers for use cases that work on the draft order."""

from __future__ import annotations

from order_builder.application.dto import StepDTO
from order_builder.domain.exceptions import EntityNotFoundError
from order_builder.domain.model.order import Order
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository


def load_draft(draft_repo: DraftOrderRepository) -> Order:
    order = draft_repo.load()
    if order is None:
        raise EntityNotFoundError("No order in progress. Start one with 'order start'.")
    return order


def to_step_dto(order: Order) -> StepDTO:
    step = order.step
    return StepDTO(current_step=step.id, title=step.title, description=step.description)
