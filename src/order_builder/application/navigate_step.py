"""Application service: wizard navigation.

Moving forward requires the current step to be valid; moving back is
always allowed.
"""

from __future__ import annotations

import logging
from datetime import date

from order_builder.application.draft_session import load_draft, to_step_dto
from order_builder.application.dto import StepDTO
from order_builder.application.validation import validate_step
from order_builder.domain.exceptions import IncompleteStepError
from order_builder.domain.repository.draft_order_repository import DraftOrderRepository

logger = logging.getLogger(__name__)


class NavigateStepHandler:

    def __init__(self, draft_repo: DraftOrderRepository) -> None:
        self._draft_repo = draft_repo

    def next(self, today: date | None = None) -> StepDTO:
        order = load_draft(self._draft_repo)

        errors = validate_step(order, order.current_step, today)
        if errors:
            logger.debug("Step %d blocked: %s", order.current_step, errors)
            raise IncompleteStepError(errors)

        order.next_step()
        self._draft_repo.save(order)
        return to_step_dto(order)

    def back(self) -> StepDTO:
        order = load_draft(self._draft_repo)
        order.prev_step()
        self._draft_repo.save(order)
        return to_step_dto(order)

    def go_to(self, step: int) -> StepDTO:
        order = load_draft(self._draft_repo)
        order.go_to_step(step)
        self._draft_repo.save(order)
        return to_step_dto(order)
