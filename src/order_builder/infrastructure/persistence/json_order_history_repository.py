"""JSON-file-backed implementation of OrderHistoryRepository.

The newest record is kept first.  A history file that is not valid JSON
reads as empty instead of breaking every command.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from pathlib import Path

from order_builder.domain.model.order_record import OrderRecord, OrderRecordLine
from order_builder.domain.repository.order_history_repository import (
    OrderHistoryRepository,
)

logger = logging.getLogger(__name__)


class JsonOrderHistoryRepository(OrderHistoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderHistoryRepository interface -------------------------------------

    def list_all(self) -> list[OrderRecord]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def get_by_id(self, record_id: str) -> OrderRecord | None:
        for raw in self._load_raw():
            if raw["id"] == record_id:
                return self._to_domain(raw)
        return None

    def save(self, record: OrderRecord) -> None:
        records = [raw for raw in self._load_raw() if raw["id"] != record.id]
        records.insert(0, self._to_raw(record))
        self._persist_raw(records)

    def delete(self, record_id: str) -> bool:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != record_id]
        if len(remaining) == len(records):
            return False
        self._persist_raw(remaining)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: OrderRecord) -> dict:
        return {
            "id": record.id,
            "created_at": record.created_at.isoformat(),
            "customer_name": record.customer_name,
            "product_name": record.product_name,
            "plan_name": record.plan_name,
            "plan_price": record.plan_price,
            "duration_months": record.duration_months,
            "start_date": record.start_date.isoformat() if record.start_date else None,
            "end_date": record.end_date.isoformat() if record.end_date else None,
            "breakdown": dict(record.breakdown),
            "add_ons": [
                {
                    "add_on_id": line.add_on_id,
                    "name": line.name,
                    "quantity": line.quantity,
                    "unit_price": line.unit_price,
                    "line_total": line.line_total,
                }
                for line in record.add_ons
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> OrderRecord:
        return OrderRecord(
            id=raw["id"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            customer_name=raw["customer_name"],
            product_name=raw["product_name"],
            plan_name=raw["plan_name"],
            plan_price=raw["plan_price"],
            duration_months=raw["duration_months"],
            start_date=date.fromisoformat(raw["start_date"]) if raw.get("start_date") else None,
            end_date=date.fromisoformat(raw["end_date"]) if raw.get("end_date") else None,
            breakdown=raw["breakdown"],
            add_ons=[OrderRecordLine(**line) for line in raw.get("add_ons", [])],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Order history %s is not valid JSON; treating as empty", self._file_path)
            return []
        if not isinstance(raw, list):
            return []
        return [entry for entry in raw if isinstance(entry, dict)]

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
