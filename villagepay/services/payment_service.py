"""Payment submission and review use cases."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from villagepay.core.log import get_logger
from villagepay.domain.constants import month_name
from villagepay.domain.models import APPROVED, PENDING, REJECTED, REVIEW_STATUSES, Payment
from villagepay.repositories import DocumentStore, build_store

logger = get_logger(__name__)


def new_payment_id() -> str:
    """Millisecond timestamp; collisions are possible but very unlikely."""
    return str(int(time.time() * 1000))


@dataclass
class PaymentSummary:
    total_approved: float
    pending_count: int
    approved_count: int
    rejected_count: int

    def as_dict(self) -> dict:
        return {
            "totalApproved": self.total_approved,
            "pendingCount": self.pending_count,
            "approvedCount": self.approved_count,
            "rejectedCount": self.rejected_count,
        }


@dataclass
class PaymentService:
    store: DocumentStore = field(default_factory=build_store)

    def list_payments(
        self,
        house_no: Optional[str] = None,
        *,
        status: Optional[str] = None,
        newest_first: bool = False,
    ) -> list[Payment]:
        payments = [Payment.model_validate(p) for p in self.store.fetch_all()["payments"] if isinstance(p, dict)]
        if house_no is not None:
            payments = [p for p in payments if p.house_no == house_no]
        if status:
            payments = [p for p in payments if p.status == status]
        if newest_first:
            # ISO dates sort lexically; stable sort keeps submission order within a day
            payments.sort(key=lambda p: p.date, reverse=True)
        return payments

    def submit_payment(self, data: dict) -> Payment:
        """Append a submission; whatever status the caller sent, it starts PENDING."""
        values = dict(data)
        values["status"] = PENDING
        if not values.get("id"):
            values["id"] = new_payment_id()
        if not values.get("date"):
            values["date"] = date.today().isoformat()
        if not values.get("month"):
            values["month"] = month_name(date.today().month)
        payment = Payment.model_validate(values)

        doc = self.store.fetch_all()
        doc["payments"].append(payment.to_document())
        self.store.replace_all(doc)
        logger.info("payment_submitted", payment_id=payment.id, house_no=payment.house_no, month=payment.month)
        return payment

    def set_status(self, payment_id: str, status: str) -> Optional[Payment]:
        """Overwrite the status in place. Unknown ids are ignored."""
        if status not in REVIEW_STATUSES:
            raise ValueError(f"status must be {APPROVED} or {REJECTED}")
        doc = self.store.fetch_all()
        payments = doc["payments"]
        for record in payments:
            if not isinstance(record, dict) or str(record.get("id")) != payment_id:
                continue
            previous = record.get("status")
            if previous != PENDING:
                logger.warning("payment_status_overwritten", payment_id=payment_id, previous=previous, status=status)
            record["status"] = status
            payment = Payment.model_validate(record)
            self.store.replace_all(doc)
            logger.info("payment_status_changed", payment_id=payment_id, status=status)
            return payment
        logger.info("payment_status_unknown_id", payment_id=payment_id)
        return None

    def summarize(self) -> PaymentSummary:
        payments = self.list_payments()
        approved = [p for p in payments if p.status == APPROVED]
        return PaymentSummary(
            total_approved=sum(p.amount for p in approved),
            pending_count=sum(1 for p in payments if p.status == PENDING),
            approved_count=len(approved),
            rejected_count=sum(1 for p in payments if p.status == REJECTED),
        )
