"""
Referential integrity and orphaned data scans.

Every scan only reports findings for admin review; nothing here deletes or
updates records. A scan that fails to read the store logs the error and
returns an empty result so one broken table does not sink the whole report.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from dymnds.core.utils import as_utc, iso_utc, utcnow
from dymnds.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_DAYS = 90
SOFT_DELETE_COLLECTIONS = ("products", "orders")


@dataclass
class OrphanedNotesResult:
    count: int = 0
    emails: list[str] = field(default_factory=list)
    orphaned_doc_ids: list[str] = field(default_factory=list)


@dataclass
class StaleWaitlistResult:
    count: int = 0
    emails: list[str] = field(default_factory=list)
    stale_doc_ids: list[str] = field(default_factory=list)


@dataclass
class AffectedOrder:
    order_id: str
    affected_item_indices: list[int]
    customer_email: str


@dataclass
class OrdersWithoutProductRefResult:
    count: int = 0
    order_ids: list[str] = field(default_factory=list)
    affected_orders: list[AffectedOrder] = field(default_factory=list)


@dataclass
class SoftDeletedRecord:
    id: str
    deleted_at: str
    deleted_days_ago: int


@dataclass
class SoftDeletedRecordsResult:
    count: int = 0
    ids: list[str] = field(default_factory=list)
    records: list[SoftDeletedRecord] = field(default_factory=list)


@dataclass
class CleanupReport:
    orphaned_notes: OrphanedNotesResult
    stale_waitlist: StaleWaitlistResult
    orders_without_product_ref: OrdersWithoutProductRefResult
    soft_deleted_products: SoftDeletedRecordsResult
    soft_deleted_orders: SoftDeletedRecordsResult

    def total_issues(self) -> int:
        return (
            self.orphaned_notes.count
            + self.stale_waitlist.count
            + self.orders_without_product_ref.count
            + self.soft_deleted_products.count
            + self.soft_deleted_orders.count
        )

    def to_dict(self) -> dict:
        return asdict(self)


def days_old(value: datetime, now: Optional[datetime] = None) -> int:
    """Whole days elapsed between ``value`` and ``now``."""
    delta = as_utc(now or utcnow()) - as_utc(value)
    return int(delta.total_seconds() // 86400)


class CleanupService:
    """Runs the read-only integrity scans against the SQL store."""

    def __init__(self, repository: SQLRepository | None = None) -> None:
        self.repository = repository or SQLRepository()

    def find_orphaned_customer_notes(self) -> OrphanedNotesResult:
        """Customer notes whose e-mail has no order attached to it."""
        logger.info("Starting orphaned notes scan")
        try:
            notes = self.repository.list_customer_notes()
            if not notes:
                logger.info("No customer notes found")
                return OrphanedNotesResult()
            emails_with_orders = {
                order.customer_email.lower()
                for order in self.repository.list_orders()
                if order.customer_email
            }
        except SQLAlchemyError:
            logger.error("Error scanning for orphaned notes", exc_info=True)
            return OrphanedNotesResult()

        result = OrphanedNotesResult()
        for note in notes:
            if note.email.lower() not in emails_with_orders:
                result.emails.append(note.email)
                result.orphaned_doc_ids.append(note.email)
        result.count = len(result.emails)
        logger.info(
            "Orphaned notes scan complete: %d orphaned of %d notes", result.count, len(notes)
        )
        return result

    def find_stale_waitlist_entries(
        self, days: int = DEFAULT_RETENTION_DAYS, *, now: Optional[datetime] = None
    ) -> StaleWaitlistResult:
        """Waitlist signups older than ``days`` whole days."""
        logger.info("Starting stale waitlist scan (older than %d days)", days)
        try:
            entries = self.repository.list_waitlist_entries()
        except SQLAlchemyError:
            logger.error("Error scanning for stale waitlist entries", exc_info=True)
            return StaleWaitlistResult()
        if not entries:
            logger.info("No waitlist entries found")
            return StaleWaitlistResult()

        result = StaleWaitlistResult()
        for entry in entries:
            if not entry.signed_up_at:
                continue
            if days_old(entry.signed_up_at, now) > days and entry.email:
                result.emails.append(entry.email)
                result.stale_doc_ids.append(str(entry.id))
        result.count = len(result.emails)
        logger.info(
            "Stale waitlist scan complete: %d stale of %d entries", result.count, len(entries)
        )
        return result

    def find_orders_without_product_ref(self) -> OrdersWithoutProductRefResult:
        """Orders holding line items that lost their product_id."""
        logger.info("Starting orders without product ref scan")
        try:
            orders = self.repository.list_orders()
        except SQLAlchemyError:
            logger.error("Error scanning for orders without product ref", exc_info=True)
            return OrdersWithoutProductRefResult()
        if not orders:
            logger.info("No orders found")
            return OrdersWithoutProductRefResult()

        result = OrdersWithoutProductRefResult()
        for order in orders:
            items = order.items
            if not isinstance(items, list):
                continue
            indices = [
                index
                for index, item in enumerate(items)
                if isinstance(item, dict) and "product_id" not in item
            ]
            if indices:
                result.order_ids.append(order.id)
                result.affected_orders.append(
                    AffectedOrder(
                        order_id=order.id,
                        affected_item_indices=indices,
                        customer_email=order.customer_email or "unknown",
                    )
                )
        result.count = len(result.order_ids)
        logger.info(
            "Orders without product ref scan complete: %d affected of %d orders",
            result.count,
            len(orders),
        )
        return result

    def find_soft_deleted_records(
        self,
        collection: str,
        retention_days: int = DEFAULT_RETENTION_DAYS,
        *,
        now: Optional[datetime] = None,
    ) -> SoftDeletedRecordsResult:
        """Soft-deleted products or orders past the retention window."""
        if collection not in SOFT_DELETE_COLLECTIONS:
            raise ValueError(f"Unsupported collection for soft-delete scan: {collection!r}")
        logger.info("Starting soft-deleted %s scan (retention %d days)", collection, retention_days)
        try:
            if collection == "products":
                records = self.repository.list_products()
            else:
                records = self.repository.list_orders()
        except SQLAlchemyError:
            logger.error("Error scanning soft-deleted %s", collection, exc_info=True)
            return SoftDeletedRecordsResult()
        if not records:
            logger.info("No %s found", collection)
            return SoftDeletedRecordsResult()

        result = SoftDeletedRecordsResult()
        for record in records:
            if not record.is_deleted or not record.deleted_at:
                continue
            age = days_old(record.deleted_at, now)
            if age > retention_days:
                result.ids.append(record.id)
                result.records.append(
                    SoftDeletedRecord(
                        id=record.id,
                        deleted_at=iso_utc(record.deleted_at),
                        deleted_days_ago=age,
                    )
                )
        result.count = len(result.ids)
        logger.info(
            "Soft-deleted %s scan complete: %d ready for hard delete of %d records",
            collection,
            result.count,
            len(records),
        )
        return result

    def build_report(
        self, retention_days: int = DEFAULT_RETENTION_DAYS, *, now: Optional[datetime] = None
    ) -> CleanupReport:
        report = CleanupReport(
            orphaned_notes=self.find_orphaned_customer_notes(),
            stale_waitlist=self.find_stale_waitlist_entries(retention_days, now=now),
            orders_without_product_ref=self.find_orders_without_product_ref(),
            soft_deleted_products=self.find_soft_deleted_records("products", retention_days, now=now),
            soft_deleted_orders=self.find_soft_deleted_records("orders", retention_days, now=now),
        )
        logger.info("Cleanup report built with %d issues", report.total_issues())
        return report
