"""
Invoice repository over the ``invoices`` collection.
"""
import re
from datetime import datetime, timezone
from typing import Optional, Sequence
from sqlalchemy import select, or_

from pos_backend.error_handlers import ResourceNotFoundError
from pos_backend.models.invoice import Invoice
from pos_backend.repositories.base import Repository
from pos_backend.schemas.invoice import InvoiceCreate

# Whole term only: "12abc" is not invoice 12
INTEGER_TERM = re.compile(r"^[+-]?\d+$")

# Largest value the BIGINT invoice id column can hold
MAX_INVOICE_ID = 2 ** 63 - 1


def parse_invoice_id(term: str) -> Optional[int]:
    """
    Interpret a search term as an invoice number.

    Returns None when the term is not an integer, so that it takes no
    part in the id clause of a search.
    """
    term = term.strip()
    if not INTEGER_TERM.match(term):
        return None
    value = int(term)
    if abs(value) > MAX_INVOICE_ID:
        return None
    return value


def to_utc(value: datetime) -> datetime:
    """Convert to UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


class InvoiceRepository(Repository):
    """Storage for sales invoices keyed by their numeric id."""

    resource = "Invoice"
    key_field = "ID"

    async def create(self, invoice_data: InvoiceCreate) -> Invoice:
        """Store the invoice exactly as given; totals are not recomputed."""
        invoice = Invoice(
            **invoice_data.model_dump(exclude={"date", "saved_at"})
        )
        # Leave timestamps to the column defaults unless the caller set them
        if invoice_data.date is not None:
            invoice.date = to_utc(invoice_data.date)
        if invoice_data.saved_at is not None:
            invoice.saved_at = to_utc(invoice_data.saved_at)

        self.session.add(invoice)
        await self.commit(invoice.id)

        return invoice

    async def search(self, term: Optional[str] = None) -> Sequence[Invoice]:
        """
        List invoices newest first, optionally filtered by a search term.

        A term matches an invoice when it equals the invoice id, or is a
        case-insensitive substring of the customer name or phone.
        """
        query = select(Invoice)

        if term:
            pattern = f"%{escape_like(term)}%"
            clauses = [
                Invoice.customer_name.ilike(pattern, escape="\\"),
                Invoice.customer_phone.ilike(pattern, escape="\\"),
            ]
            invoice_id = parse_invoice_id(term)
            if invoice_id is not None:
                clauses.append(Invoice.id == invoice_id)
            query = query.where(or_(*clauses))

        query = query.order_by(Invoice.date.desc(), Invoice.id.desc())

        result = await self.session.execute(query)
        return result.scalars().all()

    async def delete(self, raw_id: str) -> None:
        """
        Delete the invoice whose id equals ``raw_id`` read as a number.

        Values that are not numbers, or not whole numbers, match nothing.
        """
        # The whole value must parse: "12abc" matches nothing
        try:
            value = float(raw_id)
        except ValueError:
            raise ResourceNotFoundError(self.resource, raw_id)

        if not value.is_integer() or abs(value) > MAX_INVOICE_ID:
            raise ResourceNotFoundError(self.resource, raw_id)

        result = await self.session.execute(
            select(Invoice).where(Invoice.id == int(value))
        )
        invoice = result.scalar_one_or_none()

        if not invoice:
            raise ResourceNotFoundError(self.resource, raw_id)

        await self.session.delete(invoice)
        await self.session.commit()

    async def next_id(self) -> int:
        """
        Suggest the next invoice number: highest stored id plus one.

        The number is not reserved; two callers may receive the same one,
        and the unique index on ``id`` decides which create wins.
        """
        result = await self.session.execute(
            select(Invoice.id).order_by(Invoice.id.desc()).limit(1)
        )
        last_id = result.scalar_one_or_none()
        return (last_id or 0) + 1
