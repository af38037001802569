"""
Invoices API endpoints for recorded sales.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from pos_backend.api.v1.dependencies import get_invoice_repository
from pos_backend.error_handlers import StoreError
from pos_backend.logging_config import get_logger
from pos_backend.repositories import InvoiceRepository
from pos_backend.schemas.invoice import (
    InvoiceCreate,
    InvoiceResponse,
    NextInvoiceIdResponse,
    QuickInvoiceCreate,
    QuickInvoiceResponse
)

logger = get_logger("api.invoices")

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_data: InvoiceCreate,
    repo: InvoiceRepository = Depends(get_invoice_repository)
):
    """
    Save an invoice.

    The invoice id should come from ``GET /invoices/last-id``. A 409 means
    another invoice took that id first; fetch a new one and retry.
    """
    invoice = await repo.create(invoice_data)
    logger.info(f"Invoice saved: {invoice.id} ({len(invoice.items)} items)")
    return invoice


@router.get("", response_model=list[InvoiceResponse])
async def list_invoices(
    search: Optional[str] = Query(None, description="Invoice id, customer name or phone"),
    repo: InvoiceRepository = Depends(get_invoice_repository)
):
    """List invoices newest first, optionally filtered by a search term."""
    return await repo.search(search)


@router.get("/last-id", response_model=NextInvoiceIdResponse)
async def get_next_invoice_id(
    repo: InvoiceRepository = Depends(get_invoice_repository)
):
    """Suggest the next invoice id. The id is not reserved."""
    try:
        next_id = await repo.next_id()
    except SQLAlchemyError as exc:
        raise StoreError("Error fetching last invoice ID", original_error=str(exc)) from exc

    return NextInvoiceIdResponse(next_invoice_id=next_id)


@router.post("/quick", response_model=QuickInvoiceResponse)
async def create_quick_invoice(
    payload: QuickInvoiceCreate,
    repo: InvoiceRepository = Depends(get_invoice_repository)
):
    """
    Save an invoice from a minimal ``{items, total, date, customer}`` payload.

    The invoice gets the next free id and ``customer`` is stored as the
    customer name.
    """
    missing = payload.missing_fields()
    if missing:
        logger.warning(f"Quick invoice rejected, missing fields: {missing}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Missing required fields", "missing": missing}
        )

    invoice_data = InvoiceCreate(
        id=await repo.next_id(),
        customer_name=payload.customer,
        items=payload.items,
        subtotal=payload.total,
        total=payload.total,
        date=payload.date
    )
    invoice = await repo.create(invoice_data)
    logger.info(f"Quick invoice saved: {invoice.id}")

    return QuickInvoiceResponse(
        message="Invoice saved successfully",
        invoice=InvoiceResponse.model_validate(invoice)
    )


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: str,
    repo: InvoiceRepository = Depends(get_invoice_repository)
):
    """Delete an invoice by its numeric id."""
    await repo.delete(invoice_id)
    logger.info(f"Invoice deleted: {invoice_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
