import logging
from datetime import datetime, timedelta

from app.core.config import settings
from app.core.exceptions import NotFound, ValidationFailed
from app.crud.store import EntityStore
from app.schemas.invoice import InvoiceCreate, InvoiceUpdate, InvoiceView, PaymentStatus
from app.services.invoice_aggregator import InvoiceAggregator
from app.services.invoice_view import project_invoice_view

log = logging.getLogger(__name__)


async def create_invoice(store: EntityStore, invoice: InvoiceCreate):
    """Create a pending invoice for an existing order, due in one day"""
    try:
        await store.find_one("orders", invoice.order_id)
    except NotFound:
        raise ValidationFailed("order not found")

    payment_status = invoice.payment_status or PaymentStatus.pending

    created = await store.insert("invoices", {
        "order_id": invoice.order_id,
        "payment_method": invoice.payment_method.value if invoice.payment_method else None,
        "payment_status": payment_status.value,
        "payment_due_date": datetime.utcnow() + timedelta(days=settings.invoice_due_days),
    })
    log.info("created invoice=%s for order=%s", created["invoice_id"], invoice.order_id)
    return created


async def update_invoice(store: EntityStore, invoice_id: str, updates: InvoiceUpdate):
    update_data = updates.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    if not update_data:
        raise ValidationFailed("no fields to update")
    return await store.update_fields("invoices", invoice_id, update_data)


async def get_invoice_view(store: EntityStore, invoice_id: str) -> InvoiceView:
    """Stored invoice merged with the totals computed from its order items"""
    invoice = await store.find_one("invoices", invoice_id)
    totals = await InvoiceAggregator(store).compute_invoice_totals(invoice["order_id"])
    return project_invoice_view(invoice, totals)
