"""
Invoice Aggregator

Wraps the order-item join pipeline into the totals an invoice needs.
"""
from app.crud.store import EntityStore
from app.schemas.invoice import InvoiceTotals
from app.services.order_pipeline import OrderItemPipeline


class InvoiceAggregator:
    """Computes payment totals for an order"""

    def __init__(self, store: EntityStore):
        self.pipeline = OrderItemPipeline(store)

    async def compute_invoice_totals(self, order_id: str) -> InvoiceTotals:
        """
        Returns the single aggregate for `order_id`.

        Raises:
            NotFound: the order has no items
        """
        group = await self.pipeline.order_summary(order_id)

        return InvoiceTotals(
            order_id=order_id,
            payment_due=group["payment_due"],
            item_count=group["total_count"],
            table_number=group["table_number"],
            items=group["order_items"],
        )
