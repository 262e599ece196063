from app.schemas.invoice import InvoiceTotals, InvoiceView

UNSET_PAYMENT_METHOD = "N/A"


def project_invoice_view(invoice: dict, totals: InvoiceTotals) -> InvoiceView:
    """Merge a stored invoice with its computed totals"""
    return InvoiceView(
        invoice_id=invoice["invoice_id"],
        payment_method=invoice.get("payment_method") or UNSET_PAYMENT_METHOD,
        order_id=invoice["order_id"],
        payment_status=invoice["payment_status"],
        payment_due_date=invoice["payment_due_date"],
        payment_due=totals.payment_due,
        table_number=totals.table_number,
        order_details=totals.items,
    )
