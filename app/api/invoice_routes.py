from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_identity
from app.crud import invoice as invoice_crud
from app.crud.store import EntityStore, get_store
from app.schemas.invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate, InvoiceView

router = APIRouter(dependencies=[Depends(get_current_identity)])


@router.post("/", response_model=InvoiceRead, status_code=201)
async def create_invoice(invoice: InvoiceCreate, store: EntityStore = Depends(get_store)):
    """Create a pending invoice for an order"""
    return await invoice_crud.create_invoice(store, invoice)


@router.get("/{invoice_id}", response_model=InvoiceView)
async def get_invoice(invoice_id: str, store: EntityStore = Depends(get_store)):
    """Invoice with the amount due computed from the order's items"""
    return await invoice_crud.get_invoice_view(store, invoice_id)


@router.patch("/{invoice_id}", response_model=InvoiceRead)
async def update_invoice(
    invoice_id: str,
    updates: InvoiceUpdate,
    store: EntityStore = Depends(get_store),
):
    return await invoice_crud.update_invoice(store, invoice_id, updates)
