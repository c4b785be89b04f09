import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth.auth import require_admin, require_user
from ..crud import common
from ..crud.invoice import (
    create_item,
    create_payment,
    delete_invoice,
    get_all_invoices,
    get_invoice_for,
    get_items,
    get_payments,
    set_invoice_status,
    update_item,
)
from ..database.database import get_db
from ..models.invoice import Invoice, InvoiceItem, Payment
from ..models.user import User
from ..schemas.invoice import (
    InvoiceItemCreate,
    InvoiceItemOut,
    InvoiceOut,
    InvoiceStatusUpdate,
    InvoiceUpdate,
    PaymentForm,
    PaymentOut,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/invoices", tags=["invoices"])
admin_router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _visible_or_404(db: Session, invoice_id: int, user: User) -> Invoice:
    invoice = get_invoice_for(db, invoice_id, user)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


def _invoice_or_404(db: Session, invoice_id: int) -> Invoice:
    invoice = common.get_by_id(db, Invoice, invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.get("/{invoice_id}", response_model=InvoiceOut)
def get_invoice(invoice_id: int, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return _visible_or_404(db, invoice_id, user)


@router.get("/{invoice_id}/payments", response_model=List[PaymentOut])
def invoice_payments(invoice_id: int, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return get_payments(db, _visible_or_404(db, invoice_id, user).id)


@router.get("/{invoice_id}/items", response_model=List[InvoiceItemOut])
def invoice_items(invoice_id: int, db: Session = Depends(get_db), user: User = Depends(require_user)):
    return get_items(db, _visible_or_404(db, invoice_id, user).id)


@admin_router.get("/invoices", response_model=List[InvoiceOut])
def all_invoices(db: Session = Depends(get_db)):
    return get_all_invoices(db)


@admin_router.put("/invoices/{invoice_id}", response_model=InvoiceOut)
def update_invoice(invoice_id: int, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    invoice = _invoice_or_404(db, invoice_id)
    data = common.plain_values(payload.model_dump(exclude_unset=True))
    issue_date = data.get("issue_date", invoice.issue_date)
    due_date = data.get("due_date", invoice.due_date)
    if issue_date and due_date and due_date < issue_date:
        raise HTTPException(status_code=400, detail="Due date must not be before the issue date")
    return common.update(db, invoice, data, "update invoice")


@admin_router.put("/invoices/{invoice_id}/status", response_model=InvoiceOut)
def update_invoice_status(invoice_id: int, payload: InvoiceStatusUpdate, db: Session = Depends(get_db)):
    return set_invoice_status(db, _invoice_or_404(db, invoice_id), payload.status)


@admin_router.delete("/invoices/{invoice_id}", status_code=204)
def remove_invoice(invoice_id: int, db: Session = Depends(get_db)):
    delete_invoice(db, _invoice_or_404(db, invoice_id))


@admin_router.post("/invoices/{invoice_id}/payments", response_model=PaymentOut, status_code=201)
def record_payment(invoice_id: int, payload: PaymentForm, db: Session = Depends(get_db)):
    """Insert a payment row. The invoice status is left alone; clients flip it afterwards."""
    invoice = _invoice_or_404(db, invoice_id)
    payment = create_payment(db, invoice, payload.model_dump())
    logger.info("Recorded payment %s of %s on invoice %s", payment.id, payment.amount, invoice.invoice_number)
    return payment


@admin_router.delete("/payments/{payment_id}", status_code=204)
def remove_payment(payment_id: int, db: Session = Depends(get_db)):
    payment = common.get_by_id(db, Payment, payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    common.delete(db, payment, "delete payment")


@admin_router.post("/invoices/{invoice_id}/items", response_model=InvoiceItemOut, status_code=201)
def add_item(invoice_id: int, payload: InvoiceItemCreate, db: Session = Depends(get_db)):
    return create_item(db, _invoice_or_404(db, invoice_id), payload.model_dump())


@admin_router.put("/invoice-items/{item_id}", response_model=InvoiceItemOut)
def edit_item(item_id: int, payload: InvoiceItemCreate, db: Session = Depends(get_db)):
    item = common.get_by_id(db, InvoiceItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Invoice item not found")
    return update_item(db, item, payload.model_dump())


@admin_router.delete("/invoice-items/{item_id}", status_code=204)
def remove_item(item_id: int, db: Session = Depends(get_db)):
    item = common.get_by_id(db, InvoiceItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Invoice item not found")
    common.delete(db, item, "delete invoice item")
