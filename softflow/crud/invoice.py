import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.invoice import Invoice, InvoiceItem, InvoiceStatus, Payment
from ..models.project import Project
from ..models.user import User
from . import common

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def next_invoice_number(db: Session, issue_date: Optional[date] = None) -> str:
    """INV-<year>-<sequence>, sequence counted per year."""
    year = (issue_date or date.today()).year
    prefix = f"INV-{year}-"
    seq = db.query(Invoice).filter(Invoice.invoice_number.like(f"{prefix}%")).count() + 1
    number = f"{prefix}{seq:04d}"
    while db.query(Invoice).filter(Invoice.invoice_number == number).first():
        seq += 1
        number = f"{prefix}{seq:04d}"
    return number


def get_project_invoices(db: Session, project_id: int) -> List[Invoice]:
    return db.query(Invoice)\
             .filter(Invoice.project_id == project_id)\
             .order_by(Invoice.created_at.desc(), Invoice.id.desc())\
             .all()


def get_all_invoices(db: Session) -> List[Invoice]:
    return db.query(Invoice).order_by(Invoice.created_at.desc(), Invoice.id.desc()).all()


def get_invoice_for(db: Session, invoice_id: int, user: User) -> Optional[Invoice]:
    invoice = db.get(Invoice, invoice_id)
    if invoice is None:
        return None
    if not user.is_admin and invoice.project.user_id != user.id:
        return None
    return invoice


def create_invoice(db: Session, project: Project, data: dict) -> Invoice:
    data = dict(data)
    if not data.get("invoice_number"):
        data["invoice_number"] = next_invoice_number(db, data.get("issue_date"))
    return common.create(db, Invoice, {**data, "project_id": project.id}, "create invoice")


def set_invoice_status(db: Session, invoice: Invoice, new_status: InvoiceStatus) -> Invoice:
    logger.info("Invoice %s status %s -> %s", invoice.invoice_number, invoice.status, new_status.value)
    return common.update(db, invoice, {"status": new_status.value}, "update invoice status")


def delete_invoice(db: Session, invoice: Invoice) -> None:
    common.ensure_no_children(invoice.payments, "invoice")
    for item in list(invoice.items):
        db.delete(item)
    common.delete(db, invoice, "delete invoice")


def get_payments(db: Session, invoice_id: int) -> List[Payment]:
    return db.query(Payment)\
             .filter(Payment.invoice_id == invoice_id)\
             .order_by(Payment.payment_date.desc(), Payment.id.desc())\
             .all()


def create_payment(db: Session, invoice: Invoice, data: dict) -> Payment:
    # Only the payment row; the status change is a separate request.
    return common.create(db, Payment, {**data, "invoice_id": invoice.id}, "record payment")


def get_items(db: Session, invoice_id: int) -> List[InvoiceItem]:
    return db.query(InvoiceItem)\
             .filter(InvoiceItem.invoice_id == invoice_id)\
             .order_by(InvoiceItem.id)\
             .all()


def _price_item(data: dict) -> dict:
    data = dict(data)
    subtotal = (Decimal(data["quantity"]) * Decimal(data["unit_price"])).quantize(CENTS, ROUND_HALF_UP)
    data["amount"] = subtotal
    if data.get("tax_rate") is not None and data.get("tax_amount") is None:
        data["tax_amount"] = (subtotal * Decimal(data["tax_rate"]) / 100).quantize(CENTS, ROUND_HALF_UP)
    return data


def create_item(db: Session, invoice: Invoice, data: dict) -> InvoiceItem:
    return common.create(db, InvoiceItem, {**_price_item(data), "invoice_id": invoice.id}, "create invoice item")


def update_item(db: Session, item: InvoiceItem, data: dict) -> InvoiceItem:
    return common.update(db, item, _price_item(data), "update invoice item")
