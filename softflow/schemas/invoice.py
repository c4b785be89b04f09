from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator, model_validator

from ..models.invoice import InvoiceStatus
from .validation import OptionalStr, reject_null

CurrencyCode = constr(min_length=3, max_length=3, pattern=r"^[A-Za-z]{3}$")


class InvoiceCreate(BaseModel):
    # project_id comes from the path; invoice_number is generated when omitted
    invoice_number: OptionalStr = None
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    currency: CurrencyCode = "USD"
    issue_date: date
    due_date: date
    status: InvoiceStatus = InvoiceStatus.PENDING
    notes: OptionalStr = None

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v):
        return v.upper()

    @model_validator(mode="after")
    def check_dates(self):
        if self.due_date < self.issue_date:
            raise ValueError("Due date must not be before the issue date")
        return self


class InvoiceUpdate(BaseModel):
    invoice_number: OptionalStr = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    currency: Optional[CurrencyCode] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    notes: OptionalStr = None

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v):
        return v.upper() if v else v

    @field_validator("invoice_number", "amount", "currency", "issue_date", "due_date", "status")
    @classmethod
    def required_columns(cls, v):
        return reject_null(v)


class InvoiceStatusUpdate(BaseModel):
    status: InvoiceStatus


class InvoiceOut(BaseModel):
    id: int
    project_id: int
    invoice_number: str
    amount: Decimal
    currency: str
    issue_date: date
    due_date: date
    status: InvoiceStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class InvoiceItemCreate(BaseModel):
    description: constr(min_length=1, strip_whitespace=True)
    quantity: Decimal = Field(Decimal("1"), gt=0)
    unit_price: Decimal = Field(..., ge=0)
    tax_rate: Optional[Decimal] = Field(None, ge=0, le=100)
    tax_amount: Optional[Decimal] = Field(None, ge=0)

    @field_validator("tax_rate", "tax_amount", mode="before")
    @classmethod
    def blank_is_none(cls, v):
        return None if v == "" else v


class InvoiceItemOut(BaseModel):
    id: int
    invoice_id: int
    description: str
    quantity: Decimal
    unit_price: Decimal
    tax_rate: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    amount: Decimal
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentForm(BaseModel):
    """Payment insert shape: id, created_at and invoice_id are not accepted."""
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    payment_date: date = Field(default_factory=date.today)
    payment_method: constr(min_length=1, strip_whitespace=True) = "credit card"
    transaction_id: OptionalStr = None
    notes: OptionalStr = None


class PaymentOut(BaseModel):
    id: int
    invoice_id: int
    amount: Decimal
    payment_date: date
    payment_method: str
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
