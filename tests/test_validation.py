from decimal import Decimal

import pytest

from softflow.models.career import APPLICATION_STATUS_DISPLAY, ApplicationStatus
from softflow.models.invoice import INVOICE_STATUS_DISPLAY, InvoiceStatus
from softflow.models.project import PROJECT_STATUS_DISPLAY, ProjectStatus
from softflow.schemas.blog import BlogPostCreate
from softflow.schemas.invoice import InvoiceCreate, InvoiceStatusUpdate, PaymentForm
from softflow.schemas.message import MessageCreate
from softflow.schemas.partner import PartnerForm
from softflow.schemas.project import ProjectCreate
from softflow.schemas.validation import FieldValidationError, parse_insert


def test_partner_form_accepts_empty_website_as_absent():
    partner = parse_insert(PartnerForm, {"name": "Acme", "logo": "https://acme.test/logo.png", "website": ""})
    assert partner.website is None


def test_partner_form_reports_each_bad_field():
    with pytest.raises(FieldValidationError) as exc_info:
        parse_insert(PartnerForm, {"name": "A", "logo": "not-a-url", "website": "also bad"}, "partner")
    err = exc_info.value
    assert sorted(err.fields) == ["logo", "name", "website"]
    assert str(err) == "Invalid partner data"
    logo_error = next(e for e in err.errors if e["field"] == "logo")
    assert logo_error["message"] == "Please enter a valid URL"


def test_partner_form_keeps_valid_website():
    partner = parse_insert(PartnerForm, {"name": "Acme", "logo": "https://acme.test/l.png", "website": "https://acme.test"})
    assert partner.website == "https://acme.test"


def test_defaults_are_injected():
    blog = parse_insert(BlogPostCreate, {
        "title": "Hello", "slug": "hello", "summary": "s", "content": "c", "category": "News",
    })
    assert blog.published is False
    assert blog.cover_image is None

    project = parse_insert(ProjectCreate, {"user_id": 1, "title": "P", "description": "D"})
    assert project.completion_percentage == 0
    assert project.status is ProjectStatus.PLANNING


def test_message_insert_shape_ignores_read_flag():
    message = parse_insert(MessageCreate, {
        "name": "Bob", "email": "bob@example.com", "message": "Hi", "read": True, "company": "",
    })
    assert "read" not in message.model_dump()
    assert message.company is None


@pytest.mark.parametrize("pct", [-1, 101])
def test_completion_percentage_range(pct):
    with pytest.raises(FieldValidationError) as exc_info:
        parse_insert(ProjectCreate, {"user_id": 1, "title": "P", "description": "D", "completion_percentage": pct})
    assert exc_info.value.fields == ["completion_percentage"]


def test_unknown_status_rejected_at_boundary():
    with pytest.raises(FieldValidationError) as exc_info:
        parse_insert(InvoiceStatusUpdate, {"status": "refunded"})
    assert exc_info.value.fields == ["status"]


def test_invoice_due_date_not_before_issue_date():
    with pytest.raises(FieldValidationError):
        parse_insert(InvoiceCreate, {"amount": "10", "issue_date": "2024-02-01", "due_date": "2024-01-01"})


def test_invoice_currency_normalized():
    invoice = parse_insert(InvoiceCreate, {"amount": 10, "currency": "eur", "issue_date": "2024-01-01", "due_date": "2024-01-31"})
    assert invoice.currency == "EUR"
    assert invoice.status is InvoiceStatus.PENDING
    assert invoice.invoice_number is None


def test_payment_form_defaults_and_positive_amount():
    payment = parse_insert(PaymentForm, {"amount": "250.00", "transaction_id": "", "invoice_id": 99})
    assert payment.amount == Decimal("250.00")
    assert payment.payment_method == "credit card"
    assert payment.transaction_id is None
    assert "invoice_id" not in payment.model_dump()

    with pytest.raises(FieldValidationError):
        parse_insert(PaymentForm, {"amount": "0"})


@pytest.mark.parametrize(
    "enum_cls, display",
    [
        (InvoiceStatus, INVOICE_STATUS_DISPLAY),
        (ProjectStatus, PROJECT_STATUS_DISPLAY),
        (ApplicationStatus, APPLICATION_STATUS_DISPLAY),
    ],
)
def test_status_display_mapping_is_exhaustive(enum_cls, display):
    assert set(display) == set(enum_cls)
    for member in enum_cls:
        assert member.label
        assert member.style


def test_status_labels():
    assert InvoiceStatus.PAID.label == "Paid"
    assert ProjectStatus.IN_PROGRESS.label == "In Progress"
    assert ApplicationStatus("hired").style == "success"
