"""Client-local invoice filtering.

The three predicates are independent of each other, so applying them in any
order (or all at once through `filter_invoices`) yields the same result.
"""
from typing import Any, Callable, Iterable, List, Union

ALL = "all"

Invoice = Any  # a dict from the API or an ORM/schema object
Predicate = Callable[[Invoice], bool]


def _field(invoice: Invoice, name: str):
    if isinstance(invoice, dict):
        return invoice.get(name)
    return getattr(invoice, name, None)


def _status_value(status) -> str:
    return str(getattr(status, "value", status) or "").lower()


def matches_search(search: str) -> Predicate:
    term = (search or "").lower()
    if not term:
        return lambda invoice: True
    return lambda invoice: term in str(_field(invoice, "invoice_number") or "").lower()


def matches_status(status: str) -> Predicate:
    wanted = _status_value(status)
    if not wanted or wanted == ALL:
        return lambda invoice: True
    return lambda invoice: _status_value(_field(invoice, "status")) == wanted


def matches_project(project: Union[int, str]) -> Predicate:
    if project is None or str(project) == ALL:
        return lambda invoice: True
    try:
        project_id = int(project)
    except (TypeError, ValueError):
        # not a project id, so no invoice can belong to it
        return lambda invoice: False
    return lambda invoice: _field(invoice, "project_id") == project_id


def filter_invoices(
    invoices: Iterable[Invoice],
    search: str = "",
    status: str = ALL,
    project: Union[int, str] = ALL,
) -> List[Invoice]:
    predicates = [matches_search(search), matches_status(status), matches_project(project)]
    return [inv for inv in invoices if all(p(inv) for p in predicates)]
