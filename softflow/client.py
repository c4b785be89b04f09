"""Python client for the Softflow API.

Carries the flows the website front-end performs on top of the REST
endpoints: the per-project invoice fan-out, client-local filtering, the
record-payment sequence and a response cache whose invalidation is declared
up front in `INVALIDATIONS`.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union
from urllib.parse import quote

import requests

from .schemas.invoice import PaymentForm
from .schemas.partner import PartnerForm
from .schemas.validation import parse_insert
from .utils.invoice_filters import ALL, filter_invoices

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, Hashable]

# mutation -> resources whose cached entries become stale
INVALIDATIONS: Dict[str, Tuple[str, ...]] = {
    "create_partner": ("partners",),
    "update_partner": ("partners",),
    "record_payment": ("invoice_payments", "invoices", "project_invoices"),
    "update_invoice_status": ("invoice", "invoices", "project_invoices"),
    "login": ("*",),
    "logout": ("*",),
}


class ApiError(Exception):
    def __init__(self, status_code: int, message: str, errors: Optional[list] = None):
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"{status_code}: {message}")


class ResponseCache:
    """Responses keyed by (resource, scope)."""

    def __init__(self):
        self._entries: Dict[CacheKey, Any] = {}

    def get(self, resource: str, scope: Hashable = None):
        return self._entries.get((resource, scope))

    def has(self, resource: str, scope: Hashable = None) -> bool:
        return (resource, scope) in self._entries

    def set(self, resource: str, scope: Hashable, value) -> None:
        self._entries[(resource, scope)] = value

    def invalidate(self, resource: str, scope: Hashable = None) -> None:
        """Drop one scope of a resource, or all of its scopes when scope is None."""
        if resource == "*":
            self._entries.clear()
            return
        for key in list(self._entries):
            if key[0] == resource and (scope is None or key[1] == scope):
                del self._entries[key]

    def invalidate_for(self, mutation: str) -> None:
        for resource in INVALIDATIONS[mutation]:
            self.invalidate(resource)

    def keys(self):
        return list(self._entries)


class SoftflowClient:
    def __init__(self, base_url: str = "http://localhost:8000", session=None, max_workers: int = 8):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.cache = ResponseCache()
        self.max_workers = max_workers
        self.token: Optional[str] = None

    # -- transport -------------------------------------------------------

    def _request(self, method: str, path: str, json=None):
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        response = self.session.request(method, f"{self.base_url}{path}", json=json, headers=headers)
        if response.status_code >= 400:
            message, errors = "An unknown error occurred", []
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                detail = body.get("message") or body.get("detail")
                if isinstance(detail, str):
                    message = detail
                errors = body.get("errors") or []
            raise ApiError(response.status_code, message, errors)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _cached_get(self, resource: str, scope: Hashable, path: str):
        if self.cache.has(resource, scope):
            return self.cache.get(resource, scope)
        data = self._request("GET", path)
        self.cache.set(resource, scope, data)
        return data

    # -- session ---------------------------------------------------------

    def login(self, username: str, password: str) -> dict:
        data = self._request("POST", "/api/login", json={"username": username, "password": password})
        self.token = data["access_token"]
        self.cache.invalidate_for("login")
        return data["user"]

    def logout(self) -> None:
        try:
            self._request("POST", "/api/logout")
        finally:
            self.token = None
            self.cache.invalidate_for("logout")

    def navigate(self, path: str) -> dict:
        # never cached: the decision must follow the current session
        return self._request("GET", f"/api/navigation?path={quote(path, safe='/')}")

    # -- reads -----------------------------------------------------------

    def partners(self) -> List[dict]:
        return self._cached_get("partners", None, "/api/partners")

    def services(self) -> List[dict]:
        return self._cached_get("services", None, "/api/services")

    def blogs(self) -> List[dict]:
        return self._cached_get("blogs", None, "/api/blogs")

    def blog(self, slug: str) -> dict:
        return self._cached_get("blog", slug, f"/api/blogs/{slug}")

    def projects(self) -> List[dict]:
        return self._cached_get("projects", None, "/api/projects")

    def project_invoices(self, project_id: int) -> List[dict]:
        return self._cached_get("project_invoices", project_id, f"/api/projects/{project_id}/invoices")

    def invoice(self, invoice_id: int) -> dict:
        return self._cached_get("invoice", invoice_id, f"/api/invoices/{invoice_id}")

    def invoice_payments(self, invoice_id: int) -> List[dict]:
        return self._cached_get("invoice_payments", invoice_id, f"/api/invoices/{invoice_id}/payments")

    def list_invoices(
        self,
        project: Union[int, str] = ALL,
        search: str = "",
        status: str = ALL,
    ) -> List[dict]:
        """Invoices visible to the caller, optionally narrowed by project, status and number."""
        if str(project) == ALL:
            invoices = self._all_invoices()
        elif str(project).isdigit():
            invoices = list(self.project_invoices(int(project)))
        else:
            # not a project id: nothing to fetch, nothing matches
            invoices = []
        return filter_invoices(invoices, search=search, status=status, project=project)

    def _all_invoices(self) -> List[dict]:
        if self.cache.has("invoices", ALL):
            return self.cache.get("invoices", ALL)
        project_ids = [p["id"] for p in self.projects()]
        if not project_ids:
            return []
        # one fetch per project; map() yields in submission order once all are done
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(project_ids))) as pool:
            per_project = list(pool.map(self.project_invoices, project_ids))
        invoices = [invoice for batch in per_project for invoice in batch]
        self.cache.set("invoices", ALL, invoices)
        return invoices

    # -- mutations -------------------------------------------------------

    def create_partner(self, form: dict) -> dict:
        payload = parse_insert(PartnerForm, form, "partner")
        partner = self._request("POST", "/api/admin/partners", json=payload.model_dump(mode="json"))
        self.cache.invalidate_for("create_partner")
        return partner

    def update_partner(self, partner_id: int, form: dict) -> dict:
        payload = parse_insert(PartnerForm, form, "partner")
        partner = self._request("PUT", f"/api/admin/partners/{partner_id}", json=payload.model_dump(mode="json"))
        self.cache.invalidate_for("update_partner")
        return partner

    def update_invoice_status(self, invoice_id: int, status: str) -> dict:
        invoice = self._request("PUT", f"/api/admin/invoices/{invoice_id}/status", json={"status": status})
        self.cache.invalidate_for("update_invoice_status")
        return invoice

    def record_payment(self, invoice_id: int, form: dict) -> dict:
        """
        Record a payment, then mark the invoice paid.

        The status flip happens whatever the amount was: there is no partial
        payment accounting. It is best-effort: a failure there is logged and
        the already-recorded payment stays in place.
        """
        payload = parse_insert(PaymentForm, form, "payment")
        # raises ApiError on failure, so the status update below never runs
        payment = self._request(
            "POST",
            f"/api/admin/invoices/{invoice_id}/payments",
            json=payload.model_dump(mode="json"),
        )
        self.cache.invalidate_for("record_payment")

        try:
            self.update_invoice_status(invoice_id, "paid")
        except (ApiError, requests.RequestException):
            logger.error("Failed to update invoice status for invoice %s", invoice_id, exc_info=True)
        return payment
