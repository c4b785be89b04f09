"""Route gate for the site's navigable screens.

A `SessionContext` is derived fresh from the caller's credentials on every
navigation; nothing here caches it, so logging out revokes access to admin
screens on the very next check.
"""
import re
from dataclasses import dataclass
from typing import Optional

LOGIN_PATH = "/auth"
HOME_PATH = "/"

RENDER = "render"
REDIRECT = "redirect"


@dataclass(frozen=True)
class SessionContext:
    authenticated: bool = False
    is_admin: bool = False
    username: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "SessionContext":
        return cls()

    @classmethod
    def from_user(cls, user) -> "SessionContext":
        if user is None:
            return cls.anonymous()
        return cls(authenticated=True, is_admin=bool(user.is_admin), username=user.username)


@dataclass(frozen=True)
class GuardedRoute:
    path: str
    admin_only: bool = False

    @property
    def pattern(self):
        # "/invoices/:id" -> ^/invoices/[^/]+$
        return re.compile("^" + re.sub(r":\w+", r"[^/]+", self.path) + "$")


@dataclass(frozen=True)
class GateDecision:
    action: str
    location: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.action == RENDER


GUARDED_ROUTES = (
    GuardedRoute("/dashboard"),
    GuardedRoute("/invoices"),
    GuardedRoute("/invoices/:id"),
    GuardedRoute("/admin", admin_only=True),
    GuardedRoute("/admin/blog", admin_only=True),
    GuardedRoute("/admin/messages", admin_only=True),
    GuardedRoute("/admin/partners", admin_only=True),
    GuardedRoute("/admin/careers", admin_only=True),
    GuardedRoute("/admin/services", admin_only=True),
    GuardedRoute("/admin/projects", admin_only=True),
    GuardedRoute("/admin/users", admin_only=True),
    GuardedRoute("/admin/invoices", admin_only=True),
    GuardedRoute("/admin/invoices/new", admin_only=True),
    GuardedRoute("/admin/invoices/:id", admin_only=True),
)


def _normalize(path: str) -> str:
    path = (path or "/").split("?", 1)[0].split("#", 1)[0]
    if len(path) > 1:
        path = path.rstrip("/")
    return path or "/"


def find_route(path: str, routes=GUARDED_ROUTES) -> Optional[GuardedRoute]:
    path = _normalize(path)
    for route in routes:
        if route.pattern.match(path):
            return route
    return None


def check_route(path: str, ctx: SessionContext, routes=GUARDED_ROUTES) -> GateDecision:
    route = find_route(path, routes)
    if route is None:
        return GateDecision(RENDER)
    if not ctx.authenticated:
        return GateDecision(REDIRECT, LOGIN_PATH)
    if route.admin_only and not ctx.is_admin:
        return GateDecision(REDIRECT, HOME_PATH)
    return GateDecision(RENDER)
