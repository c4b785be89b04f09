import pytest

from softflow.auth.gate import HOME_PATH, LOGIN_PATH, REDIRECT, RENDER, SessionContext, check_route

ANON = SessionContext.anonymous()
MEMBER = SessionContext(authenticated=True, is_admin=False, username="alice")
ADMIN = SessionContext(authenticated=True, is_admin=True, username="admin")


@pytest.mark.parametrize("path", ["/admin", "/admin/blog", "/admin/invoices/12", "/admin/users/"])
def test_admin_routes(path):
    assert check_route(path, ANON).location == LOGIN_PATH
    decision = check_route(path, MEMBER)
    assert (decision.action, decision.location) == (REDIRECT, HOME_PATH)
    assert check_route(path, ADMIN).action == RENDER


@pytest.mark.parametrize("path", ["/dashboard", "/invoices", "/invoices/3?tab=payments"])
def test_authenticated_routes(path):
    assert check_route(path, ANON).location == LOGIN_PATH
    assert check_route(path, MEMBER).allowed
    assert check_route(path, ADMIN).allowed


@pytest.mark.parametrize("path", ["/", "/about", "/blog/some-post", "/careers", "/auth"])
def test_public_routes_render_for_everyone(path):
    for ctx in (ANON, MEMBER, ADMIN):
        assert check_route(path, ctx).allowed


def test_session_context_from_user():
    class FakeUser:
        username = "bob"
        is_admin = False

    assert SessionContext.from_user(None) == ANON
    ctx = SessionContext.from_user(FakeUser())
    assert ctx.authenticated and not ctx.is_admin and ctx.username == "bob"


def test_navigation_endpoint_follows_current_token(client, member_headers, admin_headers):
    anonymous = client.get("/api/navigation", params={"path": "/admin/blog"}).json()
    assert anonymous["action"] == "redirect" and anonymous["location"] == "/auth"

    member = client.get("/api/navigation", params={"path": "/admin/blog"}, headers=member_headers).json()
    assert member["location"] == "/"
    assert member["username"] == "alice"

    admin = client.get("/api/navigation", params={"path": "/admin/blog"}, headers=admin_headers).json()
    assert admin["action"] == "render"


def test_expired_or_garbage_token_is_anonymous(client):
    resp = client.get("/api/navigation", params={"path": "/dashboard"}, headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 200
    assert resp.json()["authenticated"] is False
    assert resp.json()["location"] == "/auth"


def test_blocked_user_loses_access_immediately(client, db, member, member_headers):
    assert client.get("/api/navigation", params={"path": "/dashboard"}, headers=member_headers).json()["action"] == "render"

    member.is_blocked = True
    db.commit()

    decision = client.get("/api/navigation", params={"path": "/dashboard"}, headers=member_headers).json()
    assert decision["location"] == "/auth"
