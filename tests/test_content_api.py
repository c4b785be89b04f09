import pytest

BLOG = {
    "title": "Cloud costs",
    "slug": "cloud-costs",
    "summary": "Cutting the bill",
    "content": "Long form content",
    "category": "Insights",
}


@pytest.fixture()
def blogs(client, admin_headers):
    client.post("/api/admin/blogs", json={**BLOG, "published": True}, headers=admin_headers)
    client.post("/api/admin/blogs", json={**BLOG, "slug": "draft-post", "title": "Draft"}, headers=admin_headers)


def test_public_blog_listing_hides_unpublished(client, blogs, member_headers, admin_headers):
    public = client.get("/api/blogs").json()
    assert [b["slug"] for b in public] == ["cloud-costs"]
    assert [b["slug"] for b in client.get("/api/blogs", headers=member_headers).json()] == ["cloud-costs"]

    everything = client.get("/api/blogs", headers=admin_headers).json()
    assert {b["slug"] for b in everything} == {"cloud-costs", "draft-post"}


def test_unpublished_blog_detail_is_not_found_for_public(client, blogs, admin_headers):
    assert client.get("/api/blogs/draft-post").status_code == 404
    assert client.get("/api/blogs/draft-post", headers=admin_headers).status_code == 200
    assert client.get("/api/blogs/cloud-costs").json()["title"] == "Cloud costs"


def test_blog_slug_unique(client, blogs, admin_headers):
    resp = client.post("/api/admin/blogs", json=BLOG, headers=admin_headers)
    assert resp.status_code == 400


def test_blog_partial_update_and_delete(client, blogs, admin_headers):
    draft = next(b for b in client.get("/api/blogs", headers=admin_headers).json() if b["slug"] == "draft-post")
    resp = client.put(f"/api/admin/blogs/{draft['id']}", json={"published": True}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["published"] is True
    assert resp.json()["title"] == "Draft"

    assert client.delete(f"/api/admin/blogs/{draft['id']}", headers=admin_headers).status_code == 204
    assert client.put(f"/api/admin/blogs/{draft['id']}", json={"published": False}, headers=admin_headers).status_code == 404


def test_partner_crud_with_form_rules(client, admin_headers):
    bad = client.post("/api/admin/partners", json={"name": "A", "logo": "logo.png"}, headers=admin_headers)
    assert bad.status_code == 400
    assert bad.json()["message"] == "Invalid partner data"
    assert {e["field"] for e in bad.json()["errors"]} == {"name", "logo"}

    created = client.post(
        "/api/admin/partners",
        json={"name": "Acme", "logo": "https://cdn.acme.test/logo.svg", "website": ""},
        headers=admin_headers,
    )
    assert created.status_code == 201
    partner = created.json()
    assert partner["website"] is None

    updated = client.put(
        f"/api/admin/partners/{partner['id']}",
        json={"name": "Acme Corp", "logo": partner["logo"], "website": "https://acme.test"},
        headers=admin_headers,
    )
    assert updated.json()["website"] == "https://acme.test"
    assert [p["name"] for p in client.get("/api/partners").json()] == ["Acme Corp"]


def test_contact_message_flow(client, admin_headers):
    resp = client.post("/api/messages", json={
        "name": "Carol", "email": "carol@example.com", "message": "Need an app", "read": True,
    })
    assert resp.status_code == 201
    assert resp.json() == {"message": "Message sent successfully"}

    messages = client.get("/api/admin/messages", headers=admin_headers).json()
    assert len(messages) == 1
    assert messages[0]["read"] is False

    read = client.put(f"/api/admin/messages/{messages[0]['id']}/read", headers=admin_headers)
    assert read.json()["read"] is True


def test_contact_message_requires_valid_email(client):
    resp = client.post("/api/messages", json={"name": "Carol", "email": "carol", "message": "Hi"})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "email"


def _service(slug, order, active=True):
    return {"title": slug.title(), "description": "d", "icon": "code", "slug": slug, "order": order, "active": active}


def test_services_ordered_and_inactive_hidden(client, admin_headers):
    for payload in (_service("cloud", 2), _service("web", 1), _service("legacy", 0, active=False)):
        assert client.post("/api/admin/services", json=payload, headers=admin_headers).status_code == 201

    assert [s["slug"] for s in client.get("/api/services").json()] == ["web", "cloud"]
    assert [s["slug"] for s in client.get("/api/admin/services", headers=admin_headers).json()] == ["legacy", "web", "cloud"]
    assert client.get("/api/services/legacy").status_code == 404

    legacy = client.get("/api/services/legacy", headers=admin_headers).json()
    toggled = client.patch(f"/api/admin/services/{legacy['id']}/active", json={"active": True}, headers=admin_headers)
    assert toggled.json()["active"] is True
    assert client.get("/api/services/legacy").status_code == 200


CAREER = {
    "title": "Backend Engineer",
    "department": "Engineering",
    "location": "Remote",
    "type": "full-time",
    "description": "Build APIs",
    "requirements": "Python",
}

APPLICATION = {
    "name": "Dana",
    "email": "alice@example.com",
    "phone": "555-0100",
    "resume": "https://files.test/dana.pdf",
}


def test_careers_and_applications(client, admin_headers, member_headers):
    open_role = client.post("/api/admin/careers", json=CAREER, headers=admin_headers).json()
    hidden = client.post("/api/admin/careers", json={**CAREER, "title": "Secret", "published": False}, headers=admin_headers).json()
    assert open_role["published"] is True

    assert [c["title"] for c in client.get("/api/careers").json()] == ["Backend Engineer"]
    assert client.get(f"/api/careers/{hidden['id']}").status_code == 404
    assert client.post(f"/api/careers/{hidden['id']}/apply", json=APPLICATION).status_code == 404

    applied = client.post(f"/api/careers/{open_role['id']}/apply", json={**APPLICATION, "status": "hired"})
    assert applied.status_code == 201

    apps = client.get("/api/admin/applications", params={"careerId": open_role["id"]}, headers=admin_headers).json()
    assert len(apps) == 1
    assert apps[0]["status"] == "pending"

    mine = client.get("/api/user/applications", headers=member_headers).json()
    assert [a["id"] for a in mine] == [apps[0]["id"]]

    bad = client.put(f"/api/admin/applications/{apps[0]['id']}/status", json={"status": "ghosted"}, headers=admin_headers)
    assert bad.status_code == 400
    ok = client.put(f"/api/admin/applications/{apps[0]['id']}/status", json={"status": "interviewing"}, headers=admin_headers)
    assert ok.json()["status"] == "interviewing"

    # a career with applications cannot be deleted out from under them
    assert client.delete(f"/api/admin/careers/{open_role['id']}", headers=admin_headers).status_code == 400
    assert client.delete(f"/api/admin/careers/{hidden['id']}", headers=admin_headers).status_code == 204


def test_blog_and_service_updates_reject_null(client, blogs, admin_headers):
    post = client.get("/api/blogs").json()[0]
    resp = client.put(f"/api/admin/blogs/{post['id']}", json={"title": None, "cover_image": None}, headers=admin_headers)
    assert resp.status_code == 400
    assert [e["field"] for e in resp.json()["errors"]] == ["title"]

    service = client.post("/api/admin/services", json=_service("web", 1), headers=admin_headers).json()
    resp = client.put(f"/api/admin/services/{service['id']}", json={"order": None}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid service data"
