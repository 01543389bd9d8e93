"""HTTP tests for the v1 API: auth, roles, error envelopes and the main flows."""
import pytest

from nexacms.application.cms.add_section import add_section
from nexacms.application.cms.publish_page import publish_page
from nexacms.application.navigation.add_item import add_item

from conftest import ADMIN


def test_health_is_public(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "service": "nexacms", "section_templates": 12}


def test_me_reports_role_capabilities(client, editor_headers):
    body = client.get("/api/v1/me", headers=editor_headers).get_json()

    assert body["identity"] == "user-editor"
    assert body["role"] == "EDITOR"
    assert "section.write" in body["capabilities"]
    assert "page.publish" not in body["capabilities"]


def test_admin_endpoints_need_a_token(client):
    assert client.get("/api/v1/pages").status_code == 401
    assert client.post("/api/v1/pages", json={"title": "x", "slug": "/x"}).status_code == 401


def test_viewer_reads_but_cannot_write(client, viewer_headers):
    assert client.get("/api/v1/pages", headers=viewer_headers).status_code == 200

    response = client.post("/api/v1/pages", json={"title": "x", "slug": "/x"}, headers=viewer_headers)

    assert response.status_code == 403
    assert response.get_json()["error"] == "Forbidden"


def test_page_crud_flow(client, admin_headers, editor_headers):
    created = client.post("/api/v1/pages", json={"title": "About", "slug": "/about"},
                          headers=editor_headers)
    assert created.status_code == 201
    page = created.get_json()
    assert page["status"] == "DRAFT"
    assert page["sections"] == []

    listed = client.get("/api/v1/pages?status=DRAFT", headers=editor_headers).get_json()
    assert [p["id"] for p in listed["items"]] == [page["id"]]
    assert listed["pagination"]["total"] == 1

    updated = client.put(f"/api/v1/pages/{page['id']}", json={"seo_title": "About us"},
                         headers=editor_headers)
    assert updated.status_code == 200
    assert updated.get_json()["seo"]["title"] == "About us"

    assert client.post(f"/api/v1/pages/{page['id']}/publish", headers=editor_headers).status_code == 403
    published = client.post(f"/api/v1/pages/{page['id']}/publish", headers=admin_headers)
    assert published.get_json()["status"] == "PUBLISHED"

    deleted = client.delete(f"/api/v1/pages/{page['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get(f"/api/v1/pages/{page['id']}", headers=admin_headers).status_code == 404


def test_errors_use_the_json_envelope(client, admin_headers):
    client.post("/api/v1/pages", json={"title": "About", "slug": "/about"}, headers=admin_headers)

    duplicate = client.post("/api/v1/pages", json={"title": "Again", "slug": "/about"},
                            headers=admin_headers)
    missing = client.get("/api/v1/pages/nope", headers=admin_headers)
    invalid = client.post("/api/v1/pages", json={"slug": "/no-title"}, headers=admin_headers)
    no_route = client.get("/api/v1/no-such-thing", headers=admin_headers)

    assert (duplicate.status_code, duplicate.get_json()["error"]) == (409, "Conflict")
    assert (missing.status_code, missing.get_json()["error"]) == (404, "NotFound")
    assert (invalid.status_code, invalid.get_json()["error"]) == (400, "BadInput")
    assert (no_route.status_code, no_route.get_json()["error"]) == (404, "NotFound")


def test_stale_page_update_conflicts(client, admin_headers, make_page):
    page = make_page()

    stale = client.put(
        f"/api/v1/pages/{page.id}",
        json={"title": "Late"},
        headers={**admin_headers, "If-Unmodified-Since": "Mon, 01 Jan 2001 00:00:00 GMT"},
    )
    fresh = client.put(
        f"/api/v1/pages/{page.id}",
        json={"title": "On time"},
        headers={**admin_headers, "If-Unmodified-Since": "Fri, 01 Jan 2100 00:00:00 GMT"},
    )
    garbage = client.put(
        f"/api/v1/pages/{page.id}",
        json={"title": "Huh"},
        headers={**admin_headers, "If-Unmodified-Since": "not a date"},
    )

    assert stale.status_code == 409
    assert fresh.status_code == 200
    assert garbage.status_code == 400


def test_schedule_endpoint_parses_timestamps(client, admin_headers, make_page):
    page = make_page()

    bad = client.post(f"/api/v1/pages/{page.id}/schedule", json={"publish_at": "soon"},
                      headers=admin_headers)
    good = client.post(f"/api/v1/pages/{page.id}/schedule",
                       json={"publish_at": "2099-06-01T09:00:00+00:00"}, headers=admin_headers)

    assert bad.status_code == 400
    assert good.status_code == 200
    assert good.get_json()["status"] == "SCHEDULED"


def test_section_endpoints(client, editor_headers, make_page):
    page = make_page()
    base = f"/api/v1/pages/{page.id}/sections"

    hero = client.post(base, json={"section_template_id": "hero-centered"}, headers=editor_headers)
    text = client.post(base, json={"section_template_id": "text-block",
                                   "props": {"content": "<p>Hi</p>"}}, headers=editor_headers)
    assert hero.status_code == 201
    assert hero.get_json()["component_name"] == "HeroCentered"
    assert text.get_json()["order"] == 2

    unknown = client.post(base, json={"section_template_id": "nonexistent-template"},
                          headers=editor_headers)
    assert unknown.status_code == 400
    assert len(client.get(base, headers=editor_headers).get_json()) == 2

    hero_id, text_id = hero.get_json()["id"], text.get_json()["id"]

    reordered = client.put(f"{base}/order", json={"section_ids": [text_id, hero_id]},
                           headers=editor_headers)
    assert [s["id"] for s in reordered.get_json()] == [text_id, hero_id]

    patched = client.patch(f"{base}/{text_id}", json={"props": {"content": "<p>Bye</p>"}},
                           headers=editor_headers)
    assert patched.get_json()["props"] == {"content": "<p>Bye</p>"}

    assert client.delete(f"{base}/{hero_id}", headers=editor_headers).status_code == 200
    assert [s["id"] for s in client.get(base, headers=editor_headers).get_json()] == [text_id]


def test_preview_modes(client, editor_headers, make_page):
    page = make_page()
    add_section(role=ADMIN, page_id=page.id, template_id="text-block",
                props={"content": "<p>Preview me</p>"})

    preview = client.get(f"/api/v1/pages/{page.id}/preview", headers=editor_headers).get_json()
    editor = client.get(f"/api/v1/pages/{page.id}/preview?mode=editor", headers=editor_headers).get_json()
    bad = client.get(f"/api/v1/pages/{page.id}/preview?mode=print", headers=editor_headers)

    assert "<p>Preview me</p>" in preview["html"]
    assert preview["theme"]["primary_color"] == "#3b82f6"
    assert editor["sections"][0]["schema"]["component_name"] == "TextBlock"
    assert bad.status_code == 400


def test_template_catalog_endpoints(client, viewer_headers):
    catalog = client.get("/api/v1/section-templates", headers=viewer_headers).get_json()
    heroes = client.get("/api/v1/section-templates?category=Hero", headers=viewer_headers).get_json()
    found = client.get("/api/v1/section-templates?q=gallery", headers=viewer_headers).get_json()
    detail = client.get("/api/v1/section-templates/hero-cta", headers=viewer_headers).get_json()
    missing = client.get("/api/v1/section-templates/nope", headers=viewer_headers)

    assert catalog["total"] == 12
    assert heroes["total"] == 10
    assert {t["id"] for t in found["items"]} == {"hero-product", "hero-gallery"}
    assert detail["default_props"]["urgencyText"]
    assert [g["id"] for g in detail["editor"]["groups"]] == ["content", "buttons", "benefits", "layout"]
    assert missing.status_code == 404


def test_navigation_endpoints(client, admin_headers, editor_headers):
    menu = client.post("/api/v1/navigation/menus", json={"name": "Main", "location": "HEADER_PRIMARY"},
                       headers=admin_headers).get_json()
    items = f"/api/v1/navigation/menus/{menu['id']}/items"

    a = client.post(items, json={"title": "A", "url": "/a"}, headers=admin_headers).get_json()
    b = client.post(items, json={"title": "B", "url": "/b", "parent_id": a["id"]},
                    headers=admin_headers).get_json()

    assert client.post(items, json={"title": "C", "url": "/c"}, headers=editor_headers).status_code == 403

    cycle = client.post(f"{items}/{a['id']}/move", json={"parent_id": b["id"]}, headers=admin_headers)
    assert cycle.status_code == 400
    assert cycle.get_json()["error"] == "CircularReference"

    tree = client.get(f"/api/v1/navigation/menus/{menu['id']}", headers=editor_headers).get_json()
    assert [(n["title"], [c["title"] for c in n["children"]]) for n in tree["items"]] == [("A", ["B"])]

    deleted = client.delete(f"{items}/{a['id']}", headers=admin_headers).get_json()
    assert deleted["deleted_children_count"] == 1

    listed = client.get("/api/v1/navigation/menus", headers=editor_headers).get_json()
    assert listed[0]["item_count"] == 0


def test_site_config_endpoints(client, admin_headers, editor_headers):
    assert client.put("/api/v1/site-config", json={"site_name": "X"},
                      headers=editor_headers).status_code == 403

    updated = client.put("/api/v1/site-config", json={"site_name": "Acme", "primary_color": "#000000"},
                         headers=admin_headers)
    assert updated.status_code == 200
    assert updated.get_json()["colors"]["primary"] == "#000000"

    assert client.get("/api/v1/public/site-config").get_json()["site_name"] == "Acme"


def test_public_page_and_search(client, make_page):
    page = make_page(title="Pricing", slug="/pricing")
    add_section(role=ADMIN, page_id=page.id, template_id="text-block",
                props={"content": "<p>Plans for everyone</p>"})
    make_page(title="Pricing draft", slug="/pricing-draft")

    assert client.get("/api/v1/public/pages/pricing").status_code == 404

    publish_page(role=ADMIN, page_id=page.id)

    body = client.get("/api/v1/public/pages/pricing?render=1").get_json()
    assert body["title"] == "Pricing"
    assert "status" not in body
    assert "<p>Plans for everyone</p>" in body["html"]

    results = client.get("/api/v1/public/search?q=pricing").get_json()["results"]
    assert [r["slug"] for r in results] == ["/pricing"]


def test_public_navigation(client, make_page, menu):
    add_item(role=ADMIN, menu_id=menu.id, data={"title": "Home", "url": "/"})
    add_item(role=ADMIN, menu_id=menu.id, data={"title": "Hidden", "url": "/h", "is_visible": False})

    header = client.get("/api/v1/public/navigation/header_primary").get_json()
    footer = client.get("/api/v1/public/navigation/FOOTER_PRIMARY").get_json()

    assert [n["title"] for n in header["items"]] == ["Home"]
    assert footer == {"menu": None, "items": []}
    assert client.get("/api/v1/public/navigation/attic").status_code == 400


@pytest.mark.parametrize("path", ["/openapi/cms.yaml", "/swagger/"])
def test_api_docs_are_served(client, path):
    assert client.get(path).status_code == 200
