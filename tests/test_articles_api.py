from __future__ import annotations

from datetime import date, timedelta


def _body(action: str, **overrides):
    data = {
        "action": action,
        "title": "Monsoon arrives early",
        "content": "Heavy rain expected across the coast.",
        "region": "Kerala",
        "language": "English",
        "date": "2024-06-01",
    }
    data.update(overrides)
    return data


def test_get_published_flags_three_newest(client, repo):
    for i in range(5):
        repo.add(title=f"P{i}")
    repo.add(title="Hidden", status="draft")

    resp = client.get("/articles?action=get")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    titles = [a["title"] for a in data["articles"]]
    assert titles == ["P4", "P3", "P2", "P1", "P0"]
    assert [a["featured"] for a in data["articles"]] == [True, True, True, False, False]
    assert "status" not in data["articles"][0]


def test_get_without_action_lists_published(client, repo):
    repo.add(title="Only", status="published")
    repo.add(title="Pending", status="pending")
    resp = client.get("/articles")
    assert resp.status_code == 200
    assert [a["title"] for a in resp.json()["articles"]] == ["Only"]


def test_get_all_includes_every_status(client, repo):
    repo.add(title="A", status="draft")
    repo.add(title="B", status="archived")
    resp = client.get("/articles", params={"action": "get_all"})
    assert resp.status_code == 200
    arts = resp.json()["articles"]
    assert {a["status"] for a in arts} == {"draft", "archived"}
    assert {"updated_at", "created_at"}.issubset(arts[0].keys())
    assert "featured" not in arts[0]


def test_filters_are_sorted_and_distinct(client, repo):
    repo.add(region="Telangana", language="Hindi")
    repo.add(region="National", language="English")
    repo.add(region="National", language="Telugu")
    resp = client.get("/articles?action=filters")
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "regions": ["National", "Telangana"],
        "languages": ["English", "Hindi", "Telugu"],
    }


def test_filters_on_empty_table(client):
    resp = client.get("/articles?action=filters")
    assert resp.json() == {"success": True, "regions": [], "languages": []}


def test_create_then_visible_in_get_all(client, repo):
    repo.add(title="Existing")
    resp = client.post("/articles", json=_body("create"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True and data["message"] == "Article created successfully"
    new_id = data["id"]
    assert new_id != 1

    arts = client.get("/articles?action=get_all").json()["articles"]
    created = next(a for a in arts if a["id"] == new_id)
    assert created["title"] == "Monsoon arrives early"
    assert created["region"] == "Kerala"
    assert created["date"] == "2024-06-01"
    assert created["status"] == "published"


def test_create_missing_field_writes_nothing(client, repo):
    resp = client.post("/articles", json=_body("create", region="   "))
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "All fields are required"}
    assert repo.rows == {}


def test_create_rejects_future_date_and_long_title(client, repo):
    future = (date.today() + timedelta(days=2)).isoformat()
    resp = client.post("/articles", json=_body("create", date=future))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Date cannot be in the future"

    resp = client.post("/articles", json=_body("create", title="x" * 256))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Title cannot exceed 255 characters"
    assert repo.rows == {}


def test_wrong_action_or_missing_body(client):
    resp = client.post("/articles", json=_body("update"))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request data"

    resp = client.post("/articles")
    assert resp.status_code == 400
    assert resp.json()["success"] is False

    resp = client.post("/articles", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid request data"}


def test_update_existing_and_missing(client, repo):
    row = repo.add(title="Old")
    before = row.updated_at

    resp = client.put("/articles", json=_body("update", id=row.id, title="New"))
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Article updated successfully"}
    assert repo.rows[row.id].title == "New"
    assert repo.rows[row.id].updated_at >= before

    resp = client.put("/articles", json=_body("update", id=999))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Article not found or no changes made"


def test_update_requires_id(client, repo):
    resp = client.put("/articles", json=_body("update"))
    assert resp.status_code == 400
    assert resp.json()["message"] == "All fields are required"


def test_delete_twice(client, repo):
    row = repo.add()
    resp = client.request("DELETE", "/articles", json={"action": "delete", "id": row.id})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Article deleted successfully"

    resp = client.request("DELETE", "/articles", json={"action": "delete", "id": row.id})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Article not found"}


def test_delete_requires_id(client):
    resp = client.request("DELETE", "/articles", json={"action": "delete", "id": 0})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Article ID is required"


def test_stats(client, repo):
    repo.add(status="published", region="National")
    repo.add(status="draft", region="Kerala", language="Malayalam")
    resp = client.get("/articles?action=stats")
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 2
    assert data["by_status"] == {"draft": 1, "published": 1, "pending": 0, "archived": 0}
    assert data["regions"] == 2 and data["languages"] == 2


def test_storage_failure_is_generic_500(client, monkeypatch):
    from sqlalchemy.exc import OperationalError

    async def broken(repo):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr("app.api.articles.svc.list_published", broken)
    resp = client.get("/articles?action=get")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Failed to fetch articles"}


def test_admin_key_enforced_when_configured(client, repo, monkeypatch):
    monkeypatch.setattr("app.config.ADMIN_API_KEY", "s3cret")

    resp = client.post("/articles", json=_body("create"))
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Unauthorized"}
    assert client.get("/articles?action=get_all").status_code == 401

    resp = client.post("/articles", json=_body("create"), headers={"X-Admin-Key": "s3cret"})
    assert resp.status_code == 200

    # Public reads stay open
    assert client.get("/articles?action=get").status_code == 200


def test_cors_preflight_allows_any_origin(client):
    resp = client.options(
        "/articles",
        headers={
            "Origin": "http://example.org",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
