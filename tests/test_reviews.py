"""Review routes — public posting and newest-first paging."""

from datetime import datetime, timedelta

from assignment_api.app.core import db as db_module


async def test_create_review_returns_201(anon_client, mongo):
    res = await anon_client.post("/reviews", json={
        "name": "Dana", "email": "dana@example.com", "text": "Great platform",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Review added successfully"

    stored = mongo[db_module.REVIEWS].find_one({"email": "dana@example.com"})
    assert stored["text"] == "Great platform"
    assert stored["image"] is None
    assert stored["createdAt"] is not None


async def test_create_review_with_missing_fields_returns_400(anon_client, mongo):
    res = await anon_client.post("/reviews", json={"name": "Dana", "text": ""})
    assert res.status_code == 400
    assert res.json()["success"] is False
    assert mongo[db_module.REVIEWS].count_documents({}) == 0


async def test_list_reviews_newest_first_with_paging(anon_client, mongo):
    start = datetime(2025, 1, 1)
    mongo[db_module.REVIEWS].insert_many([
        {"name": f"r{i}", "email": "x@example.com", "text": "t", "createdAt": start + timedelta(days=i)}
        for i in range(5)
    ])

    res = await anon_client.get("/reviews", params={"limit": 2})
    assert [r["name"] for r in res.json()] == ["r4", "r3"]

    res = await anon_client.get("/reviews", params={"limit": 2, "page": 3})
    assert [r["name"] for r in res.json()] == ["r0"]


async def test_list_reviews_default_limit_is_twelve(anon_client, mongo):
    mongo[db_module.REVIEWS].insert_many([
        {"name": str(i), "email": "x@example.com", "text": "t", "createdAt": datetime(2025, 1, 1)}
        for i in range(15)
    ])
    res = await anon_client.get("/reviews")
    assert len(res.json()) == 12
