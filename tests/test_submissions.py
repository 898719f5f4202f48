"""Submission routes — submit, list own, list pending for others and mark."""

from bson import ObjectId

from assignment_api.app.core import db as db_module


def seed(mongo, **fields):
    doc = {"assignmentId": "a1", "userEmail": "bob@example.com", "status": "pending"}
    doc.update(fields)
    return mongo[db_module.SUBMISSIONS].insert_one(doc).inserted_id


async def test_create_submission_is_pending(client, mongo):
    res = await client.post("/submitted-assignments", json={
        "assignmentId": "a1",
        "googleDocLink": "https://docs.google.com/document/d/1",
        "notes": "done",
        "status": "completed",
    })
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert "message" not in body

    stored = mongo[db_module.SUBMISSIONS].find_one({"_id": ObjectId(body["insertedId"])})
    assert stored["status"] == "pending"
    assert stored["userEmail"] == "alice@example.com"
    assert stored["googleDocLink"] == "https://docs.google.com/document/d/1"
    assert stored["submittedAt"] is not None


async def test_create_submission_requires_assignment_id(client):
    res = await client.post("/submitted-assignments", json={"notes": "no id"})
    assert res.status_code == 400


async def test_list_submissions_requires_email(client):
    res = await client.get("/submitted-assignments")
    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Email is required"}


async def test_list_submissions_for_email(client, mongo):
    seed(mongo, userEmail="alice@example.com")
    seed(mongo, userEmail="bob@example.com")

    res = await client.get("/submitted-assignments", params={"email": "alice@example.com"})
    assert res.status_code == 200
    assert [s["userEmail"] for s in res.json()] == ["alice@example.com"]


async def test_pending_excludes_callers_own_submissions(client, mongo):
    seed(mongo, userEmail="alice@example.com")
    theirs = seed(mongo, userEmail="bob@example.com")
    seed(mongo, userEmail="carol@example.com", status="completed")

    res = await client.get("/pending-submitted-assignments", params={"email": "alice@example.com"})
    assert res.status_code == 200
    assert [s["_id"] for s in res.json()] == [str(theirs)]


async def test_pending_requires_email(client):
    res = await client.get("/pending-submitted-assignments")
    assert res.status_code == 400


async def test_mark_submission_completes_it(client, mongo):
    oid = seed(mongo)
    res = await client.patch(
        f"/submitted-assignments/{oid}",
        json={"obtainedMarks": 18, "feedback": "Nice work"},
    )
    assert res.status_code == 200
    assert res.json() == {"success": True, "modifiedCount": 1}

    stored = mongo[db_module.SUBMISSIONS].find_one({"_id": oid})
    assert stored["status"] == "completed"
    assert stored["obtainedMarks"] == 18
    assert stored["feedback"] == "Nice work"
    assert stored["markedAt"] is not None


async def test_mark_unknown_submission_reports_zero_modified(client):
    res = await client.patch(
        f"/submitted-assignments/{ObjectId()}", json={"obtainedMarks": 5},
    )
    assert res.json() == {"success": True, "modifiedCount": 0}


async def test_mark_rejects_negative_marks(client, mongo):
    oid = seed(mongo)
    res = await client.patch(f"/submitted-assignments/{oid}", json={"obtainedMarks": -1})
    assert res.status_code == 400
