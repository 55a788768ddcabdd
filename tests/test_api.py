import uuid

from cardquest.models.orm import StoredUser

from .conftest import CARD_HASH

V1 = "/v1"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200 and r.json()["status"] == "ok"


def test_categories(client):
    r = client.get(f"{V1}/quizzes/categories")
    assert r.status_code == 200
    assert r.json() == {"categories": ["geography", "science"]}


def test_user_lookup(client, user):
    r = client.get(f"{V1}/users/{user['id']}")
    assert r.status_code == 200
    assert r.json() == {"uuid": user["id"], "username": "alice", "card_hash": CARD_HASH}

    r = client.get(f"{V1}/users/sha/{CARD_HASH}")
    assert r.status_code == 200 and r.json()["uuid"] == user["id"]


def test_user_lookup_by_hash_is_exact(client):
    upper = "AB" * 32
    db = client.app.state.session_factory()
    try:
        db.add(StoredUser(id=uuid.uuid4(), card_hash=upper, username="bob"))
        db.commit()
    finally:
        db.close()

    r = client.get(f"{V1}/users/sha/{upper}")
    assert r.status_code == 200 and r.json()["username"] == "bob"

    r = client.get(f"{V1}/users/sha/{upper.lower()}")
    assert r.status_code == 404 and r.json()["error"]["type"] == "user_not_found"


def test_user_lookup_errors(client):
    r = client.get(f"{V1}/users/{uuid.uuid4()}")
    assert r.status_code == 404 and r.json()["error"]["type"] == "user_not_found"

    r = client.get(f"{V1}/users/sha/{'cd' * 32}")
    assert r.status_code == 404 and r.json()["error"]["type"] == "user_not_found"

    r = client.get(f"{V1}/users/sha/not-a-hash")
    assert r.status_code == 400 and r.json()["error"]["type"] == "invalid_hash"


def test_question_and_answer_flow(client, user):
    seen = []
    for _ in range(2):
        r = client.get(f"{V1}/quizzes/{user['id']}/geography")
        assert r.status_code == 200
        body = r.json()
        assert set(body) == {"instance_id", "category", "prompt", "options"}
        seen.append(body)
    assert {b["prompt"] for b in seen} == {"Capital of France?", "Largest ocean?"}

    r = client.get(f"{V1}/quizzes/{user['id']}/geography")
    assert r.status_code == 404 and r.json()["error"]["type"] == "exhausted"

    q1 = next(b for b in seen if b["prompt"] == "Capital of France?")
    r = client.post(f"{V1}/quizzes/answers/{q1['instance_id']}/0")
    assert r.status_code == 200
    assert r.json() == {"correct": True, "correct_option": 0}

    r = client.post(f"{V1}/quizzes/answers/{q1['instance_id']}/0")
    assert r.status_code == 409 and r.json()["error"]["type"] == "already_consumed"

    q2 = next(b for b in seen if b["prompt"] == "Largest ocean?")
    r = client.post(f"{V1}/quizzes/answers/{q2['instance_id']}/1")
    assert r.json() == {"correct": False, "correct_option": 2}


def test_unknown_category(client, user):
    r = client.get(f"{V1}/quizzes/{user['id']}/music")
    assert r.status_code == 404
    assert r.json()["error"] == {
        "message": "No questions exist in category `music`",
        "type": "unknown_category",
        "status_code": 404,
    }


def test_unregistered_user_cannot_get_questions(client):
    r = client.get(f"{V1}/quizzes/{uuid.uuid4()}/geography")
    assert r.status_code == 404 and r.json()["error"]["type"] == "user_not_found"
    assert len(client.app.state.quiz_engine.ledger) == 0


def test_answer_unknown_instance(client):
    r = client.post(f"{V1}/quizzes/answers/{uuid.uuid4()}/0")
    assert r.status_code == 404 and r.json()["error"]["type"] == "not_found"


def test_invalid_path_values(client, user):
    r = client.post(f"{V1}/quizzes/answers/not-a-uuid/0")
    assert r.status_code == 422 and r.json()["error"]["type"] == "validation_error"

    r = client.get(f"{V1}/quizzes/{user['id']}/geography")
    instance_id = r.json()["instance_id"]
    r = client.post(f"{V1}/quizzes/answers/{instance_id}/256")
    assert r.status_code == 422
    # a rejected request does not consume the instance
    r = client.post(f"{V1}/quizzes/answers/{instance_id}/0")
    assert r.status_code == 200
