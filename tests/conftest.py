import random
import uuid

import pytest
from fastapi.testclient import TestClient

from cardquest.core.config import Settings
from cardquest.main import create_app
from cardquest.models.orm import StoredUser
from cardquest.services.question_bank import QuestionBank
from cardquest.services.quiz_engine import QuizEngine

GEOGRAPHY = [
    {"id": "q1", "category": "geography", "prompt": "Capital of France?",
     "options": ["Paris", "Lyon", "Nice"], "correct_index": 0},
    {"id": "q2", "category": "geography", "prompt": "Largest ocean?",
     "options": ["Atlantic", "Indian", "Pacific"], "correct_index": 2},
]
SCIENCE = [
    {"id": "s1", "category": "science", "prompt": "H2O is?",
     "options": ["Water", "Salt"], "correct_index": 0},
]

CARD_HASH = "ab" * 32


@pytest.fixture
def bank():
    return QuestionBank.from_records(GEOGRAPHY + SCIENCE)


@pytest.fixture
def engine(bank):
    return QuizEngine(bank, rng=random.Random(7))


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", ENVIRONMENT="testing", QUIZ_RANDOM_SEED=7)


@pytest.fixture
def client(settings, bank):
    app = create_app(settings=settings, bank=bank)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user(client):
    db = client.app.state.session_factory()
    try:
        stored = StoredUser(id=uuid.uuid4(), card_hash=CARD_HASH, username="alice")
        db.add(stored)
        db.commit()
        return {"id": str(stored.id), "username": stored.username, "card_hash": stored.card_hash}
    finally:
        db.close()
