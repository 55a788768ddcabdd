from typing import List
from uuid import UUID

from pydantic import BaseModel, Field


class QuestionInstance(BaseModel):
    """One issuance of a question to a user. Carries no answer key."""
    instance_id: UUID
    category: str
    prompt: str
    options: List[str]


class AnswerResult(BaseModel):
    correct: bool
    correct_option: int = Field(ge=0, le=255)


class CategoryList(BaseModel):
    categories: List[str]


class UserData(BaseModel):
    uuid: UUID
    username: str
    card_hash: str
