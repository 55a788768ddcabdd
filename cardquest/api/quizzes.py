from uuid import UUID

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from cardquest.api.deps import get_app_settings, get_quiz_engine
from cardquest.api.users import find_user
from cardquest.core.config import Settings
from cardquest.core.database import get_db
from cardquest.models.schemas import AnswerResult, CategoryList, QuestionInstance
from cardquest.services.quiz_engine import QuizEngine

router = APIRouter()


@router.get("/categories", response_model=CategoryList)
def list_categories(engine: QuizEngine = Depends(get_quiz_engine)):
    return CategoryList(categories=engine.categories())


@router.get("/{user_id}/{category}", response_model=QuestionInstance)
def get_question(
    user_id: UUID,
    category: str,
    engine: QuizEngine = Depends(get_quiz_engine),
    settings: Settings = Depends(get_app_settings),
    db: Session = Depends(get_db),
):
    # Database lookup stays outside the engine lock
    if settings.REQUIRE_REGISTERED_USER:
        find_user(db, user_id)
    return engine.assign_question(user_id, category)


@router.post("/answers/{instance_id}/{option}", response_model=AnswerResult)
def answer_question(
    instance_id: UUID,
    option: int = Path(ge=0, le=255),
    engine: QuizEngine = Depends(get_quiz_engine),
):
    verdict = engine.judge_answer(instance_id, option)
    return AnswerResult(correct=verdict.correct, correct_option=verdict.correct_option)
