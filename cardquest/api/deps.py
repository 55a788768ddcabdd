from fastapi import Request

from cardquest.core.config import Settings
from cardquest.services.quiz_engine import QuizEngine


def get_quiz_engine(request: Request) -> QuizEngine:
    return request.app.state.quiz_engine


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
