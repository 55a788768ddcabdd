from .orm import Base, StoredUser
from .schemas import AnswerResult, CategoryList, QuestionInstance, UserData

__all__ = ["Base", "StoredUser", "AnswerResult", "CategoryList", "QuestionInstance", "UserData"]
