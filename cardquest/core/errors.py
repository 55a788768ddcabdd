"""
Error taxonomy shared by the quiz core and the HTTP layer.

Every error a caller can recover from is a ``QuizError`` with a stable
``code`` and the HTTP status it maps to, so the boundary layer can render it
without inspecting the message.
"""
from typing import Any, Dict


class QuizError(Exception):
    """Base class for structured, caller-recoverable errors."""

    code = "quiz_error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "type": self.code,
            "status_code": self.status_code,
        }


class UnknownCategory(QuizError):
    code = "unknown_category"
    status_code = 404

    def __init__(self, category: str):
        super().__init__(f"No questions exist in category `{category}`")
        self.category = category


class Exhausted(QuizError):
    code = "exhausted"
    status_code = 404

    def __init__(self, user_id: Any, category: str):
        super().__init__(f"User `{user_id}` has answered every question in category `{category}`")
        self.user_id = user_id
        self.category = category


class InstanceNotFound(QuizError):
    code = "not_found"
    status_code = 404

    def __init__(self, instance_id: Any):
        super().__init__(f"Question instance `{instance_id}` was never issued")
        self.instance_id = instance_id


class AlreadyConsumed(QuizError):
    code = "already_consumed"
    status_code = 409

    def __init__(self, instance_id: Any):
        super().__init__(f"Question instance `{instance_id}` has already been answered")
        self.instance_id = instance_id


class QuestionNotFound(QuizError):
    code = "question_not_found"
    status_code = 404

    def __init__(self, question_id: str):
        super().__init__(f"Question `{question_id}` is not in the question bank")
        self.question_id = question_id


class UserNotFound(QuizError):
    code = "user_not_found"
    status_code = 404


class InvalidCardHash(QuizError):
    code = "invalid_hash"
    status_code = 400

    def __init__(self, card_hash: str):
        super().__init__("Invalid SHA256 hash string provided")
        self.card_hash = card_hash


class QuestionBankError(ValueError):
    """Question bank data could not be loaded; raised at startup only."""
