from .assignment import AssignmentTracker
from .ledger import PendingAnswer, PendingAnswerLedger, Verdict
from .question_bank import Question, QuestionBank
from .quiz_engine import QuizEngine

__all__ = [
    "AssignmentTracker",
    "PendingAnswer",
    "PendingAnswerLedger",
    "Verdict",
    "Question",
    "QuestionBank",
    "QuizEngine",
]
