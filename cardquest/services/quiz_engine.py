"""
Quiz engine: hands out unseen questions and judges the answers.

One engine is built at startup and shared by every request. All mutable state
(assignment records and pending answers) sits behind a single lock, held for
the whole of each call and never across I/O.
"""
import logging
import random
import threading
from typing import Callable, Hashable, List, Optional
from uuid import UUID, uuid4

from cardquest.models.schemas import QuestionInstance
from cardquest.services.assignment import AssignmentTracker
from cardquest.services.ledger import PendingAnswerLedger, Verdict
from cardquest.services.question_bank import QuestionBank

logger = logging.getLogger(__name__)


class QuizEngine:
    def __init__(
        self,
        bank: QuestionBank,
        rng: Optional[random.Random] = None,
        id_factory: Callable[[], UUID] = uuid4,
    ):
        self.bank = bank
        self.tracker = AssignmentTracker(bank, rng=rng)
        self.ledger = PendingAnswerLedger()
        self._new_id = id_factory
        self._lock = threading.Lock()

    def categories(self) -> List[str]:
        return self.bank.categories()

    def assign_question(self, user_id: Hashable, category: str) -> QuestionInstance:
        """Issue a question the user has not seen in this category.

        Raises ``UnknownCategory`` or ``Exhausted``; in both cases nothing is
        recorded.
        """
        instance_id = self._new_id()
        with self._lock:
            if instance_id in self.ledger:
                raise ValueError(f"Instance id {instance_id} is already registered")
            question = self.tracker.pick_unseen(user_id, category)
            self.ledger.register(instance_id, question.correct_index)
        logger.info(f"Assigned question {question.id} as instance {instance_id} to user {user_id}")
        return QuestionInstance(
            instance_id=instance_id,
            category=question.category,
            prompt=question.prompt,
            options=list(question.options),
        )

    def judge_answer(self, instance_id: Hashable, proposed_option: int) -> Verdict:
        """Judge an answer for an issued instance; each instance is judged once.

        Raises ``InstanceNotFound`` or ``AlreadyConsumed``.
        """
        with self._lock:
            verdict = self.ledger.judge(instance_id, proposed_option)
        logger.info(f"Instance {instance_id} answered {'correctly' if verdict.correct else 'incorrectly'}")
        return verdict
