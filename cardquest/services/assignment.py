import logging
import random
from typing import Dict, FrozenSet, Hashable, Optional, Set, Tuple

from cardquest.core.errors import Exhausted
from cardquest.services.question_bank import Question, QuestionBank

logger = logging.getLogger(__name__)


class AssignmentTracker:
    """Remembers which questions each user has been issued, per category.

    Not thread-safe on its own: ``pick_unseen`` selects and records in one
    step, and callers sharing a tracker must serialize calls to it.
    """

    def __init__(self, bank: QuestionBank, rng: Optional[random.Random] = None):
        self.bank = bank
        self.rng = rng or random.Random()
        self._issued: Dict[Tuple[Hashable, str], Set[str]] = {}

    def pick_unseen(self, user_id: Hashable, category: str) -> Question:
        pool = self.bank.questions_by_category(category)
        seen = self._issued.get((user_id, category), set())
        unseen = [q for q in pool if q.id not in seen]
        if not unseen:
            raise Exhausted(user_id, category)
        picked = self.rng.choice(unseen)
        self._issued.setdefault((user_id, category), set()).add(picked.id)
        logger.debug(f"Issued question {picked.id} to {user_id} ({len(unseen) - 1} left in {category})")
        return picked

    def issued(self, user_id: Hashable, category: str) -> FrozenSet[str]:
        return frozenset(self._issued.get((user_id, category), ()))

    def remaining(self, user_id: Hashable, category: str) -> int:
        pool = self.bank.questions_by_category(category)
        return len(pool) - len(self._issued.get((user_id, category), ()))
