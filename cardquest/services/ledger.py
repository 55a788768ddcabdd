"""
Pending answers for issued question instances.

Answers are looked up by instance id alone, so judging an answer never needs
to know which user the instance was issued to.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Hashable

from cardquest.core.errors import AlreadyConsumed, InstanceNotFound

logger = logging.getLogger(__name__)


@dataclass
class PendingAnswer:
    correct_option: int
    consumed: bool = False


@dataclass(frozen=True)
class Verdict:
    correct: bool
    correct_option: int


class PendingAnswerLedger:
    """Instance id -> correct option, judged at most once.

    Entries are never removed; a consumed entry keeps rejecting further
    answers for the lifetime of the ledger. Not thread-safe on its own.
    """

    def __init__(self):
        self._pending: Dict[Hashable, PendingAnswer] = {}

    def __contains__(self, instance_id: Hashable) -> bool:
        return instance_id in self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def register(self, instance_id: Hashable, correct_option: int) -> None:
        if instance_id in self._pending:
            raise ValueError(f"Instance id {instance_id} is already registered")
        self._pending[instance_id] = PendingAnswer(correct_option=correct_option)

    def judge(self, instance_id: Hashable, proposed_option: int) -> Verdict:
        entry = self._pending.get(instance_id)
        if entry is None:
            raise InstanceNotFound(instance_id)
        if entry.consumed:
            raise AlreadyConsumed(instance_id)
        entry.consumed = True
        return Verdict(correct=proposed_option == entry.correct_option, correct_option=entry.correct_option)

    def is_consumed(self, instance_id: Hashable) -> bool:
        entry = self._pending.get(instance_id)
        if entry is None:
            raise InstanceNotFound(instance_id)
        return entry.consumed
