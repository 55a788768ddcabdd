"""
Question bank: the static set of questions the quiz engine draws from.

The bank is loaded once at startup and never mutated afterwards, so it can be
read from any thread without locking.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from cardquest.core.errors import QuestionBankError, QuestionNotFound, UnknownCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    id: str
    category: str
    prompt: str
    options: Tuple[str, ...]
    correct_index: int

    @staticmethod
    def from_dict(d: Dict) -> "Question":
        try:
            return Question(
                id=str(d["id"]),
                category=str(d["category"]),
                prompt=str(d["prompt"]),
                options=tuple(str(o) for o in d["options"]),
                correct_index=int(d["correct_index"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise QuestionBankError(f"Malformed question record {d!r}: {e}") from e

    def validate(self) -> None:
        if not self.prompt.strip():
            raise QuestionBankError(f"Question `{self.id}` has an empty prompt")
        if len(self.options) < 2:
            raise QuestionBankError(f"Question `{self.id}` needs at least two options")
        if len(self.options) > 256:
            raise QuestionBankError(f"Question `{self.id}` has more than 256 options")
        if not 0 <= self.correct_index < len(self.options):
            raise QuestionBankError(
                f"Question `{self.id}` has correct index {self.correct_index} "
                f"outside of its {len(self.options)} options"
            )


class QuestionBank:
    """Questions grouped by category, in load order."""

    def __init__(self, questions: Iterable[Question]):
        self._by_id: Dict[str, Question] = {}
        self._by_category: Dict[str, List[Question]] = {}
        for q in questions:
            q.validate()
            if q.id in self._by_id:
                raise QuestionBankError(f"Duplicate question id `{q.id}`")
            self._by_id[q.id] = q
            self._by_category.setdefault(q.category, []).append(q)

    @classmethod
    def from_records(cls, records: Iterable[Dict]) -> "QuestionBank":
        return cls(Question.from_dict(r) for r in records)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "QuestionBank":
        """Load a bank from a JSON file.

        The file holds either a list of question records or an object with a
        ``questions`` list. Each record has ``id``, ``category``, ``prompt``,
        ``options`` and ``correct_index``.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise QuestionBankError(f"Could not read question bank {path}: {e}") from e
        if isinstance(data, dict):
            if "questions" not in data:
                raise QuestionBankError(f"Question bank {path} has no `questions` key")
            records = data["questions"]
        else:
            records = data
        if not isinstance(records, list):
            raise QuestionBankError(f"Question bank {path} must contain a list of questions")
        bank = cls.from_records(records)
        if not len(bank):
            raise QuestionBankError(f"Question bank {path} contains no questions")
        logger.info(f"Loaded {len(bank)} questions in {len(bank.categories())} categories from {path}")
        return bank

    def __len__(self) -> int:
        return len(self._by_id)

    def categories(self) -> List[str]:
        return sorted(self._by_category)

    def questions_by_category(self, category: str) -> List[Question]:
        questions = self._by_category.get(category)
        if not questions:
            raise UnknownCategory(category)
        return list(questions)

    def question_by_id(self, question_id: str) -> Question:
        try:
            return self._by_id[question_id]
        except KeyError:
            raise QuestionNotFound(question_id) from None
