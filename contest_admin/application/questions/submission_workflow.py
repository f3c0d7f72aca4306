import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from contest_admin.infrastructure.repositories.question_store import QuestionStore
from .failures import FailureDetail
from .records import HIDDEN_TEST_CASE_COUNT, QuestionRecord, TestCasePair, build_hidden_test_case_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    failure: Optional[FailureDetail] = None
    # Set when the question row was written but its test cases were not
    orphaned_question_id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class SubmissionWorkflow:
    """
    Writes a question and then its hidden test cases.

    The second insert needs the id generated by the first, so the two writes
    never overlap. Nothing is retried or rolled back: a failed test case insert
    leaves the question row in place.
    """

    def __init__(self, store: QuestionStore):
        self._store = store

    async def submit(self, question: QuestionRecord, hidden_cases: Sequence[TestCasePair]) -> SubmissionResult:
        if len(hidden_cases) != HIDDEN_TEST_CASE_COUNT:
            raise ValueError(f"Expected {HIDDEN_TEST_CASE_COUNT} hidden test cases, got {len(hidden_cases)}")

        # STEP 1: question row
        try:
            question_id = await self._store.insert_question(question)
        except Exception as e:
            failure = FailureDetail.from_exception(e)
            logger.error(f"Error uploading question '{question.title}': {failure.to_json()}")
            return SubmissionResult(failure=failure)

        logger.info(f"Question '{question.title}' stored with id {question_id}")

        # STEP 2: hidden test cases, one batch
        rows = build_hidden_test_case_rows(question_id, hidden_cases)
        try:
            await self._store.insert_hidden_test_cases(rows)
        except Exception as e:
            failure = FailureDetail.from_exception(e)
            logger.error(
                f"Error uploading test cases, question {question_id} has no hidden test cases: {failure.to_json()}"
            )
            return SubmissionResult(failure=failure, orphaned_question_id=question_id)

        logger.info(f"Stored {len(rows)} hidden test cases for question {question_id}")
        return SubmissionResult()
