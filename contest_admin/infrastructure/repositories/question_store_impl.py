import logging
from typing import Callable, List

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contest_admin.application.questions.records import HiddenTestCaseRecord, QuestionRecord
from contest_admin.infrastructure.db.models import QuestionModel, TestCaseModel
from .question_store import StoreWriteError

logger = logging.getLogger(__name__)


def _store_error(table: str, exc: SQLAlchemyError) -> StoreWriteError:
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    return StoreWriteError(message, table=table, description=f"Insert into '{table}' failed")


class SqlAlchemyQuestionStore:
    """
    Question store backed by a relational database.

    Every insert opens its own session and commits on its own, so a question
    row stays persisted even when the following test case insert fails.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    async def insert_question(self, record: QuestionRecord) -> int:
        return await run_in_threadpool(self._insert_question, record)

    async def insert_hidden_test_cases(self, rows: List[HiddenTestCaseRecord]) -> None:
        await run_in_threadpool(self._insert_test_cases, rows)

    def _insert_question(self, record: QuestionRecord) -> int:
        db = self._session_factory()
        try:
            logger.info(f"Inserting question '{record.title}' for round {record.round.value}")
            question = QuestionModel(**record.model_dump(mode="json"))
            db.add(question)
            db.commit()
            db.refresh(question)
            logger.info(f"Successfully committed question {question.id}")
            return question.id
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error inserting question '{record.title}': {e}", exc_info=True)
            raise _store_error(QuestionModel.__tablename__, e) from e
        finally:
            db.close()

    def _insert_test_cases(self, rows: List[HiddenTestCaseRecord]) -> None:
        db = self._session_factory()
        question_ids = sorted({row.question_id for row in rows})
        try:
            logger.info(f"Adding {len(rows)} hidden test cases for question(s) {question_ids}")
            db.add_all([TestCaseModel(**row.model_dump()) for row in rows])
            db.commit()
            logger.info(f"Successfully committed {len(rows)} test cases for question(s) {question_ids}")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error inserting test cases for question(s) {question_ids}: {e}", exc_info=True)
            raise _store_error(TestCaseModel.__tablename__, e) from e
        finally:
            db.close()
