from typing import List, Optional, Protocol

from contest_admin.application.questions.records import HiddenTestCaseRecord, QuestionRecord


class StoreWriteError(Exception):
    def __init__(self, message: str, *, table: str, description: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.table = table
        self.description = description


class QuestionStore(Protocol):
    async def insert_question(self, record: QuestionRecord) -> int:
        """
        Inserts a single question row and returns its generated id.
        """
        ...

    async def insert_hidden_test_cases(self, rows: List[HiddenTestCaseRecord]) -> None:
        """
        Inserts all hidden test case rows of one question as a single batch.
        """
        ...
