import asyncio
from typing import Dict, List, Optional

import pytest

from contest_admin.application.questions.records import HiddenTestCaseRecord, QuestionRecord


class FakeQuestionStore:
    """In-memory store that records every call and can be told to fail or block."""

    def __init__(
        self,
        *,
        question_error: Optional[Exception] = None,
        test_case_error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
        next_id: int = 41,
    ):
        self.question_error = question_error
        self.test_case_error = test_case_error
        self.gate = gate
        self.next_id = next_id
        self.question_calls: List[QuestionRecord] = []
        self.test_case_calls: List[List[HiddenTestCaseRecord]] = []
        self.questions: Dict[int, QuestionRecord] = {}
        self.test_cases: List[HiddenTestCaseRecord] = []

    async def insert_question(self, record: QuestionRecord) -> int:
        self.question_calls.append(record)
        if self.gate is not None:
            await self.gate.wait()
        if self.question_error is not None:
            raise self.question_error
        question_id = self.next_id
        self.next_id += 1
        self.questions[question_id] = record
        return question_id

    async def insert_hidden_test_cases(self, rows: List[HiddenTestCaseRecord]) -> None:
        self.test_case_calls.append(list(rows))
        if self.test_case_error is not None:
            raise self.test_case_error
        self.test_cases.extend(rows)

    @property
    def call_count(self) -> int:
        return len(self.question_calls) + len(self.test_case_calls)


FILLED_VALUES = {
    "round": "Hardcore DSA",
    "title": "x",
    "description": "x",
    "input_format": "x",
    "output_format": "x",
    "constraints": "x",
    "example_1_input": "x",
    "example_1_output": "x",
    "example_2_input": "x",
    "example_2_output": "x",
    "hidden_1_input": "x",
    "hidden_1_output": "x",
    "hidden_2_input": "x",
    "hidden_2_output": "x",
    "hidden_3_input": "x",
    "hidden_3_output": "x",
}


@pytest.fixture
def store():
    return FakeQuestionStore()


@pytest.fixture
def filled_values():
    return dict(FILLED_VALUES)


@pytest.fixture
def two_sum_values():
    return {
        "round": "Coding Cascade",
        "title": "Two Sum",
        "description": "<p>Find two numbers that add up to <b>target</b>.</p>",
        "input_format": "n, then n integers, then target",
        "output_format": "Two indices",
        "constraints": "2 <= n <= 10^4",
        "example_1_input": "4\n2 7 11 15\n9",
        "example_1_output": "0 1",
        "example_2_input": "3\n3 2 4\n6",
        "example_2_output": "1 2",
        "hidden_1_input": "2\n3 3\n6",
        "hidden_1_output": "0 1",
        "hidden_2_input": "5\n1 2 3 4 5\n9",
        "hidden_2_output": "3 4",
        "hidden_3_input": "3\n-1 -2 -3\n-5",
        "hidden_3_output": "1 2",
    }


@pytest.fixture
def make_store():
    def factory(**kwargs):
        return FakeQuestionStore(**kwargs)
    return factory
