from typing import List, Sequence

from pydantic import BaseModel, Field

from .scoring import AVG_TIME_SECONDS, SEQUENCE_ORDER, Round

HIDDEN_TEST_CASE_COUNT = 3


class TestCasePair(BaseModel):
    __test__ = False

    input: str
    output: str


class QuestionRecord(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1, description="HTML from the rich-text editor")
    input_format: str = Field(..., min_length=1)
    output_format: str = Field(..., min_length=1)
    constraints: str = Field(..., min_length=1)
    example_1_input: str = Field(..., min_length=1)
    example_1_output: str = Field(..., min_length=1)
    example_2_input: str = Field(..., min_length=1)
    example_2_output: str = Field(..., min_length=1)
    round: Round
    base_points: int = Field(..., ge=0)
    avg_time: int = Field(default=AVG_TIME_SECONDS, description="Expected solve time in seconds")
    sequence_order: int = Field(default=SEQUENCE_ORDER)


class HiddenTestCaseRecord(BaseModel):
    question_id: int
    input_data: str
    output_data: str
    is_hidden: bool = True


def build_hidden_test_case_rows(question_id: int, pairs: Sequence[TestCasePair]) -> List[HiddenTestCaseRecord]:
    """
    Attach the generated question id to each hidden input/output pair.
    """
    if len(pairs) != HIDDEN_TEST_CASE_COUNT:
        raise ValueError(
            f"Expected {HIDDEN_TEST_CASE_COUNT} hidden test cases, got {len(pairs)}"
        )
    return [
        HiddenTestCaseRecord(
            question_id=question_id,
            input_data=pair.input,
            output_data=pair.output,
            is_hidden=True,
        )
        for pair in pairs
    ]
