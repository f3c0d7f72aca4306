import asyncio

import pytest

from contest_admin.application.questions.records import TestCasePair
from contest_admin.application.questions.submission_workflow import SubmissionWorkflow
from contest_admin.application.questions.upload_form import build_hidden_pairs, build_question_record
from contest_admin.infrastructure.repositories.question_store import StoreWriteError


def test_hardcore_dsa_scenario(store, filled_values):
    question = build_question_record(filled_values)
    result = asyncio.run(SubmissionWorkflow(store).submit(question, build_hidden_pairs(filled_values)))

    assert result.ok
    assert result.failure is None

    [inserted] = store.question_calls
    assert inserted.base_points == 100
    assert inserted.avg_time == 180
    assert inserted.sequence_order == 0

    [batch] = store.test_case_calls
    assert len(batch) == 3
    assert all(row.is_hidden for row in batch)
    assert {row.question_id for row in batch} == {41}


def test_hidden_rows_keep_pair_order(store, two_sum_values):
    question = build_question_record(two_sum_values)
    asyncio.run(SubmissionWorkflow(store).submit(question, build_hidden_pairs(two_sum_values)))

    [batch] = store.test_case_calls
    assert [(r.input_data, r.output_data) for r in batch] == [
        ("2\n3 3\n6", "0 1"),
        ("5\n1 2 3 4 5\n9", "3 4"),
        ("3\n-1 -2 -3\n-5", "1 2"),
    ]


def test_question_insert_failure_skips_test_cases(make_store, filled_values):
    store = make_store(question_error=StoreWriteError("permission denied", table="questions"))
    question = build_question_record(filled_values)

    result = asyncio.run(SubmissionWorkflow(store).submit(question, build_hidden_pairs(filled_values)))

    assert not result.ok
    assert result.failure.render() == "permission denied"
    assert result.orphaned_question_id is None
    assert store.test_case_calls == []
    assert store.questions == {}


def test_test_case_failure_leaves_question_row(make_store, filled_values):
    store = make_store(test_case_error=StoreWriteError("value too long", table="test_cases"))
    question = build_question_record(filled_values)

    result = asyncio.run(SubmissionWorkflow(store).submit(question, build_hidden_pairs(filled_values)))

    assert not result.ok
    assert result.failure.render() == "value too long"
    assert result.orphaned_question_id == 41
    assert list(store.questions) == [41]
    assert store.test_cases == []


def test_unexpected_exception_is_caught(make_store, filled_values):
    store = make_store(question_error=ConnectionError("connection refused"))
    question = build_question_record(filled_values)

    result = asyncio.run(SubmissionWorkflow(store).submit(question, build_hidden_pairs(filled_values)))

    assert result.failure.render() == "connection refused"


def test_wrong_number_of_hidden_cases_is_rejected_before_writing(store, filled_values):
    question = build_question_record(filled_values)
    pairs = [TestCasePair(input="1", output="1")]

    with pytest.raises(ValueError):
        asyncio.run(SubmissionWorkflow(store).submit(question, pairs))
    assert store.call_count == 0
