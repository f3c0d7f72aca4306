from .question_model import QuestionModel
from .test_case_model import TestCaseModel

__all__ = ["QuestionModel", "TestCaseModel"]
