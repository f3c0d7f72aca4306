import logging
import uuid
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .form_fields import FormValidator
from .records import QuestionRecord, TestCasePair
from .scoring import AVG_TIME_SECONDS, SEQUENCE_ORDER, Round, base_points
from .submission_workflow import SubmissionWorkflow

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Question and test cases uploaded successfully!"
VALIDATION_MESSAGE = "Please fill in all required fields."


class UnknownFieldError(ValueError):
    pass


class FormStatus(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"


@dataclass
class QuestionDraft:
    round: str = ""
    title: str = ""
    description: str = ""
    input_format: str = ""
    output_format: str = ""
    constraints: str = ""
    example_1_input: str = ""
    example_1_output: str = ""
    example_2_input: str = ""
    example_2_output: str = ""
    hidden_1_input: str = ""
    hidden_1_output: str = ""
    hidden_2_input: str = ""
    hidden_2_output: str = ""
    hidden_3_input: str = ""
    hidden_3_output: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def as_values(self) -> Dict[str, str]:
        return asdict(self)


def build_question_record(values: Dict[str, str]) -> QuestionRecord:
    return QuestionRecord(
        title=values["title"],
        description=values["description"],
        input_format=values["input_format"],
        output_format=values["output_format"],
        constraints=values["constraints"],
        example_1_input=values["example_1_input"],
        example_1_output=values["example_1_output"],
        example_2_input=values["example_2_input"],
        example_2_output=values["example_2_output"],
        round=Round(values["round"]),
        base_points=base_points(values["round"]),
        avg_time=AVG_TIME_SECONDS,
        sequence_order=SEQUENCE_ORDER,
    )


def build_hidden_pairs(values: Dict[str, str]) -> List[TestCasePair]:
    return [
        TestCasePair(input=values[f"hidden_{n}_input"], output=values[f"hidden_{n}_output"])
        for n in (1, 2, 3)
    ]


class UploadQuestionForm:
    """
    State of the "upload new question" page.

    Status moves EDITING -> SUBMITTING -> SUCCESS or back to EDITING with an
    error message. From SUCCESS the admin starts a new entry explicitly. Only
    one submission can be in flight: the status flips to SUBMITTING before
    the workflow is awaited and every other submit attempt is ignored until
    it settles.
    """

    def __init__(self, workflow: SubmissionWorkflow, validator: Optional[FormValidator] = None):
        self._workflow = workflow
        self._validator = validator or FormValidator()
        self.draft = QuestionDraft()
        self.status = FormStatus.EDITING
        self.success_message = ""
        self.error_message = ""

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._validator.errors)

    @property
    def fields(self):
        return self._validator.fields

    @property
    def is_submitting(self) -> bool:
        return self.status is FormStatus.SUBMITTING

    def update_field(self, name: str, value: str) -> None:
        if not self._validator.has_field(name):
            raise UnknownFieldError(f"Unknown field: {name}")
        setattr(self.draft, name, value)

    async def attempt_submit(self) -> FormStatus:
        if self.status is not FormStatus.EDITING:
            logger.info(f"Ignoring submit while form is {self.status.value}")
            return self.status

        await self._validator.handle_submit(self.draft.as_values(), self._submit, self._reject)
        return self.status

    def start_new_entry(self) -> None:
        if self.status is not FormStatus.SUCCESS:
            logger.debug(f"start_new_entry ignored while form is {self.status.value}")
            return
        self.draft = QuestionDraft()
        self._validator.clear()
        self.success_message = ""
        self.error_message = ""
        self.status = FormStatus.EDITING

    def snapshot(self) -> Dict:
        return {
            "status": self.status.value,
            "values": self.draft.as_values(),
            "errors": self.errors,
            "error_message": self.error_message,
            "success_message": self.success_message,
            "is_submitting": self.is_submitting,
        }

    def _reject(self, errors: Dict[str, str]) -> None:
        self.success_message = ""
        self.error_message = VALIDATION_MESSAGE

    async def _submit(self, values: Dict[str, str]) -> None:
        self.status = FormStatus.SUBMITTING
        self.error_message = ""
        self.success_message = ""

        try:
            question = build_question_record(values)
            logger.info(f"Submitting question '{question.title}' for {question.round.value} ({question.base_points} pts)")
            result = await self._workflow.submit(question, build_hidden_pairs(values))

            if result.ok:
                self.draft = QuestionDraft()
                self._validator.clear()
                self.success_message = SUCCESS_MESSAGE
                self.status = FormStatus.SUCCESS
                logger.info(f"Question '{question.title}' uploaded")
            else:
                self.error_message = result.failure.render()
        finally:
            if self.status is FormStatus.SUBMITTING:
                self.status = FormStatus.EDITING


class UploadFormRegistry:
    """
    One ``UploadQuestionForm`` per editing session, keyed by an opaque form id.

    Forms live in memory for the lifetime of the process and share the
    injected workflow.
    """

    def __init__(self, workflow: SubmissionWorkflow):
        self._workflow = workflow
        self._forms: Dict[str, UploadQuestionForm] = {}

    def __len__(self) -> int:
        return len(self._forms)

    def get_or_create(self, form_id: Optional[str]) -> Tuple[str, UploadQuestionForm]:
        if form_id and form_id in self._forms:
            return form_id, self._forms[form_id]
        form_id = uuid.uuid4().hex
        form = UploadQuestionForm(self._workflow)
        self._forms[form_id] = form
        logger.info(f"Opened upload form {form_id}")
        return form_id, form
