import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Iterable, Mapping, Optional, Tuple

from .scoring import Round

logger = logging.getLogger(__name__)

DETAILS_SECTION = "1. Question Details"
EXAMPLES_SECTION = "2. Example Test Cases (Public)"
HIDDEN_SECTION = "3. Hidden Test Cases (For Evaluation)"

INVALID_ROUND_MESSAGE = "Select a valid round"


@dataclass(frozen=True)
class RichTextEditorConfig:
    readonly: bool = False
    height: int = 300
    placeholder: str = "Start writing the question description..."


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    section: str
    required_message: str
    widget: str = "text"  # select | text | textarea | rich_text
    placeholder: Optional[str] = None
    choices: Tuple[str, ...] = field(default_factory=tuple)
    # Whitespace-only values count as empty
    trim: bool = False


def _case_fields(kind: str, number: int, section: str) -> Tuple[FieldSpec, FieldSpec]:
    prefix = f"{kind.lower()}_{number}"
    return (
        FieldSpec(f"{prefix}_input", "Input", section, f"{kind} {number} Input is required", widget="textarea"),
        FieldSpec(f"{prefix}_output", "Output", section, f"{kind} {number} Output is required", widget="textarea"),
    )


QUESTION_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        "round", "Round Name", DETAILS_SECTION, "Round is required",
        widget="select", placeholder="Select a round", choices=tuple(r.value for r in Round),
    ),
    FieldSpec("title", "Question Title", DETAILS_SECTION, "Title is required", placeholder="e.g. Two Sum"),
    FieldSpec(
        "description", "Question Description", DETAILS_SECTION, "Description is required",
        widget="rich_text", trim=True,
    ),
    FieldSpec(
        "input_format", "Input Format", DETAILS_SECTION, "Input format is required",
        widget="textarea", placeholder="Describe the input format...",
    ),
    FieldSpec(
        "output_format", "Output Format", DETAILS_SECTION, "Output format is required",
        widget="textarea", placeholder="Describe the output format...",
    ),
    FieldSpec(
        "constraints", "Constraints", DETAILS_SECTION, "Constraints are required",
        widget="textarea", placeholder="e.g. 1 <= N <= 10^5",
    ),
    *_case_fields("Example", 1, EXAMPLES_SECTION),
    *_case_fields("Example", 2, EXAMPLES_SECTION),
    *_case_fields("Hidden", 1, HIDDEN_SECTION),
    *_case_fields("Hidden", 2, HIDDEN_SECTION),
    *_case_fields("Hidden", 3, HIDDEN_SECTION),
)

FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in QUESTION_FIELDS)

Values = Mapping[str, Optional[str]]


class FormValidator:
    """
    Holds the field declarations and the error state of the last validation.
    """

    def __init__(self, fields: Iterable[FieldSpec] = QUESTION_FIELDS):
        self._fields: Dict[str, FieldSpec] = {f.name: f for f in fields}
        self.errors: Dict[str, str] = {}

    @property
    def fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(self._fields.values())

    def has_field(self, name: str) -> bool:
        return name in self._fields

    def check(self, spec: FieldSpec, value: Optional[str]) -> Optional[str]:
        text = "" if value is None else str(value)
        if not (text.strip() if spec.trim else text):
            return spec.required_message
        if spec.choices and value not in spec.choices:
            return INVALID_ROUND_MESSAGE
        return None

    def validate(self, values: Values) -> Dict[str, str]:
        errors = {}
        for spec in self._fields.values():
            message = self.check(spec, values.get(spec.name))
            if message:
                errors[spec.name] = message
        self.errors = errors
        return errors

    def clear(self) -> None:
        self.errors = {}

    async def handle_submit(
        self,
        values: Values,
        on_valid: Callable[[Dict[str, str]], Awaitable[None]],
        on_invalid: Callable[[Dict[str, str]], None],
    ) -> bool:
        errors = self.validate(values)
        if errors:
            logger.warning(f"Validation errors: {sorted(errors)}")
            on_invalid(errors)
            return False
        await on_valid({name: str(values[name]) for name in self._fields})
        return True
