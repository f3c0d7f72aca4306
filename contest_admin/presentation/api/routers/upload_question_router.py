import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from contest_admin.application.questions.form_fields import (
    DETAILS_SECTION,
    EXAMPLES_SECTION,
    HIDDEN_SECTION,
    RichTextEditorConfig,
)
from contest_admin.application.questions.scoring import Round, base_points, round_label
from contest_admin.application.questions.upload_form import FormStatus, UnknownFieldError, UploadQuestionForm
from contest_admin.presentation.dependencies import get_upload_form
from contest_admin.presentation.schemas.upload_form_schema import (
    EditorConfigOut,
    FieldOut,
    FieldUpdate,
    QuestionUploadRequest,
    RoundOptionOut,
    UploadFormLayout,
    UploadFormState,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/upload-question", tags=["Upload Question"])


def _state(form: UploadQuestionForm) -> UploadFormState:
    return UploadFormState(**form.snapshot())


@router.get("/layout", response_model=UploadFormLayout)
async def get_layout(form: UploadQuestionForm = Depends(get_upload_form)):
    fields = []
    for spec in form.fields:
        options = []
        if spec.name == "round":
            options = [
                RoundOptionOut(value=r.value, label=round_label(r), base_points=base_points(r))
                for r in Round
            ]
        fields.append(
            FieldOut(
                name=spec.name,
                label=spec.label,
                section=spec.section,
                widget=spec.widget,
                placeholder=spec.placeholder,
                options=options,
            )
        )
    return UploadFormLayout(
        sections=[DETAILS_SECTION, EXAMPLES_SECTION, HIDDEN_SECTION],
        fields=fields,
        editor=EditorConfigOut(**asdict(RichTextEditorConfig())),
    )


@router.get("", response_model=UploadFormState)
async def get_form_state(form: UploadQuestionForm = Depends(get_upload_form)):
    return _state(form)


@router.put("/fields/{field_name}", response_model=UploadFormState)
async def update_field(field_name: str, body: FieldUpdate, form: UploadQuestionForm = Depends(get_upload_form)):
    try:
        form.update_field(field_name, body.value)
    except UnknownFieldError as e:
        logger.warning(f"Rejected update of unknown field '{field_name}'")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _state(form)


@router.post("/submit", response_model=UploadFormState)
async def submit_form(form: UploadQuestionForm = Depends(get_upload_form)):
    await form.attempt_submit()
    return _state(form)


@router.post("", response_model=UploadFormState)
async def upload_question(payload: QuestionUploadRequest, form: UploadQuestionForm = Depends(get_upload_form)):
    if form.status is not FormStatus.EDITING:
        logger.info(f"Upload ignored while form is {form.status.value}")
        return _state(form)
    for name, value in payload.model_dump().items():
        form.update_field(name, value)
    await form.attempt_submit()
    return _state(form)


@router.post("/new-entry", response_model=UploadFormState)
async def start_new_entry(form: UploadQuestionForm = Depends(get_upload_form)):
    form.start_new_entry()
    return _state(form)
