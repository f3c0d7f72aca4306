from pydantic import BaseModel
from typing import Dict, List, Optional


class FieldUpdate(BaseModel):
    value: str = ""


class QuestionUploadRequest(BaseModel):
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


class UploadFormState(BaseModel):
    status: str
    values: Dict[str, str]
    errors: Dict[str, str] = {}
    error_message: str = ""
    success_message: str = ""
    is_submitting: bool = False


class RoundOptionOut(BaseModel):
    value: str
    label: str
    base_points: int


class FieldOut(BaseModel):
    name: str
    label: str
    section: str
    widget: str
    placeholder: Optional[str] = None
    options: List[RoundOptionOut] = []


class EditorConfigOut(BaseModel):
    readonly: bool
    height: int
    placeholder: str


class UploadFormLayout(BaseModel):
    title: str = "Upload New Question"
    sections: List[str]
    fields: List[FieldOut]
    editor: EditorConfigOut
    submit_label: str = "Upload Question"
    submitting_label: str = "Uploading..."
    success_title: str = "Upload Successful!"
    new_entry_label: str = "Add Next Question"
