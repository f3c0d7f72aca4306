import json
from dataclasses import asdict, dataclass
from typing import Optional

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def _text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


@dataclass(frozen=True)
class FailureDetail:
    """
    What went wrong during a store write, reduced to the pieces the form can show.

    ``render`` picks the first available of message, description and the
    stringified exception, falling back to a generic message.
    """

    message: Optional[str] = None
    description: Optional[str] = None
    raw: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FailureDetail":
        message = _text(getattr(exc, "message", None))
        description = _text(getattr(exc, "error_description", None)) or _text(getattr(exc, "description", None))
        return cls(message=message, description=description, raw=_text(exc) or repr(exc))

    def render(self) -> str:
        return self.message or self.description or self.raw or UNEXPECTED_ERROR_MESSAGE

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)
