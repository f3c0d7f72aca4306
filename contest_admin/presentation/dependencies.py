import logging

from fastapi import HTTPException, Request, Response, status

from contest_admin.application.questions.upload_form import UploadFormRegistry, UploadQuestionForm

logger = logging.getLogger(__name__)

FORM_COOKIE = "upload_form_id"


async def get_upload_form(request: Request, response: Response) -> UploadQuestionForm:
    # async so the registry is only touched from the event loop
    registry: UploadFormRegistry = getattr(request.app.state, "upload_forms", None)
    if registry is None:
        logger.error("Upload form requested before the application finished starting")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Upload form is not ready",
        )

    requested_id = request.cookies.get(FORM_COOKIE)
    form_id, form = registry.get_or_create(requested_id)
    if form_id != requested_id:
        response.set_cookie(FORM_COOKIE, form_id, httponly=True, samesite="lax")
    return form
