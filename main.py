import sys
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contest_admin.infrastructure.config import HOST, LOG_LEVEL, PORT
from contest_admin.infrastructure.db.session import Base, SessionLocal, engine
from contest_admin.infrastructure.db.models import QuestionModel, TestCaseModel  # noqa: F401
from contest_admin.infrastructure.repositories.question_store_impl import SqlAlchemyQuestionStore
from contest_admin.application.questions.submission_workflow import SubmissionWorkflow
from contest_admin.application.questions.upload_form import UploadFormRegistry
from contest_admin.presentation.api.routers.upload_question_router import router as upload_question_router

# Create tables
Base.metadata.create_all(bind=engine)

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One store for the whole process, handed to the workflow; one form per admin session
    store = SqlAlchemyQuestionStore(SessionLocal)
    app.state.upload_forms = UploadFormRegistry(SubmissionWorkflow(store))
    logger.info(f"Upload forms ready, writing to {engine.url.render_as_string(hide_password=True)}")
    yield


# Initialize FastAPI app
app = FastAPI(title="Contest Admin API", lifespan=lifespan)

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred."}
    )

# Include routers
app.include_router(upload_question_router)


@app.get("/")
def root():
    return {"message": "Welcome to Contest Admin API", "upload_question": "/upload-question"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
