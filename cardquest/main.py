"""
Main FastAPI application entry point.
"""
from contextlib import asynccontextmanager
import logging
import random
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cardquest.api.quizzes import router as quizzes_router
from cardquest.api.users import router as users_router
from cardquest.core.config import Settings, get_settings
from cardquest.core.database import close_db, init_db
from cardquest.core.errors import QuizError
from cardquest.services.question_bank import QuestionBank
from cardquest.services.quiz_engine import QuizEngine

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, bank: Optional[QuestionBank] = None) -> FastAPI:
    """Build the application; the quiz engine itself is constructed at startup."""
    settings = settings or get_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION}...")
        app.state.settings = settings
        app.state.session_factory = init_db(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

        quiz_bank = bank if bank is not None else QuestionBank.from_file(settings.question_bank_path())
        rng = random.Random(settings.QUIZ_RANDOM_SEED) if settings.QUIZ_RANDOM_SEED is not None else None
        app.state.quiz_engine = QuizEngine(quiz_bank, rng=rng)
        logger.info("Quiz engine ready")

        yield

        logger.info(f"Shutting down {settings.APP_NAME}...")
        close_db(app.state.session_factory)

    app = FastAPI(title=settings.APP_NAME, description=settings.APP_DESCRIPTION,
                  version=settings.APP_VERSION, lifespan=lifespan)
    app.add_middleware(CORSMiddleware, allow_origins=settings.cors_origins(), allow_credentials=True,
                       allow_methods=["*"], allow_headers=["*"])

    @app.exception_handler(QuizError)
    async def quiz_error_handler(request: Request, exc: QuizError):
        """Handle expected, caller-recoverable errors."""
        logger.info(f"{request.method} {request.url.path} -> {exc.code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "message": exc.detail,
                    "type": "http_error",
                    "status_code": exc.status_code
                }
            }
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": {
                    "message": "Validation error",
                    "type": "validation_error",
                    "status_code": status.HTTP_422_UNPROCESSABLE_ENTITY,
                    "details": jsonable_errors(exc)
                }
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        message = "An internal error occurred" if settings.is_production() else str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "message": message,
                    "type": "internal_error",
                    "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
                }
            }
        )

    @app.get("/health", tags=["Health"])
    def health():
        return {"status": "ok", "version": settings.APP_VERSION}

    app.include_router(users_router, prefix=f"{settings.API_V1_PREFIX}/users", tags=["users"])
    app.include_router(quizzes_router, prefix=f"{settings.API_V1_PREFIX}/quizzes", tags=["quizzes"])
    return app


def jsonable_errors(exc: RequestValidationError):
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("cardquest.main:app", host="0.0.0.0", port=8000)
