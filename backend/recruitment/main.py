from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from recruitment.core.config import settings
from recruitment.core.errors import (
    RecruitmentError,
    database_error_handler,
    http_error_handler,
    recruitment_error_handler,
    request_validation_error_handler,
)
from recruitment.core.logging import get_logger
from recruitment.db.base import Base
from recruitment.db.session import engine

# Import all models so SQLAlchemy can discover them for table creation
from recruitment.models import (  # noqa: F401
    AcademicBackground,
    Application,
    EmploymentBackground,
    JobOffer,
    User,
)

# Import API router
from recruitment.api.api import api_router

logger = get_logger("recruitment")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.APP_NAME} ready on {engine.url.render_as_string(hide_password=True)}")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Job recruitment back-end: users, job offers, applications and candidate backgrounds",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization"],
)

app.add_exception_handler(RecruitmentError, recruitment_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(StarletteHTTPException, http_error_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Single entrypoint: /?path=<resource>&id=<row>
app.include_router(api_router)


if __name__ == "__main__":
    uvicorn.run(
        "recruitment.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
