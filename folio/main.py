from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from .database import create_tables
from .core.exceptions import FolioError
from .core.logger import logger
from .routes import auth_router, profile_router, sections_router, portfolio_router
from .utils import error_response


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info("Application started successfully")
    yield
    logger.info("Application shutting down")


app = FastAPI(title="Folio", lifespan=lifespan)


@app.exception_handler(FolioError)
async def folio_error_handler(request: Request, exc: FolioError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request body for {request.url.path}: {exc.errors()}")
    return error_response("Invalid request body", 400)


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(sections_router)
# after profile_router so /profile/get is not read as a username
app.include_router(portfolio_router)
