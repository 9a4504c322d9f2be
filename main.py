import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.database import create_tables
from app.exceptions import LibraryError, StoreError, ValidationError
from app.routes import router

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info("Database and tables created")
    yield


app = FastAPI(title="Library Loans API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(error: LibraryError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"erro": error.message})


@app.exception_handler(LibraryError)
async def library_error_handler(request: Request, exc: LibraryError):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"][1:]) or "body"
        problems.append(f"{field}: {err['msg']}")
    error = ValidationError("; ".join(problems))
    logger.info(f"{request.method} {request.url.path} -> {error.status_code}: {error.message}")
    return error_response(error)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"{request.method} {request.url.path} failed in the database layer")
    return error_response(StoreError(str(exc)))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed")
    return error_response(StoreError(str(exc) or exc.__class__.__name__))


app.include_router(router)


if __name__ == "__main__":
    logger.info(f"Server listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
