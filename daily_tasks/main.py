import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from daily_tasks.core.config import settings
from daily_tasks.core.database import engine, Base
from daily_tasks.core.errors import AppError, StoreError
from daily_tasks.core.logging_setup import setup_logging
from daily_tasks.routers import health, auth, tasks

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Daily Tasks API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request.", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Store error on %s %s", request.method, request.url.path)
    return await handle_app_error(request, StoreError("Server error.", error=str(exc)))


# Routes
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(tasks.router)


def run():
    import uvicorn
    uvicorn.run("daily_tasks.main:app", host="0.0.0.0", port=settings.PORT)
