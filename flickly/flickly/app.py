import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from flickly.applications.interfaces.dtos.message import Message
from flickly.infrastructure.logging.logger import Logger, setup_logging
from flickly.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from flickly.presentation.routers import auth, friends, movies, people, recommendations, reviews, users

setup_logging(noisy_libs={"sqlalchemy.engine": logging.WARNING})

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables(get_engine())
    logger.info("Flickly started")
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Flickly", lifespan=lifespan)

for module in (auth, users, movies, people, reviews, friends, recommendations):
    app.include_router(module.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Welcome to Flickly!"}
