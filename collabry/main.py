from contextlib import asynccontextmanager

from fastapi import FastAPI

from collabry.api import router
from collabry.logging_config import setup_logging
from collabry.middleware import ExceptionMiddleware
from database.database import session_manager


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield
    await session_manager.close()


app = FastAPI(docs_url="/api/docs", redoc_url="/api/redoc",
              openapi_url="/api/openapi.json", lifespan=lifespan)
app.include_router(router)
app.add_middleware(ExceptionMiddleware)
