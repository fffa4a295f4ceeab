import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware

from create_db import init_models
from services.school_management.controllers.school_service import invalid_json_handler, router as school_router
from shared.config import settings
from shared.db import engine
from shared.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_file)
    # A failure here aborts startup; the API never serves without its table.
    await init_models()
    logger.info("School Locator API is ready on port %s", settings.port)
    yield
    await engine.dispose()


app = FastAPI(title="School Locator API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, invalid_json_handler)
app.include_router(school_router)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
