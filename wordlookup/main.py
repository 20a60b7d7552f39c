from __future__ import annotations
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from wordlookup.config import settings
from wordlookup.web.routers import home, search, history

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("wordlookup")

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Dictionary API: %s (timeout %ss)", settings.DICTIONARY_API_URL, settings.LOOKUP_TIMEOUT)
    yield

app = FastAPI(title="Word Lookup", lifespan=lifespan)

app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

app.include_router(home.router)
app.include_router(search.router)
app.include_router(history.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
