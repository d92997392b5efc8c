import logging

from fastapi import FastAPI

from httpstream.api.storage import router as storage_router
from httpstream.api.v1.router import router as v1_router
from httpstream.core import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="[%(levelname)s] %(name)s: %(message)s")

app = FastAPI(title="http-stream API", version="0.1.0")
app.include_router(v1_router, prefix="/v1")
app.include_router(storage_router, tags=["storage"])
