from fastapi import APIRouter
from httpstream.api.v1 import ranges

router = APIRouter()
router.include_router(ranges.router, tags=["ranges"])
