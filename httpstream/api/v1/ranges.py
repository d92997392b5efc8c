from fastapi import APIRouter
from fastapi.responses import JSONResponse

from httpstream.core.errors import RangeError
from httpstream.schemas.range import RangeErrorOut, ResolveRangeIn, ResolvedRangeOut
from httpstream.services.range_resolver import resolve_range

router = APIRouter()

@router.post(
    "/ranges:resolve",
    response_model=ResolvedRangeOut,
    responses={416: {"model": RangeErrorOut}},
)
async def resolve(body: ResolveRangeIn):
    """Resolve a Range header against a file length without touching any file."""
    try:
        resolved = resolve_range(
            body.file_length,
            body.mime_type,
            body.range,
            tolerate_errors=body.tolerate_errors,
        )
    except RangeError as e:
        return JSONResponse(
            status_code=416,
            content=RangeErrorOut(detail=str(e), error=type(e).__name__).model_dump(),
        )

    return ResolvedRangeOut(
        status_code=resolved.status_code,
        offset_start=resolved.offset_start,
        offset_end=resolved.offset_end,
        content_length=resolved.content_length,
        file_length=resolved.file_length,
        mime_type=resolved.mime_type,
        headers=resolved.header_items(),
    )
