from pydantic import BaseModel, Field
from typing import List, Optional, Tuple, Union

class ResolveRangeIn(BaseModel):
    file_length: int = Field(..., ge=0)
    range: Optional[str] = None
    mime_type: Optional[str] = None
    tolerate_errors: bool = False

class ResolvedRangeOut(BaseModel):
    status_code: int
    offset_start: int
    offset_end: int
    content_length: int
    file_length: int
    mime_type: str
    headers: List[Tuple[str, Union[int, str]]]

class RangeErrorOut(BaseModel):
    detail: str
    error: str
