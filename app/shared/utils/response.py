from typing import List, Union

from pydantic import BaseModel


class FieldError(BaseModel):
    loc: List[Union[str, int]]
    msg: str
    type: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: List[FieldError] = []
