from pydantic import BaseModel, Field
from typing import Any

class GenerateRequest(BaseModel):
    text: str = Field(min_length=1)
    # untyped so any unrecognized value, string or not, reaches the 400 path instead of a 422
    provider: Any = None

class SimulateRequest(BaseModel):
    text: str = Field(min_length=1)

class DiagramResponse(BaseModel):
    code: str

class ErrorResponse(BaseModel):
    error: str
    details: Any = None
