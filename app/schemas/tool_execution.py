from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, Literal, Optional, Union

class ToolExecutionRequest(BaseModel):
    inputs: Dict[str, Any] = {}

class PdfResult(BaseModel):
    type: Literal["pdf"] = "pdf"
    message: str
    download_url: str
    file_size: str
    pages: int

class ImageResult(BaseModel):
    type: Literal["image"] = "image"
    message: str
    download_url: str
    before: str
    after: str

class TextResult(BaseModel):
    type: Literal["text"] = "text"
    message: str
    output: str

class CodeResult(BaseModel):
    type: Literal["code"] = "code"
    message: str
    language: str
    code: str

class GeneralResult(BaseModel):
    type: Literal["general"] = "general"
    message: str
    status: str
    processing_time: str

ToolExecutionResult = Annotated[
    Union[PdfResult, ImageResult, TextResult, CodeResult, GeneralResult],
    Field(discriminator="type"),
]

class ToolExecutionResponse(BaseModel):
    tool_id: int
    usage_id: Optional[int] = None
    result: ToolExecutionResult
