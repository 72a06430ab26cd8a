"""
Tool execution service.
Runs a catalog tool through the configured execution provider and records
the run as a usage of that tool.
"""
import abc
import logging
import random
import time
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.crud import crud_tool, crud_tool_usage
from app.models.tool import Tool
from app.schemas.tool_execution import (
    CodeResult,
    GeneralResult,
    ImageResult,
    PdfResult,
    TextResult,
    ToolExecutionResponse,
    ToolExecutionResult,
)

logger = logging.getLogger(__name__)

SAMPLE_IMAGE_URL = "https://images.unsplash.com/photo-1542744173-8e7e53415bb0?w=200&h=200&fit=crop"

TEXT_OUTPUT_TEMPLATE = (
    'Generated content based on your input: "{text}". This is a high-quality '
    "AI-generated response that demonstrates the tool's capabilities. The content "
    "is engaging, relevant, and professionally crafted to meet your specific needs."
)

CODE_TEMPLATE = """// Generated {label} code
function processData(input) {{
  // AI-generated function based on your requirements
  const result = input.map(item => ({{
    ...item,
    processed: true,
    timestamp: new Date().toISOString()
  }}));

  return result.filter(item => item.isValid);
}}"""


class ToolExecutionProvider(abc.ABC):
    """Produces a result for one run of a catalog tool."""

    @abc.abstractmethod
    def execute(self, tool: Tool, category_slug: str, inputs: Dict[str, Any]) -> ToolExecutionResult:
        raise NotImplementedError


class MockToolExecutionProvider(ToolExecutionProvider):
    """
    Returns canned results keyed on the tool's category slug.

    No real processing happens; the optional delay only simulates latency.
    """

    def __init__(self, delay_seconds: float = 0.0, rng: Optional[random.Random] = None):
        self.delay_seconds = delay_seconds
        self.rng = rng or random.Random()

    def execute(self, tool: Tool, category_slug: str, inputs: Dict[str, Any]) -> ToolExecutionResult:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)

        category = category_slug or ""
        if "pdf" in category:
            return PdfResult(
                message="PDF processed successfully",
                download_url="#",
                file_size="2.4 MB",
                pages=self.rng.randint(1, 10),
            )
        if "image" in category:
            return ImageResult(
                message="Image processed successfully",
                download_url="#",
                before=SAMPLE_IMAGE_URL,
                after=f"{SAMPLE_IMAGE_URL}&sat=2&con=1.2",
            )
        if "ai" in category or "text" in category:
            return TextResult(
                message="Text generated successfully",
                output=TEXT_OUTPUT_TEMPLATE.format(text=inputs.get("text") or "sample input"),
            )
        if "code" in category:
            language = inputs.get("language")
            return CodeResult(
                message="Code generated successfully",
                language=language or "javascript",
                code=CODE_TEMPLATE.format(label=language or "JavaScript"),
            )
        return GeneralResult(
            message="Tool executed successfully",
            status="completed",
            processing_time="1.2s",
        )


def get_tool_execution_provider() -> ToolExecutionProvider:
    return MockToolExecutionProvider(delay_seconds=settings.TOOL_EXECUTION_DELAY_SECONDS)


def execute_tool_for_request(
    db: Session,
    tool_id: int,
    inputs: Dict[str, Any],
    provider: ToolExecutionProvider,
    user_id: Optional[str] = None,
    session_id: Optional[str] = None,
) -> ToolExecutionResponse:
    """Run the tool, then count the run as a usage."""
    tool = crud_tool.get_tool(db, tool_id)
    if tool is None:
        raise NotFoundError("Tool", tool_id)

    category_slug = tool.category.slug if tool.category else ""
    result = provider.execute(tool, category_slug, inputs)
    logger.info(f"Executed tool {tool.slug} ({result.type}) for session {session_id}")

    usage = crud_tool_usage.record_tool_usage(
        db,
        tool_id=tool_id,
        user_id=user_id,
        session_id=session_id,
        metadata={"execution_type": result.type},
    )
    return ToolExecutionResponse(tool_id=tool_id, usage_id=usage.id, result=result)
