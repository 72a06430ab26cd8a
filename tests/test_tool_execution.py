import random
from unittest.mock import Mock

import pytest

from app.models.tool import Tool
from app.models.tool_usage import ToolUsage
from app.services.tool_execution_service import MockToolExecutionProvider


@pytest.fixture
def provider():
    return MockToolExecutionProvider(rng=random.Random(7))


@pytest.fixture
def tool():
    return Mock(spec=Tool)


def test_pdf_category(provider, tool):
    result = provider.execute(tool, "pdf-tools", {})

    assert result.type == "pdf"
    assert result.message == "PDF processed successfully"
    assert result.file_size == "2.4 MB"
    assert 1 <= result.pages <= 10


def test_image_category(provider, tool):
    result = provider.execute(tool, "image-tools", {})

    assert result.type == "image"
    assert result.after == f"{result.before}&sat=2&con=1.2"


def test_text_category_echoes_input(provider, tool):
    assert 'input: "hello world"' in provider.execute(tool, "ai-writing", {"text": "hello world"}).output
    assert 'input: "sample input"' in provider.execute(tool, "text-tools", {}).output


def test_code_category_defaults_to_javascript(provider, tool):
    default = provider.execute(tool, "code-tools", {})
    python = provider.execute(tool, "code-tools", {"language": "python"})

    assert default.language == "javascript"
    assert default.code.startswith("// Generated JavaScript code")
    assert python.language == "python"
    assert "function processData(input)" in python.code


def test_pdf_wins_over_later_matches(provider, tool):
    assert provider.execute(tool, "pdf-ai-code", {}).type == "pdf"


def test_unknown_category_is_general(provider, tool):
    result = provider.execute(tool, "misc", {})

    assert result.type == "general"
    assert result.status == "completed"
    assert result.processing_time == "1.2s"


def test_execute_endpoint_records_usage(client, make_category, make_tool, db_session):
    category = make_category("ai-writing")
    tool = make_tool("text-summarizer", category_id=category.id)

    response = client.post(f"/api/tools/{tool.id}/execute", json={"inputs": {"text": "quarterly report"}})

    assert response.status_code == 200
    body = response.json()
    assert body["tool_id"] == tool.id
    assert body["result"]["type"] == "text"
    assert "quarterly report" in body["result"]["output"]

    usage = db_session.query(ToolUsage).filter(ToolUsage.id == body["usage_id"]).one()
    assert usage.usage_metadata == {"execution_type": "text"}
    db_session.refresh(tool)
    assert tool.usage_count == 1


def test_execute_unknown_tool_is_404(client):
    assert client.post("/api/tools/31/execute", json={"inputs": {}}).status_code == 404
