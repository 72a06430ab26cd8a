import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth import AuthContext
from app.core.dependencies import get_auth_context, get_db
from app.core.exceptions import NotFoundError
from app.crud import crud_tool, crud_tool_usage
from app.schemas import tool as schemas_tool
from app.schemas import tool_execution as schemas_tool_execution
from app.schemas import tool_usage as schemas_tool_usage
from app.services import tool_execution_service

logger = logging.getLogger(__name__)

router = APIRouter()

ToolListType = Literal["free", "premium", "popular", "recent"]


@router.get("", response_model=List[schemas_tool.Tool])
def list_tools(
    category: Optional[int] = None,
    limit: int = Query(50, ge=0),
    offset: int = Query(0, ge=0),
    list_type: Optional[ToolListType] = Query(None, alias="type"),
    db: Session = Depends(get_db),
):
    try:
        if list_type == "free":
            return crud_tool.get_free_tools(db)
        if list_type == "premium":
            return crud_tool.get_premium_tools(db)
        if list_type == "popular":
            return crud_tool.get_popular_tools(db, limit=limit)
        if list_type == "recent":
            return crud_tool.get_recent_tools(db, limit=limit)
        return crud_tool.get_tools(db, category_id=category, limit=limit, offset=offset)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching tools: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch tools")


# Must stay above "/{slug}" so "search" is not read as a slug
@router.get("/search", response_model=List[schemas_tool.Tool])
def search_tools(q: Optional[str] = None, db: Session = Depends(get_db)):
    if not q:
        raise HTTPException(status_code=400, detail="Query parameter 'q' is required")
    try:
        return crud_tool.search_tools(db, q)
    except SQLAlchemyError as e:
        logger.error(f"Error searching tools for '{q}': {e}")
        raise HTTPException(status_code=500, detail="Failed to search tools")


@router.get("/{slug}", response_model=schemas_tool.Tool)
def get_tool(slug: str, db: Session = Depends(get_db)):
    try:
        tool = crud_tool.get_tool_by_slug(db, slug)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching tool {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch tool")
    if tool is None:
        raise HTTPException(status_code=404, detail="Tool not found")
    return tool


@router.post("/{tool_id}/use", response_model=schemas_tool_usage.ToolUsage)
def record_tool_usage(
    tool_id: int,
    usage: Optional[schemas_tool_usage.ToolUsageCreate] = None,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
):
    """Count one use of a tool. Identity is optional; anonymous uses keep the session id."""
    try:
        return crud_tool_usage.record_tool_usage(
            db,
            tool_id=tool_id,
            user_id=context.user_id,
            session_id=context.session_id,
            metadata=usage.metadata if usage else None,
        )
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Tool not found")
    except SQLAlchemyError as e:
        logger.error(f"Error recording tool usage: {e}")
        raise HTTPException(status_code=500, detail="Failed to record tool usage")


@router.post("/{tool_id}/execute", response_model=schemas_tool_execution.ToolExecutionResponse)
def execute_tool(
    tool_id: int,
    execution: Optional[schemas_tool_execution.ToolExecutionRequest] = None,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
    provider: tool_execution_service.ToolExecutionProvider = Depends(tool_execution_service.get_tool_execution_provider),
):
    try:
        return tool_execution_service.execute_tool_for_request(
            db,
            tool_id=tool_id,
            inputs=execution.inputs if execution else {},
            provider=provider,
            user_id=context.user_id,
            session_id=context.session_id,
        )
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Tool not found")
    except SQLAlchemyError as e:
        logger.error(f"Error executing tool {tool_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to execute tool")


@router.get("/{tool_id}/stats", response_model=schemas_tool.ToolUsageStats)
def get_tool_stats(tool_id: int, db: Session = Depends(get_db)):
    try:
        if crud_tool.get_tool(db, tool_id) is None:
            raise HTTPException(status_code=404, detail="Tool not found")
        return crud_tool_usage.get_tool_usage_stats(db, tool_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching stats for tool {tool_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch tool stats")
