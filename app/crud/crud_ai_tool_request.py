import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.models.ai_tool_request import AiToolRequest
from app.schemas import ai_tool_request as ai_tool_request_schema

TERMINAL_STATUSES = ("completed", "failed")


def create_ai_tool_request(
    db: Session,
    user_id: str,
    query: str,
    metadata: Optional[Dict[str, Any]] = None,
) -> AiToolRequest:
    db_request = AiToolRequest(user_id=user_id, query=query, status="pending", request_metadata=metadata)
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    return db_request


def get_ai_tool_request(db: Session, request_id: int) -> Optional[AiToolRequest]:
    return db.query(AiToolRequest).filter(AiToolRequest.id == request_id).first()


def update_ai_tool_request(
    db: Session,
    request_id: int,
    request: ai_tool_request_schema.AiToolRequestUpdate,
) -> Optional[AiToolRequest]:
    db_request = get_ai_tool_request(db, request_id)
    if db_request is None:
        return None

    changes = request.model_dump(exclude_unset=True)
    if "metadata" in changes:
        db_request.request_metadata = changes.pop("metadata")
    for field, value in changes.items():
        setattr(db_request, field, value)
    if db_request.status in TERMINAL_STATUSES and db_request.completed_at is None:
        db_request.completed_at = datetime.datetime.utcnow()

    db.commit()
    db.refresh(db_request)
    return db_request


def get_user_ai_tool_requests(db: Session, user_id: str) -> List[AiToolRequest]:
    return (
        db.query(AiToolRequest)
        .filter(AiToolRequest.user_id == user_id)
        .order_by(AiToolRequest.requested_at.desc(), AiToolRequest.id.desc())
        .all()
    )
