"""Routes for editable static content."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from rentdesk.application.use_cases.content import (
    get_content as get_content_uc,
    list_content_types as list_content_types_uc,
    update_content as update_content_uc,
)
from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import Content, User
from rentdesk.infrastructure.database import get_db
from rentdesk.interfaces.api.dependencies import get_notifier, require_capability
from rentdesk.interfaces.api.schemas import ContentRead, ContentUpdate

router = APIRouter(prefix="/content", tags=["content"])


def _content_to_read_model(content: Content) -> ContentRead:
    return ContentRead.model_validate(content)


@router.get("/", response_model=list[str])
def list_content_types(db: Session = Depends(get_db)) -> list[str]:
    """Return the content types that have been stored so far."""

    return list_content_types_uc(db)


@router.get("/{content_type}", response_model=ContentRead)
def read_content(content_type: str, db: Session = Depends(get_db)) -> ContentRead:
    """Return a content block, creating an empty default the first time it is read."""

    try:
        content = get_content_uc(db, content_type)
    except EntityNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _content_to_read_model(content)


@router.put("/{content_type}", response_model=ContentRead)
def update_content(
    content_type: str,
    content_in: ContentUpdate,
    db: Session = Depends(get_db),
    notifier: OperationalNotifier = Depends(get_notifier),
    current_user: User = Depends(require_capability("content:write")),
) -> ContentRead:
    """Create or replace a content block."""

    try:
        content = update_content_uc(
            db,
            notifier,
            content_type,
            actor=current_user,
            title=content_in.title,
            content=content_in.content,
        )
    except EntityNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _content_to_read_model(content)


__all__ = ["router"]
