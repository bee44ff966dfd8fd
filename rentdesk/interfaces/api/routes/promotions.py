"""Routes for the promotion catalog."""

from __future__ import annotations

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.application.use_cases.promotions import (
    active_promotions as active_promotions_uc,
    create_promotion as create_promotion_uc,
    delete_promotion as delete_promotion_uc,
    list_all_promotions as list_all_promotions_uc,
    update_promotion as update_promotion_uc,
)
from rentdesk.domain.entities import Promotion, User
from rentdesk.infrastructure.database import get_db
from rentdesk.interfaces.api.dependencies import get_notifier, require_capability
from rentdesk.interfaces.api.schemas import PromotionCreate, PromotionRead, PromotionUpdate

router = APIRouter(prefix="/promotions", tags=["promotions"])


def _promotion_to_read_model(promotion: Promotion) -> PromotionRead:
    return PromotionRead.model_validate(promotion)


def _raise_for_error(exc: ValueError) -> NoReturn:
    if isinstance(exc, EntityNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/", response_model=list[PromotionRead])
def list_promotions(db: Session = Depends(get_db)) -> list[PromotionRead]:
    """Return the promotions in effect right now."""

    return [_promotion_to_read_model(p) for p in active_promotions_uc(db)]


@router.get("/admin", response_model=list[PromotionRead])
def list_promotions_admin(
    db: Session = Depends(get_db),
    _: User = Depends(require_capability("promotions:admin")),
) -> list[PromotionRead]:
    """Return every promotion, including inactive and expired ones."""

    return [_promotion_to_read_model(p) for p in list_all_promotions_uc(db)]


@router.post("/", response_model=PromotionRead, status_code=status.HTTP_201_CREATED)
def create_promotion(
    promotion_in: PromotionCreate,
    db: Session = Depends(get_db),
    notifier: OperationalNotifier = Depends(get_notifier),
    _: User = Depends(require_capability("promotions:admin")),
) -> PromotionRead:
    """Create a promotion and announce it to admins and employees."""

    try:
        promotion = create_promotion_uc(db, notifier, **promotion_in.model_dump())
    except ValueError as exc:
        _raise_for_error(exc)
    return _promotion_to_read_model(promotion)


@router.put("/{promotion_id}", response_model=PromotionRead)
def update_promotion(
    promotion_id: int,
    promotion_in: PromotionUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_capability("promotions:admin")),
) -> PromotionRead:
    """Update a promotion. No notification is sent."""

    try:
        promotion = update_promotion_uc(
            db, promotion_id, **promotion_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        _raise_for_error(exc)
    return _promotion_to_read_model(promotion)


@router.delete("/{promotion_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_promotion(
    promotion_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_capability("promotions:admin")),
) -> Response:
    """Delete a promotion. No notification is sent."""

    try:
        delete_promotion_uc(db, promotion_id)
    except ValueError as exc:
        _raise_for_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
