"""Use case for deleting promotions."""

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.infrastructure.repositories import PromotionRepository


def delete_promotion(session: Session, promotion_id: int) -> None:
    """Delete the promotion. Like updates, deletions are not broadcast."""

    if not PromotionRepository(session).delete(promotion_id):
        raise EntityNotFoundError("Promotion not found")
