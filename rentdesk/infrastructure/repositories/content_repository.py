"""Persistence layer for static content blocks."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from rentdesk.domain.entities import Content
from rentdesk.infrastructure.models import ContentModel
from rentdesk.utils import ensure_app_timezone


class ContentRepository:
    """Provide lookups and upserts for :class:`Content` keyed by type."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_types(self) -> list[str]:
        rows = (
            self.session.query(ContentModel.type)
            .distinct()
            .order_by(ContentModel.type)
            .all()
        )
        return [content_type for (content_type,) in rows]

    def get_by_type(self, content_type: str) -> Content | None:
        model = self._get_model(content_type)
        return self._to_entity(model) if model else None

    def get_or_create_default(self, content_type: str, *, default_title: str) -> Content:
        """Return the block for ``content_type``, creating an empty one when missing."""

        model = self._get_model(content_type)
        if model is not None:
            return self._to_entity(model)

        model = ContentModel(type=content_type, title=default_title, content="")
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            # Another request created it first.
            self.session.rollback()
            model = self._get_model(content_type)
            if model is None:
                raise
            return self._to_entity(model)
        self.session.refresh(model)
        return self._to_entity(model)

    def upsert(self, content_type: str, *, title: str, content: str) -> Content:
        model = self._get_model(content_type)
        if model is None:
            model = ContentModel(type=content_type)
        model.title = title
        model.content = content
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, content_type: str) -> ContentModel | None:
        return (
            self.session.query(ContentModel)
            .filter(ContentModel.type == content_type)
            .first()
        )

    @staticmethod
    def _to_entity(model: ContentModel) -> Content:
        return Content(
            id=model.id,
            type=model.type,
            title=model.title,
            content=model.content or "",
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ContentRepository"]
