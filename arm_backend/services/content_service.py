# arm_backend/services/content_service.py
"""
CRUD for the public content areas (leadership, program, news, events).

All four behave the same way, so one service parameterised by model
handles them; only list ordering and filtering differ.
"""
import logging
import uuid
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.exceptions import NotFoundError, ValidationError
from arm_backend.core.utils import utcnow
from arm_backend.database import Base
from arm_backend.models.content import Event, Leadership, News, ProgramItem

logger = logging.getLogger(__name__)


def _column_values(data: BaseModel, **dump_options) -> Dict[str, Any]:
    """Schema fields as column values; enums are stored by value."""
    return {
        key: (value.value if isinstance(value, Enum) else value)
        for key, value in data.model_dump(**dump_options).items()
    }


class ContentService:
    model: Type[Base] = None
    label: str = "Item"

    def __init__(self, db: AsyncSession):
        self.db = db

    def list_query(self):
        return select(self.model)

    async def list(self) -> List[Any]:
        result = await self.db.execute(self.list_query())
        return list(result.scalars().all())

    async def get(self, item_id: uuid.UUID) -> Any:
        item = await self.db.get(self.model, item_id)
        if not item:
            raise NotFoundError(f"{self.label} not found")
        return item

    async def create(self, data: BaseModel, created_by: Optional[str] = None) -> Any:
        values = _column_values(data)
        if created_by:
            values["created_by"] = created_by
        item = self.model(**values)
        self.db.add(item)
        await self.db.commit()
        logger.info(f"{self.label} {item.id} created by {created_by or 'session user'}")
        return item

    async def update(self, item_id: uuid.UUID, data: BaseModel) -> Any:
        item = await self.get(item_id)
        changes = _column_values(data, exclude_unset=True)
        for key, value in changes.items():
            setattr(item, key, value)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"{self.label} {item_id} update rejected: {e.orig}")
            raise ValidationError(f"Invalid {self.label.lower()} update")
        logger.info(f"{self.label} {item_id} updated: {sorted(changes)}")
        return item

    async def delete(self, item_id: uuid.UUID) -> Any:
        item = await self.get(item_id)
        await self.db.delete(item)
        await self.db.commit()
        logger.info(f"{self.label} {item_id} deleted")
        return item


class LeadershipService(ContentService):
    model = Leadership
    label = "Leader"

    def list_query(self):
        return select(Leadership).order_by(Leadership.order)


class ProgramService(ContentService):
    model = ProgramItem
    label = "Program item"

    def list_query(self):
        return select(ProgramItem).order_by(ProgramItem.category, ProgramItem.order)


class NewsService(ContentService):
    model = News
    label = "News"

    def list_query(self):
        return select(News).order_by(News.published_at)


class EventService(ContentService):
    model = Event
    label = "Event"

    def list_query(self):
        # Upcoming only
        return select(Event).where(Event.date > utcnow()).order_by(Event.date)
