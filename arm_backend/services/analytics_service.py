# arm_backend/services/analytics_service.py
"""
Dashboard aggregates.

Tables are small, so every figure is computed in Python over a full
scan rather than with GROUP BY queries. Donation amounts are reported
in EUR, converted from the currency each donation was made in.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import ApplicationStatus, MessageStatus, PaymentStatus
from arm_backend.core.utils import count_by, ensure_utc
from arm_backend.models.content import Event, News
from arm_backend.models.donation import Donation
from arm_backend.models.member import Member
from arm_backend.models.message import ContactMessage
from arm_backend.services.currency import total_in_base_currency

RECENT_PER_SOURCE = 5
RECENT_ACTIVITY_LIMIT = 20

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class AnalyticsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _all(self, model) -> List[Any]:
        result = await self.db.execute(select(model))
        return list(result.scalars().all())

    async def overview(self) -> Dict[str, Any]:
        members = await self._all(Member)
        donations = await self._all(Donation)
        messages = await self._all(ContactMessage)
        events = await self._all(Event)
        news = await self._all(News)

        completed = [d for d in donations if d.status == PaymentStatus.COMPLETED.value]
        return {
            "member_count": len(members),
            "approved_members": sum(1 for m in members if m.status == ApplicationStatus.APPROVED.value),
            "pending_members": sum(1 for m in members if m.status == ApplicationStatus.PENDING.value),
            "total_donations": total_in_base_currency(completed),
            "message_count": len(messages),
            "unread_messages": sum(1 for m in messages if m.status == MessageStatus.UNREAD.value),
            "event_count": len(events),
            "news_count": len(news),
        }

    async def members(self) -> Dict[str, Any]:
        members = await self._all(Member)
        return {
            "by_region": count_by(members, lambda m: m.region),
            "by_status": count_by(members, lambda m: m.status),
            "total_members": len(members),
        }

    async def donations(self) -> Dict[str, Any]:
        donations = await self._all(Donation)
        completed = [d for d in donations if d.status == PaymentStatus.COMPLETED.value]
        total = total_in_base_currency(completed)
        return {
            "by_status": count_by(donations, lambda d: d.status),
            "by_payment_method": count_by(donations, lambda d: d.payment_method),
            "total_amount": total,
            "average_amount": total / Decimal(max(1, len(completed))),
        }

    async def admin_overview(self) -> Dict[str, Any]:
        members = await self._all(Member)
        donations = await self._all(Donation)
        messages = await self._all(ContactMessage)
        news = await self._all(News)
        events = await self._all(Event)

        completed = [d for d in donations if d.status == PaymentStatus.COMPLETED.value]
        return {
            "total_members": len(members),
            "total_donations": total_in_base_currency(completed),
            "total_messages": len(messages),
            "recent_activity": build_recent_activity(messages, news, events),
        }


def _newest(rows: List[Any], attr: str) -> List[Any]:
    return sorted(rows, key=lambda r: ensure_utc(getattr(r, attr)) or _EPOCH, reverse=True)[:RECENT_PER_SOURCE]


def build_recent_activity(messages: List[Any], news: List[Any], events: List[Any]) -> List[Dict[str, Any]]:
    """Last few messages, news and events merged into one newest-first feed."""
    activity = [
        {
            "type": "message",
            "title": m.subject,
            "description": f"From: {m.sender_name}",
            "timestamp": ensure_utc(m.created_at),
        }
        for m in _newest(messages, "created_at")
    ]
    activity += [
        {
            "type": "news",
            "title": n.title,
            "description": "News article published",
            "timestamp": ensure_utc(n.published_at),
        }
        for n in _newest(news, "published_at")
    ]
    activity += [
        {
            "type": "event",
            "title": e.title,
            "description": f"Scheduled for {ensure_utc(e.date).date().isoformat()}",
            "timestamp": ensure_utc(e.created_at),
        }
        for e in _newest(events, "created_at")
    ]

    activity.sort(key=lambda item: item["timestamp"] or _EPOCH, reverse=True)
    return activity[:RECENT_ACTIVITY_LIMIT]
