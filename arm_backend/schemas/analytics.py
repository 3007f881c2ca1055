"""
Schemas for the analytics dashboards.
"""
from typing import Dict, List, Optional

from pydantic import Field

from .base import BaseSchema, Money, UtcDatetime


class AnalyticsOverview(BaseSchema):
    member_count: int
    approved_members: int
    pending_members: int
    total_donations: Money
    message_count: int
    unread_messages: int
    event_count: int
    news_count: int


class MemberAnalytics(BaseSchema):
    by_region: Dict[str, int]
    by_status: Dict[str, int]
    total_members: int


class DonationAnalytics(BaseSchema):
    by_status: Dict[str, int]
    by_payment_method: Dict[str, int]
    total_amount: Money
    average_amount: Money


class ActivityItem(BaseSchema):
    type: str
    title: str
    description: str
    timestamp: Optional[UtcDatetime] = None


class AdminAnalytics(BaseSchema):
    total_members: int
    total_donations: Money
    total_messages: int
    recent_activity: List[ActivityItem]


class AIChatRequest(BaseSchema):
    message: str = Field(min_length=1)
    context: Optional[str] = None
