# arm_backend/routes/analytics.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.security import require_admin, require_session
from arm_backend.dependencies import get_db
from arm_backend.schemas.analytics import AdminAnalytics, AnalyticsOverview, DonationAnalytics, MemberAnalytics
from arm_backend.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/analytics/overview", response_model=AnalyticsOverview, dependencies=[Depends(require_session)])
async def overview(db: AsyncSession = Depends(get_db)):
    return await AnalyticsService(db).overview()


@router.get("/analytics/members", response_model=MemberAnalytics, dependencies=[Depends(require_session)])
async def member_analytics(db: AsyncSession = Depends(get_db)):
    return await AnalyticsService(db).members()


@router.get("/analytics/donations", response_model=DonationAnalytics, dependencies=[Depends(require_session)])
async def donation_analytics(db: AsyncSession = Depends(get_db)):
    return await AnalyticsService(db).donations()


@router.get("/admin/analytics", response_model=AdminAnalytics, dependencies=[Depends(require_admin)])
async def admin_analytics(db: AsyncSession = Depends(get_db)):
    return await AnalyticsService(db).admin_overview()
