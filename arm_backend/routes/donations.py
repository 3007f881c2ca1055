# arm_backend/routes/donations.py
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.security import require_session
from arm_backend.dependencies import get_db
from arm_backend.schemas.donation import ConversionResult, CurrencyInfo, DonationCreate, DonationRead, DonationStats
from arm_backend.services import currency as currency_tables
from arm_backend.services.donation_service import DonationService

router = APIRouter(prefix="/api", tags=["donations"])


@router.post("/donations", response_model=DonationRead)
async def create_donation(data: DonationCreate, db: AsyncSession = Depends(get_db)):
    return await DonationService(db).create(data)


@router.get("/donations", response_model=List[DonationRead], dependencies=[Depends(require_session)])
async def list_donations(db: AsyncSession = Depends(get_db)):
    return await DonationService(db).list()


@router.get("/donations/stats", response_model=DonationStats)
async def donation_stats(currency: str = "EUR", db: AsyncSession = Depends(get_db)):
    return await DonationService(db).stats(currency_tables.parse_currency(currency))


@router.get("/currencies", response_model=List[CurrencyInfo])
async def list_currencies(lang: str = "en"):
    return currency_tables.list_currencies(lang)


@router.get("/currencies/convert", response_model=ConversionResult)
async def convert_currency(
    amount: Decimal = Query(..., ge=0),
    from_currency: str = Query("EUR", alias="from"),
    to_currency: str = Query("XOF", alias="to"),
):
    source = currency_tables.parse_currency(from_currency)
    target = currency_tables.parse_currency(to_currency)
    converted = currency_tables.convert(amount, source.value, target.value)
    return {
        "amount": amount,
        "from": source,
        "to": target,
        "converted_amount": converted,
        "formatted": currency_tables.format_amount(converted, target.value),
    }
