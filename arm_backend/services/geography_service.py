# arm_backend/services/geography_service.py
"""
Regions, cercles and communes of Mali.

Two shapes coexist: the older `regions` table with cercles embedded
as JSON (seeded at startup, written by POST /api/regions), and the
normalised regions_table / cercles / communes tables filled once by the
admin init-geography action and read by the cartography screen.
"""
import logging
import re
import uuid
from typing import Any, Dict, List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from arm_backend.core.exceptions import ConflictError, ValidationError
from arm_backend.models.geography import Cercle, Commune, LegacyRegion, Region
from arm_backend.models.member_profile import MemberProfile
from arm_backend.schemas.geography import LegacyRegionCreate

logger = logging.getLogger(__name__)

# region -> (code, {cercle code: (cercle name, [communes])})
MALI_GEOGRAPHY: Dict[str, Dict[str, Any]] = {
    "Kayes": {
        "code": "KAY",
        "cercles": {
            "KAY-KAY": ("Kayes", ["Kayes", "Kita", "Yelimane"]),
            "KAY-KEN": ("Kéniéba", ["Kéniéba", "Kemecounda"]),
            "KAY-KOU": ("Kouroussa", ["Kouroussa", "Siguiri"]),
        },
    },
    "Koulikoro": {
        "code": "KOU",
        "cercles": {
            "KOU-KOU": ("Koulikoro", ["Koulikoro", "Kangaba", "Bancoumana"]),
            "KOU-KAT": ("Kati", ["Kati", "Niono", "Kolokani"]),
            "KOU-DIO": ("Dioila", ["Dioila", "Ouélessébougou"]),
        },
    },
    "Bamako": {
        "code": "BAM",
        "cercles": {
            "BAM-BAM": ("Bamako", [f"District {n}" for n in range(1, 7)]),
        },
    },
    "Ségou": {
        "code": "SEG",
        "cercles": {
            "SEG-SEG": ("Ségou", ["Ségou", "Niono", "Markala", "Tominian"]),
            "SEG-NIO": ("Niono", ["Niono", "Toroto"]),
            "SEG-BAR": ("Barouéli", ["Barouéli", "San"]),
        },
    },
    "Sikasso": {
        "code": "SIK",
        "cercles": {
            "SIK-SIK": ("Sikasso", ["Sikasso", "Bougouni", "Kolokani"]),
            "SIK-BOU": ("Bougouni", ["Bougouni", "Yanfolila"]),
            "SIK-YOR": ("Yorosso", ["Yorosso", "Kadiolo"]),
        },
    },
    "Mopti": {
        "code": "MOP",
        "cercles": {
            "MOP-MOP": ("Mopti", ["Mopti", "Bandiagara", "Djenné"]),
            "MOP-DJE": ("Djenné", ["Djenné", "Koriziome"]),
            "MOP-TAL": ("Talo", ["Talo", "Goundaka"]),
        },
    },
    "Tombouctou": {
        "code": "TOM",
        "cercles": {
            "TOM-TOM": ("Tombouctou", ["Tombouctou", "Araouane", "Goundam"]),
            "TOM-GAO": ("Gao", ["Gao", "Bourem"]),
            "TOM-NIA": ("Niafunké", ["Niafunké"]),
        },
    },
    "Gao": {
        "code": "GAO",
        "cercles": {
            "GAO-GAO": ("Gao", ["Gao", "Bourem", "Haoussa-Foulani"]),
            "GAO-KID": ("Kidal", ["Kidal", "Araouane"]),
            "GAO-MEN": ("Ménaka", ["Ménaka", "Anderamboukane"]),
        },
    },
}


def commune_code(cercle_code: str, commune_name: str) -> str:
    """KOU-DIO + 'Dioila' -> 'KOU-DIO-DIOILA'"""
    slug = re.sub(r"\s+", "-", commune_name.strip()).upper()
    return f"{cercle_code}-{slug}"


class GeographyService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # --- Legacy JSON regions ---

    async def list_legacy_regions(self) -> List[LegacyRegion]:
        result = await self.db.execute(select(LegacyRegion).order_by(LegacyRegion.name))
        return list(result.scalars().all())

    async def create_legacy_region(self, data: LegacyRegionCreate) -> LegacyRegion:
        region = LegacyRegion(
            name=data.name,
            cercles=[c.model_dump() for c in data.cercles],
        )
        self.db.add(region)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(f"Region {data.name} already exists")
        logger.info(f"Region {data.name} created with {len(data.cercles)} cercle(s)")
        return region

    # --- Normalised geography ---

    async def list_regions(self) -> List[Region]:
        result = await self.db.execute(select(Region).order_by(Region.name))
        return list(result.scalars().all())

    async def list_cercles(self, region_id: uuid.UUID) -> List[Cercle]:
        result = await self.db.execute(
            select(Cercle).where(Cercle.region_id == region_id).order_by(Cercle.name)
        )
        return list(result.scalars().all())

    async def list_communes(self, cercle_id: uuid.UUID) -> List[Commune]:
        result = await self.db.execute(
            select(Commune).where(Commune.cercle_id == cercle_id).order_by(Commune.name)
        )
        return list(result.scalars().all())

    async def cartography(self) -> Dict[str, Any]:
        result = await self.db.execute(
            select(Region)
            .options(selectinload(Region.cercles).selectinload(Cercle.communes))
            .order_by(Region.name)
        )
        regions = list(result.scalars().all())
        total_members = await self.db.scalar(select(func.count()).select_from(MemberProfile))
        return {"regions": regions, "total_members": total_members or 0}

    async def init_geography(self) -> Dict[str, int]:
        """Insert the built-in Mali geography. Refuses to run twice."""
        existing = await self.db.scalar(select(func.count()).select_from(Region))
        if existing:
            logger.warning("Geography init requested but regions already exist")
            raise ValidationError("Geographic data already initialized")

        counts = {"regions": 0, "cercles": 0, "communes": 0}
        try:
            for region_name, region_data in MALI_GEOGRAPHY.items():
                region = Region(name=region_name, code=region_data["code"], member_count=0)
                self.db.add(region)
                counts["regions"] += 1

                for cercle_code, (cercle_name, communes) in region_data["cercles"].items():
                    cercle = Cercle(region=region, name=cercle_name, code=cercle_code)
                    self.db.add(cercle)
                    counts["cercles"] += 1

                    for commune_name in communes:
                        self.db.add(Commune(
                            cercle=cercle,
                            name=commune_name,
                            code=commune_code(cercle_code, commune_name),
                        ))
                        counts["communes"] += 1

            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("Failed to initialize geography")
            raise

        logger.info(
            f"Geography initialized: {counts['regions']} regions, "
            f"{counts['cercles']} cercles, {counts['communes']} communes"
        )
        return counts
