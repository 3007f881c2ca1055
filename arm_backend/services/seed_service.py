# arm_backend/services/seed_service.py
"""
Default content inserted into empty tables on first start.

Each table is seeded independently and only when it has no rows, so
running this again (startup, CLI) never duplicates anything.
"""
import logging
from typing import Dict

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.models.content import Leadership, ProgramItem
from arm_backend.models.geography import LegacyRegion

logger = logging.getLogger(__name__)

DEFAULT_LEADERSHIP = [
    {
        "name": "Lassine Diakité",
        "position": "Président",
        "phone": "0034632607101",
        "address": "Avenida Castilla la Mancha 122 Yuncos Toledo Espagne",
        "location": "Spain",
        "order": 1,
    },
    {"name": "Dadou Sangare", "position": "Premier Vice-Président", "location": "Milan, Italie", "order": 2},
    {
        "name": "Oumar Keita",
        "position": "Deuxième Vice-Président",
        "phone": "0022376304869",
        "address": "Koutiala Mali",
        "location": "Koutiala, Mali",
        "order": 3,
    },
    {"name": "Karifa Keita", "position": "Secrétaire Général", "location": "Bamako, Mali", "order": 4},
    {
        "name": "Modibo Keita",
        "position": "Secrétaire Administratif",
        "address": "Bamako Sebenikoro",
        "location": "Bamako, Mali",
        "order": 5,
    },
    {
        "name": "Sokona Keita",
        "position": "Trésorière",
        "phone": "0022375179920",
        "address": "Bamako Sebenikoro",
        "location": "Bamako, Mali",
        "order": 6,
    },
]

DEFAULT_REGIONS = {
    "Kayes": {"Kayes": ["Kayes", "Kita"], "Kéniéba": ["Kéniéba"]},
    "Koulikoro": {"Koulikoro": ["Koulikoro", "Kangaba"], "Kati": ["Kati", "Niono"]},
    "Bamako": {"Bamako": ["Sebenikoro", "ACI 2000", "Kalabamako"]},
    "Segou": {"Segou": ["Segou", "Samoguelam"], "Markala": ["Markala"]},
    "Sikasso": {"Sikasso": ["Sikasso", "Kolokani"], "Bougouni": ["Bougouni"]},
    "Mopti": {"Mopti": ["Mopti", "Bandiagara"], "Djenne": ["Djenne"]},
    "Timbuktu": {"Timbuktu": ["Timbuktu", "Araouane"], "Gao": ["Gao"]},
    "Gao": {"Gao": ["Gao", "Bourem"], "Kidal": ["Kidal"]},
}

DEFAULT_PROGRAM = [
    {
        "category": "Éducation",
        "title": "Accès à l'éducation de qualité",
        "description": "Assurer un accès équitable à une éducation de qualité pour tous les enfants maliens",
        "order": 1,
    },
    {
        "category": "Santé",
        "title": "Système de santé universel",
        "description": "Établir un système de santé accessible et de qualité pour tous",
        "order": 1,
    },
    {
        "category": "Économie",
        "title": "Développement économique durable",
        "description": "Créer des opportunités économiques et promouvoir une croissance durable",
        "order": 1,
    },
    {
        "category": "Économie",
        "title": "Soutien aux petites entreprises",
        "description": "Fournir des ressources et des formations aux entrepreneurs locaux",
        "order": 2,
    },
    {
        "category": "Sécurité",
        "title": "Renforcement de la sécurité",
        "description": "Améliorer la sécurité publique et l'état de droit",
        "order": 1,
    },
    {
        "category": "Agriculture",
        "title": "Modernisation agricole",
        "description": "Promouvoir l'agriculture moderne et durable pour les petits paysans",
        "order": 1,
    },
    {
        "category": "Infrastructure",
        "title": "Développement des routes et eau potable",
        "description": "Investir dans les routes rurales et l'accès à l'eau potable",
        "order": 1,
    },
]


async def _is_empty(db: AsyncSession, model) -> bool:
    count = await db.scalar(select(func.count()).select_from(model))
    return not count


async def seed_default_data(db: AsyncSession) -> Dict[str, int]:
    """Returns how many rows were inserted per table."""
    inserted = {"leadership": 0, "regions": 0, "political_program": 0}

    try:
        if await _is_empty(db, Leadership):
            db.add_all(Leadership(**leader) for leader in DEFAULT_LEADERSHIP)
            inserted["leadership"] = len(DEFAULT_LEADERSHIP)

        if await _is_empty(db, LegacyRegion):
            db.add_all(
                LegacyRegion(
                    name=region,
                    cercles=[{"name": cercle, "communes": communes} for cercle, communes in cercles.items()],
                )
                for region, cercles in DEFAULT_REGIONS.items()
            )
            inserted["regions"] = len(DEFAULT_REGIONS)

        if await _is_empty(db, ProgramItem):
            db.add_all(ProgramItem(**item) for item in DEFAULT_PROGRAM)
            inserted["political_program"] = len(DEFAULT_PROGRAM)

        await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Seeding default data failed")
        raise

    if any(inserted.values()):
        logger.info(f"Seeded default data: {inserted}")
    else:
        logger.info("Default data already present, nothing seeded")
    return inserted
