# arm_backend/cli/manage.py
"""
Maintenance commands.

    python -m arm_backend.cli.manage create-tables
    python -m arm_backend.cli.manage seed
    python -m arm_backend.cli.manage init-geography
"""
import asyncio
import logging

import click

from arm_backend import models  # noqa: F401
from arm_backend.core.exceptions import ValidationError
from arm_backend.core.logging_config import configure_logging
from arm_backend.database import Base, async_session, engine
from arm_backend.services.geography_service import GeographyService
from arm_backend.services.seed_service import seed_default_data

logger = logging.getLogger(__name__)


@click.group()
def cli():
    """A.R.M backend maintenance commands"""
    configure_logging()


@cli.command("create-tables")
def create_tables():
    """Create all database tables directly using SQLAlchemy"""
    async def _create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        await engine.dispose()

    asyncio.run(_create_tables())
    click.echo("All tables created successfully!")


@cli.command("seed")
def seed():
    """Insert default leadership, regions and program into empty tables"""
    async def _seed():
        async with async_session() as db:
            inserted = await seed_default_data(db)
        await engine.dispose()
        return inserted

    inserted = asyncio.run(_seed())
    for table, count in inserted.items():
        click.echo(f"{table}: {count} row(s) inserted")


@cli.command("init-geography")
def init_geography():
    """Load the built-in regions, cercles and communes of Mali"""
    async def _init():
        try:
            async with async_session() as db:
                return await GeographyService(db).init_geography()
        finally:
            await engine.dispose()

    try:
        counts = asyncio.run(_init())
    except ValidationError as e:
        raise click.ClickException(e.message)

    click.echo(
        f"Created {counts['regions']} regions, {counts['cercles']} cercles, {counts['communes']} communes"
    )


if __name__ == "__main__":
    cli()
