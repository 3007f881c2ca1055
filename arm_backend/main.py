# arm_backend/main.py

import logging
import subprocess
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from arm_backend import models  # noqa: F401  registers every table on Base.metadata
from arm_backend.core.config import get_settings
from arm_backend.core.exceptions import register_exception_handlers
from arm_backend.core.logging_config import configure_logging
from arm_backend.database import async_session
from arm_backend.routes import (
    ai,
    analytics,
    auth,
    chat,
    conferences,
    content,
    donations,
    elections,
    geography,
    health,
    media,
    members,
    membership,
    messages,
)
from arm_backend.services.seed_service import seed_default_data

configure_logging()
logger = logging.getLogger(__name__)

settings = get_settings()


def run_migrations() -> None:
    logger.info("Running database migrations...")
    result = subprocess.run(["alembic", "upgrade", "head"], capture_output=True, text=True)
    if result.returncode == 0:
        logger.info("Migrations completed successfully")
    else:
        logger.error(f"Migration failed: {result.stderr}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS:
        run_migrations()

    if settings.SEED_DEFAULT_DATA:
        try:
            async with async_session() as db:
                await seed_default_data(db)
        except Exception:
            # The API still serves without default content
            logger.exception("Default data could not be seeded")

    logger.info(f"A.R.M backend started ({settings.ENVIRONMENT})")
    yield
    logger.info("A.R.M backend shutting down")


app = FastAPI(
    title="A.R.M Party Platform API",
    lifespan=lifespan
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Add middleware to handle HTTPS behind proxy
@app.middleware("http")
async def proxy_headers_middleware(request: Request, call_next):
    forwarded_proto = request.headers.get("x-forwarded-proto")
    if forwarded_proto == "https":
        request.scope["scheme"] = "https"
    response = await call_next(request)
    return response


# Uploaded media
media_dir = Path(settings.MEDIA_UPLOAD_DIR).expanduser()
media_dir.mkdir(parents=True, exist_ok=True)
app.mount(settings.MEDIA_URL_PATH, StaticFiles(directory=str(media_dir)), name="media")

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(membership.router)
app.include_router(members.router)
app.include_router(content.router)
app.include_router(donations.router)
app.include_router(messages.router)
app.include_router(chat.router)
app.include_router(geography.router)
app.include_router(media.router)
app.include_router(conferences.router)
app.include_router(elections.router)
app.include_router(analytics.router)
app.include_router(ai.router)
