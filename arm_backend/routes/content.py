# arm_backend/routes/content.py
"""
Leadership, political program, news and events.

Every area gets the same set of endpoints:
- GET    /api/<area>               public list
- POST   /api/<area>               signed-in user
- PUT    /api/<area>/{id}          signed-in user
- DELETE /api/<area>/{id}          signed-in user, returns the deleted row
- POST   /api/admin/<area>         admin, records created_by
- PUT    /api/admin/<area>/{id}    admin
- DELETE /api/admin/<area>/{id}    admin, returns {"success": true}
"""
import uuid
from typing import List, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.security import AdminIdentity, require_admin, require_session
from arm_backend.dependencies import get_db
from arm_backend.schemas.base import SuccessResponse
from arm_backend.schemas.content import (
    EventCreate,
    EventRead,
    EventUpdate,
    LeadershipCreate,
    LeadershipRead,
    LeadershipUpdate,
    NewsCreate,
    NewsRead,
    NewsUpdate,
    ProgramCreate,
    ProgramRead,
    ProgramUpdate,
)
from arm_backend.services.content_service import (
    ContentService,
    EventService,
    LeadershipService,
    NewsService,
    ProgramService,
)

router = APIRouter(prefix="/api", tags=["content"])


def register_content_routes(
    router: APIRouter,
    area: str,
    service_class: Type[ContentService],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    session_writes: bool = True,
) -> None:
    """Attach the CRUD endpoints for one content area to the router."""

    @router.get(f"/{area}", response_model=List[read_schema], name=f"list_{area}")
    async def list_items(db: AsyncSession = Depends(get_db)):
        return await service_class(db).list()

    if session_writes:
        @router.post(f"/{area}", response_model=read_schema, name=f"create_{area}",
                     dependencies=[Depends(require_session)])
        async def create_item(data: create_schema, db: AsyncSession = Depends(get_db)):
            return await service_class(db).create(data)

        @router.put(f"/{area}/{{item_id}}", response_model=read_schema, name=f"update_{area}",
                    dependencies=[Depends(require_session)])
        async def update_item(item_id: uuid.UUID, data: update_schema, db: AsyncSession = Depends(get_db)):
            return await service_class(db).update(item_id, data)

        @router.delete(f"/{area}/{{item_id}}", response_model=read_schema, name=f"delete_{area}",
                       dependencies=[Depends(require_session)])
        async def delete_item(item_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
            return await service_class(db).delete(item_id)

    @router.post(f"/admin/{area}", response_model=read_schema, name=f"admin_create_{area}")
    async def admin_create_item(
        data: create_schema,
        admin: AdminIdentity = Depends(require_admin),
        db: AsyncSession = Depends(get_db),
    ):
        return await service_class(db).create(data, created_by=admin.username)

    @router.put(f"/admin/{area}/{{item_id}}", response_model=read_schema, name=f"admin_update_{area}",
                dependencies=[Depends(require_admin)])
    async def admin_update_item(item_id: uuid.UUID, data: update_schema, db: AsyncSession = Depends(get_db)):
        return await service_class(db).update(item_id, data)

    @router.delete(f"/admin/{area}/{{item_id}}", response_model=SuccessResponse, name=f"admin_delete_{area}",
                   dependencies=[Depends(require_admin)])
    async def admin_delete_item(item_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
        await service_class(db).delete(item_id)
        return SuccessResponse()


register_content_routes(router, "leadership", LeadershipService, LeadershipCreate, LeadershipUpdate, LeadershipRead)
register_content_routes(router, "program", ProgramService, ProgramCreate, ProgramUpdate, ProgramRead)
register_content_routes(router, "news", NewsService, NewsCreate, NewsUpdate, NewsRead)
register_content_routes(router, "events", EventService, EventCreate, EventUpdate, EventRead)
