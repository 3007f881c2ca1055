# arm_backend/routes/elections.py
import uuid
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import ElectionResultStatus
from arm_backend.core.security import AdminIdentity, require_admin, require_session
from arm_backend.dependencies import get_db
from arm_backend.models.user import UserSession
from arm_backend.schemas.election import (
    ElectionResultRead,
    ElectionResultSubmit,
    ElectionSubmitResponse,
    ElectionVerifyRequest,
)
from arm_backend.services.election_service import ElectionService

router = APIRouter(prefix="/api", tags=["elections"])


@router.post("/elections/submit-results", response_model=ElectionSubmitResponse)
async def submit_results(
    data: ElectionResultSubmit,
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    result = await ElectionService(db).submit(str(user_session.user_id), data)
    return ElectionSubmitResponse(
        result_id=result.id,
        status=ElectionResultStatus.PENDING,
        message="Results submitted and awaiting verification",
    )


@router.get("/elections/my-submissions", response_model=List[ElectionResultRead])
async def my_submissions(
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    return await ElectionService(db).my_submissions(str(user_session.user_id))


@router.get("/elections/results/{result_id}", response_model=ElectionResultRead,
            dependencies=[Depends(require_session)])
async def get_result(result_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await ElectionService(db).get(result_id)


@router.get("/admin/elections/pending", response_model=List[ElectionResultRead],
            dependencies=[Depends(require_admin)])
async def pending_results(db: AsyncSession = Depends(get_db)):
    return await ElectionService(db).pending()


@router.put("/admin/elections/{result_id}/verify", response_model=ElectionResultRead)
async def verify_result(
    result_id: uuid.UUID,
    data: ElectionVerifyRequest,
    admin: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await ElectionService(db).verify(result_id, data.status, verified_by=admin.username, notes=data.notes)
