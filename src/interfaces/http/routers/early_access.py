from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from src.application.interfaces.text_generation import StoryWriter
from src.application.interfaces.unit_of_work import UnitOfWorkFactory
from src.application.use_cases.early_access import count_requests, submit_request
from src.application.use_cases.early_access.record_request import RecordStatus
from src.interfaces.http.deps import get_story_writer, get_uow_factory
from src.interfaces.http.schemas.early_access import (
    EarlyAccessPayload,
    EarlyAccessResponse,
    WaitlistCountResponse,
)

router = APIRouter(prefix="/early-access", tags=["early-access"])

_STATUS_CODES = {
    RecordStatus.RECORDED: status.HTTP_201_CREATED,
    RecordStatus.DUPLICATE: status.HTTP_409_CONFLICT,
    RecordStatus.NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    RecordStatus.POLICY_DENIED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    RecordStatus.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "/",
    response_model=EarlyAccessResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def request_early_access(
    payload: EarlyAccessPayload,
    response: Response,
    uow_factory: UnitOfWorkFactory | None = Depends(get_uow_factory),
    writer: StoryWriter | None = Depends(get_story_writer),
) -> EarlyAccessResponse:
    result = await submit_request.execute(uow_factory, writer, payload.model_dump())
    response.status_code = _STATUS_CODES[result.status]
    return EarlyAccessResponse(
        success=result.success,
        message=result.message,
        blurb=result.blurb,
        error=result.error,
    )


@router.get("/count", response_model=WaitlistCountResponse)
async def waitlist_count(
    uow_factory: UnitOfWorkFactory | None = Depends(get_uow_factory),
) -> WaitlistCountResponse:
    count = await count_requests.execute(uow_factory)
    return WaitlistCountResponse(count=count)
