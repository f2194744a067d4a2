from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from src.application.errors import ValidationError
from src.application.interfaces.text_generation import StoryWriter
from src.application.interfaces.unit_of_work import UnitOfWorkFactory
from src.application.use_cases.early_access import generate_blurb, record_request
from src.application.use_cases.early_access.record_request import RecordStatus
from src.application.use_cases.early_access.validate_request import validate_access_request

FAILURE_MESSAGE = "Failed to submit request."


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    success: bool
    message: str
    status: RecordStatus
    blurb: str | None = None
    error: str | None = None


async def execute(
    uow_factory: UnitOfWorkFactory | None,
    writer: StoryWriter | None,
    candidate: Mapping[str, Any],
) -> SubmissionResult:
    validation = validate_access_request(candidate)
    if not validation.ok:
        raise ValidationError(
            "Invalid input.",
            details={"fields": [asdict(v) for v in validation.errors]},
        )
    record = validation.record

    # Insert first; generation is best-effort and never undoes the insert.
    outcome = await record_request.execute(uow_factory, record)
    if not outcome.ok:
        return SubmissionResult(
            success=False,
            message=FAILURE_MESSAGE,
            status=outcome.status,
            error=outcome.message,
        )

    blurb = await generate_blurb.execute(writer, record.name, record.preferences)
    return SubmissionResult(
        success=True,
        message=(
            f"Thank you, {record.name}! We've received your request "
            "and will be in touch soon."
        ),
        status=outcome.status,
        blurb=blurb,
    )
