from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from src.application.errors import AppError, DuplicateAccessRequest, StorePolicyError
from src.application.interfaces.unit_of_work import UnitOfWorkFactory
from src.application.use_cases.early_access.validate_request import AccessRequestInput
from src.domain.models.access_request import AccessRequest

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = (
    "Database client could not be initialized. Please check server credentials."
)
POLICY_DENIED_MESSAGE = (
    "The database refused the request. Check that the insert policy on "
    "early_access_requests allows new signups."
)
DUPLICATE_MESSAGE = "This email has already requested early access."


class RecordStatus(str, Enum):
    RECORDED = "recorded"
    NOT_CONFIGURED = "not_configured"
    POLICY_DENIED = "policy_denied"
    DUPLICATE = "duplicate"
    STORE_ERROR = "store_error"


@dataclass(frozen=True, slots=True)
class RecordOutcome:
    status: RecordStatus
    message: str
    request: AccessRequest | None = None

    @property
    def ok(self) -> bool:
        return self.status is RecordStatus.RECORDED


def store_error_message(detail: str) -> str:
    return f"Database error: {detail}"


async def execute(uow_factory: UnitOfWorkFactory | None, record: AccessRequestInput) -> RecordOutcome:
    if uow_factory is None:
        logger.error("Cannot record access request: store is not configured")
        return RecordOutcome(RecordStatus.NOT_CONFIGURED, NOT_CONFIGURED_MESSAGE)

    request = AccessRequest.create(
        name=record.name,
        email=record.email,
        preferences=record.preferences,
    )
    try:
        async with uow_factory() as uow:
            created = await uow.early_access_requests.add(request)
            await uow.commit()
    except StorePolicyError as exc:
        logger.error("Access request blocked by store policy: %s", exc.message)
        return RecordOutcome(RecordStatus.POLICY_DENIED, POLICY_DENIED_MESSAGE)
    except DuplicateAccessRequest:
        logger.info("Duplicate access request for email=%s", record.email)
        return RecordOutcome(RecordStatus.DUPLICATE, DUPLICATE_MESSAGE)
    except AppError as exc:
        logger.error("Store error while recording access request: %s", exc.message)
        return RecordOutcome(RecordStatus.STORE_ERROR, store_error_message(exc.message))
    except Exception as exc:
        logger.exception("Unexpected error while recording access request")
        return RecordOutcome(RecordStatus.STORE_ERROR, store_error_message(str(exc)))

    logger.info("Recorded access request id=%s", created.id)
    return RecordOutcome(RecordStatus.RECORDED, "Access request recorded.", request=created)
