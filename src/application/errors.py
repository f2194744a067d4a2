from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


class StoreNotConfigured(InfrastructureError):
    code = "store_not_configured"
    status_code = 503


class StorePolicyError(InfrastructureError):
    """The store refused the operation (permission denied / row level security)."""

    code = "store_policy_error"


class StoreOperationError(InfrastructureError):
    code = "store_error"

    def __init__(
        self,
        message: str,
        *,
        store_code: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.store_code = store_code


class DuplicateAccessRequest(ConflictError):
    code = "already_requested"


class GenerationUnavailable(InfrastructureError):
    code = "generation_unavailable"
    status_code = 503


class GenerationError(InfrastructureError):
    code = "generation_failed"
    status_code = 502
