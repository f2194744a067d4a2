from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

NAME_MIN_LENGTH = 2
PREFERENCES_MIN_LENGTH = 10
PREFERENCES_MAX_LENGTH = 500

_DEFAULT_MESSAGES = {
    "name": "Name must be at least 2 characters.",
    "email": "Please enter a valid email address.",
    "preferences": "Tell us a bit more about your preferences (min 10 characters).",
}
_TOO_LONG_MESSAGES = {
    "preferences": "Preferences can be up to 500 characters.",
}


class AccessRequestInput(BaseModel):
    """A signup that passed validation: trimmed fields, email domain normalised."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True, populate_by_name=True)

    name: str = Field(
        min_length=NAME_MIN_LENGTH,
        validation_alias=AliasChoices("name", "userName", "user_name"),
    )
    email: EmailStr
    preferences: str = Field(
        min_length=PREFERENCES_MIN_LENGTH,
        max_length=PREFERENCES_MAX_LENGTH,
        validation_alias=AliasChoices("preferences", "storyPreferences", "story_preferences"),
    )

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            # EmailStr lower-cases the domain; the local part is kept as typed
            return value.strip()
        return value


@dataclass(frozen=True, slots=True)
class FieldViolation:
    field: str
    message: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    record: AccessRequestInput | None = None
    errors: list[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None and not self.errors


def _violations(exc: PydanticValidationError) -> list[FieldViolation]:
    out: list[FieldViolation] = []
    seen: set[str] = set()
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        name = str(loc[0])
        # Aliased fields report the alias they were looked up by
        if name in {"userName", "user_name"}:
            name = "name"
        elif name in {"storyPreferences", "story_preferences"}:
            name = "preferences"
        if name in seen:
            continue
        seen.add(name)
        if err.get("type") == "string_too_long" and name in _TOO_LONG_MESSAGES:
            message = _TOO_LONG_MESSAGES[name]
        else:
            message = _DEFAULT_MESSAGES.get(name, str(err.get("msg") or "Invalid value."))
        out.append(FieldViolation(field=name, message=message))
    return out


def validate_access_request(candidate: Mapping[str, Any]) -> ValidationResult:
    """Check a submitted signup; pure, never touches the store."""
    try:
        record = AccessRequestInput.model_validate(dict(candidate))
    except PydanticValidationError as exc:
        return ValidationResult(errors=_violations(exc))
    return ValidationResult(record=record)
