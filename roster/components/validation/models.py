"""
Validation component - Data models.

Verdicts returned by the field validators and the sealed value type the
roster store accepts for mutations.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from roster.domain.entities import StudentField

ValidationReason = Literal["required", "invalid_format", "too_short"]

# Only validate_record holds this; ValidatedFields refuses any other seal.
_SEAL = object()


# --- Validation Errors ---


@dataclass(frozen=True)
class FieldValidationError:
    """Per-field validation error."""

    code: ValidationReason
    message: str
    field: StudentField


# --- Verdicts ---


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating one raw field value."""

    valid: bool
    reason: ValidationReason | None = None
    message: str = ""

    @classmethod
    def ok(cls) -> Verdict:
        return cls(valid=True)

    @classmethod
    def fail(cls, reason: ValidationReason, message: str) -> Verdict:
        return cls(valid=False, reason=reason, message=message)


# --- Input Models ---


@dataclass(frozen=True)
class StudentFields:
    """Raw, unvalidated form input."""

    name: str
    id: str
    email: str
    contact: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> StudentFields:
        return cls(
            name=data.get("name", ""),
            id=data.get("id", ""),
            email=data.get("email", ""),
            contact=data.get("contact", ""),
        )


@dataclass(frozen=True)
class ValidatedFields:
    """
    Student fields that passed every validator.

    Instances are produced by validate_record only. The roster store's add and
    update accept nothing else, so a caller cannot skip validation.
    """

    name: str
    id: str
    email: str
    contact: str
    _seal: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._seal is not _SEAL:
            raise TypeError("ValidatedFields can only be created by validate_record()")


# --- Output Models ---


@dataclass(frozen=True)
class AggregateVerdict:
    """Per-field verdicts from validate_record."""

    verdicts: Mapping[StudentField, Verdict]
    fields: ValidatedFields | None = None

    @property
    def valid(self) -> bool:
        return self.fields is not None

    @property
    def errors(self) -> tuple[FieldValidationError, ...]:
        return tuple(
            FieldValidationError(code=verdict.reason, message=verdict.message, field=name)
            for name, verdict in self.verdicts.items()
            if not verdict.valid and verdict.reason is not None
        )
