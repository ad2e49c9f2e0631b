"""
Validation component - Student field validation.

Shell Layer - wraps the validators in input/output models for the
presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from roster.domain.entities import StudentField

from ._impl import validate_field_live, validate_record
from .models import FieldValidationError, StudentFields, ValidatedFields, Verdict

# --- Component Models (Shell Layer) ---


@dataclass(frozen=True)
class ValidateInput:
    """Input for validating a whole form."""

    name: str
    id: str
    email: str
    contact: str


@dataclass(frozen=True)
class ValidateOutput:
    """Output from form validation."""

    verdicts: dict[StudentField, Verdict]
    errors: tuple[FieldValidationError, ...]
    fields: ValidatedFields | None
    success: bool


@dataclass(frozen=True)
class ValidateFieldInput:
    """Input for validating one field as it is typed."""

    field: StudentField
    value: str


@dataclass(frozen=True)
class ValidateFieldOutput:
    """Error to display for the field, if any."""

    field: StudentField
    error: FieldValidationError | None


# --- Shell Layer Functions ---


def run_validate(input_data: ValidateInput) -> ValidateOutput:
    """Validate all four fields."""
    result = validate_record(
        StudentFields(
            name=input_data.name,
            id=input_data.id,
            email=input_data.email,
            contact=input_data.contact,
        )
    )
    return ValidateOutput(
        verdicts=dict(result.verdicts),
        errors=result.errors,
        fields=result.fields,
        success=result.valid,
    )


def run_validate_field(input_data: ValidateFieldInput) -> ValidateFieldOutput:
    """Validate a single field with live-typing semantics."""
    verdict = validate_field_live(input_data.field, input_data.value)

    if verdict is None or verdict.reason is None:
        return ValidateFieldOutput(field=input_data.field, error=None)

    return ValidateFieldOutput(
        field=input_data.field,
        error=FieldValidationError(
            code=verdict.reason,
            message=verdict.message,
            field=input_data.field,
        ),
    )
