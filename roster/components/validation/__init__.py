"""
Validation component - Field-level validation of student form input.
"""

from ._impl import (
    FIELD_VALIDATORS,
    WHITESPACE,
    trim,
    validate_contact,
    validate_email,
    validate_field_live,
    validate_name,
    validate_record,
    validate_student_id,
)
from .component import (
    ValidateFieldInput,
    ValidateFieldOutput,
    ValidateInput,
    ValidateOutput,
    run_validate,
    run_validate_field,
)
from .models import (
    AggregateVerdict,
    FieldValidationError,
    StudentFields,
    ValidatedFields,
    ValidationReason,
    Verdict,
)

__all__ = [
    # Entry points
    "run_validate",
    "run_validate_field",
    # Validators
    "validate_name",
    "validate_student_id",
    "validate_email",
    "validate_contact",
    "validate_record",
    "validate_field_live",
    "FIELD_VALIDATORS",
    "WHITESPACE",
    "trim",
    # Models
    "ValidateInput",
    "ValidateOutput",
    "ValidateFieldInput",
    "ValidateFieldOutput",
    "AggregateVerdict",
    "FieldValidationError",
    "StudentFields",
    "ValidatedFields",
    "ValidationReason",
    "Verdict",
]
