"""
Field validators for student records.

Functional Core - pure functions, no I/O.

The format checks run against the raw value while the emptiness and name
length checks use the trimmed value. Whitespace around a student ID or
contact number is therefore a format error, and contact length counts the
untrimmed value.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

from roster.domain.entities import STUDENT_FIELDS, StudentField

from .models import (
    _SEAL,
    AggregateVerdict,
    StudentFields,
    ValidatedFields,
    Verdict,
)

# Whitespace as browsers define it for \s and String.prototype.trim. Python's
# \s and str.strip() disagree on U+FEFF, U+001C..U+001F and U+0085.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS = re.escape(WHITESPACE)

NAME_PATTERN = re.compile(f"[A-Za-z{_WS}]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")
EMAIL_PATTERN = re.compile(f"[^@{_WS}]+@[^@{_WS}]+\\.[^@{_WS}]+")

NAME_MIN_LENGTH = 2
CONTACT_MIN_LENGTH = 10


def trim(raw: str) -> str:
    """Strip leading and trailing WHITESPACE."""
    return raw.strip(WHITESPACE)



# --- Field Validators ---


def validate_name(raw: str) -> Verdict:
    """Letters and whitespace only, at least two characters once trimmed."""
    if not trim(raw):
        return Verdict.fail("required", "Name is required")

    if not NAME_PATTERN.fullmatch(raw):
        return Verdict.fail("invalid_format", "Name should contain only letters")

    if len(trim(raw)) < NAME_MIN_LENGTH:
        return Verdict.fail("too_short", "Name must be at least 2 characters")

    return Verdict.ok()


def validate_student_id(raw: str) -> Verdict:
    """Digits only."""
    if not trim(raw):
        return Verdict.fail("required", "Student ID is required")

    if not DIGITS_PATTERN.fullmatch(raw):
        return Verdict.fail("invalid_format", "Student ID should contain only numbers")

    return Verdict.ok()


def validate_email(raw: str) -> Verdict:
    """Single @, non-blank local part, dotted domain."""
    if not trim(raw):
        return Verdict.fail("required", "Email is required")

    if not EMAIL_PATTERN.fullmatch(raw):
        return Verdict.fail("invalid_format", "Please enter a valid email address")

    return Verdict.ok()


def validate_contact(raw: str) -> Verdict:
    """Digits only, at least ten characters long."""
    if not trim(raw):
        return Verdict.fail("required", "Contact number is required")

    if not DIGITS_PATTERN.fullmatch(raw):
        return Verdict.fail("invalid_format", "Contact number should contain only numbers")

    if len(raw) < CONTACT_MIN_LENGTH:
        return Verdict.fail("too_short", "Contact number must be at least 10 digits")

    return Verdict.ok()


FIELD_VALIDATORS: dict[StudentField, Callable[[str], Verdict]] = {
    "name": validate_name,
    "id": validate_student_id,
    "email": validate_email,
    "contact": validate_contact,
}


# --- Aggregation ---


def validate_record(fields: StudentFields | Mapping[str, str]) -> AggregateVerdict:
    """
    Run every field validator and collect the verdicts.

    No short-circuit: all four fields are checked so every simultaneous error
    can be shown. On success the result carries a ValidatedFields value.
    """
    if not isinstance(fields, StudentFields):
        fields = StudentFields.from_mapping(fields)

    verdicts = {name: FIELD_VALIDATORS[name](getattr(fields, name)) for name in STUDENT_FIELDS}

    if not all(verdict.valid for verdict in verdicts.values()):
        return AggregateVerdict(verdicts=verdicts)

    return AggregateVerdict(
        verdicts=verdicts,
        fields=ValidatedFields(
            name=fields.name,
            id=fields.id,
            email=fields.email,
            contact=fields.contact,
            _seal=_SEAL,
        ),
    )


def validate_field_live(field: StudentField, raw: str) -> Verdict | None:
    """
    Verdict to show while the user is typing.

    A blank field shows no error; otherwise returns the failing verdict, or
    None when the value is valid.
    """
    if not trim(raw):
        return None

    verdict = FIELD_VALIDATORS[field](raw)
    return None if verdict.valid else verdict
