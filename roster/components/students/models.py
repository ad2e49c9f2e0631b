"""
Students component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from roster.domain.entities import StudentRecord

# --- Errors ---


@dataclass(frozen=True)
class StudentError:
    """
    Error reported by a student operation.

    Validation errors carry the offending field; storage and not-found errors
    have field=None and are meant for a single global notification.
    """

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateStudentInput:
    """Raw form input for a new student."""

    name: str
    id: str
    email: str
    contact: str


@dataclass(frozen=True)
class UpdateStudentInput:
    """Raw form input for editing a student."""

    unique_id: str
    name: str
    id: str
    email: str
    contact: str


@dataclass(frozen=True)
class DeleteStudentInput:
    """Input for deleting a student."""

    unique_id: str


@dataclass(frozen=True)
class GetStudentInput:
    """Input for getting a student."""

    unique_id: str


# --- Output Models ---


@dataclass(frozen=True)
class StudentOperationOutput:
    """Output from a single-student operation."""

    student: StudentRecord | None
    errors: tuple[StudentError, ...]
    success: bool
    notice: str = ""


@dataclass(frozen=True)
class StudentDeleteOutput:
    """Output from delete. success is False only on storage failure."""

    removed: bool
    errors: tuple[StudentError, ...]
    success: bool
    notice: str = ""


@dataclass(frozen=True)
class StudentListOutput:
    """Output from list operation."""

    students: tuple[StudentRecord, ...]
    total: int
    errors: tuple[StudentError, ...] = ()
    success: bool = True
