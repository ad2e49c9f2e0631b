"""
Students component - Roster create/list/update/delete.

Shell Layer - validates raw input, calls the store and converts storage
failures into error outputs. A failed operation is abandoned without retry.
"""

from __future__ import annotations

import logging

from roster.components.validation import StudentFields, ValidatedFields, validate_record

from ._impl import RosterStore
from .models import (
    CreateStudentInput,
    DeleteStudentInput,
    GetStudentInput,
    StudentDeleteOutput,
    StudentError,
    StudentListOutput,
    StudentOperationOutput,
    UpdateStudentInput,
)
from .ports import StorageCorrupt, StorageError

logger = logging.getLogger(__name__)

NOTICE_ADDED = "Student added successfully!"
NOTICE_UPDATED = "Student updated successfully!"
NOTICE_DELETED = "Student deleted successfully!"


def _storage_error(err: StorageError) -> StudentError:
    logger.error("Roster storage failure: %s", err)
    code = "storage_corrupt" if isinstance(err, StorageCorrupt) else "storage_unavailable"
    return StudentError(code=code, message=str(err))


def _not_found(unique_id: str) -> StudentError:
    return StudentError(
        code="student_not_found",
        message=f"Student with ID {unique_id} not found",
    )


def _validation_errors(
    fields: StudentFields,
) -> tuple[tuple[StudentError, ...], ValidatedFields | None]:
    verdict = validate_record(fields)
    errors = tuple(
        StudentError(code=err.code, message=err.message, field=err.field)
        for err in verdict.errors
    )
    return errors, verdict.fields


# --- Shell Layer Functions ---


def run_list(store: RosterStore) -> StudentListOutput:
    """List all students."""
    try:
        students = store.list_students()
    except StorageError as e:
        return StudentListOutput(students=(), total=0, errors=(_storage_error(e),), success=False)

    return StudentListOutput(students=tuple(students), total=len(students))


def run_get(input_data: GetStudentInput, store: RosterStore) -> StudentOperationOutput:
    """Get a student by uniqueId."""
    try:
        student = store.get(input_data.unique_id)
    except StorageError as e:
        return StudentOperationOutput(student=None, errors=(_storage_error(e),), success=False)

    if student is None:
        return StudentOperationOutput(
            student=None, errors=(_not_found(input_data.unique_id),), success=False
        )

    return StudentOperationOutput(student=student, errors=(), success=True)


def run_create(input_data: CreateStudentInput, store: RosterStore) -> StudentOperationOutput:
    """Validate and add a new student."""
    errors, validated = _validation_errors(
        StudentFields(
            name=input_data.name,
            id=input_data.id,
            email=input_data.email,
            contact=input_data.contact,
        )
    )
    if errors:
        return StudentOperationOutput(student=None, errors=errors, success=False)

    try:
        student = store.add(validated)
    except StorageError as e:
        return StudentOperationOutput(student=None, errors=(_storage_error(e),), success=False)

    logger.info("Added student %s", student.unique_id)
    return StudentOperationOutput(student=student, errors=(), success=True, notice=NOTICE_ADDED)


def run_update(input_data: UpdateStudentInput, store: RosterStore) -> StudentOperationOutput:
    """Validate and update an existing student."""
    errors, validated = _validation_errors(
        StudentFields(
            name=input_data.name,
            id=input_data.id,
            email=input_data.email,
            contact=input_data.contact,
        )
    )
    if errors:
        return StudentOperationOutput(student=None, errors=errors, success=False)

    try:
        student = store.update(input_data.unique_id, validated)
    except StorageError as e:
        return StudentOperationOutput(student=None, errors=(_storage_error(e),), success=False)

    if student is None:
        return StudentOperationOutput(
            student=None, errors=(_not_found(input_data.unique_id),), success=False
        )

    logger.info("Updated student %s", student.unique_id)
    return StudentOperationOutput(student=student, errors=(), success=True, notice=NOTICE_UPDATED)


def run_delete(input_data: DeleteStudentInput, store: RosterStore) -> StudentDeleteOutput:
    """
    Delete a student.

    Deleting an unknown uniqueId is a successful no-op with removed=False.
    Confirmation is the caller's job.
    """
    try:
        removed = store.delete(input_data.unique_id)
    except StorageError as e:
        return StudentDeleteOutput(removed=False, errors=(_storage_error(e),), success=False)

    if removed:
        logger.info("Deleted student %s", input_data.unique_id)
    return StudentDeleteOutput(
        removed=removed,
        errors=(),
        success=True,
        notice=NOTICE_DELETED if removed else "",
    )
