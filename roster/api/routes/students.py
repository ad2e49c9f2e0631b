"""Routes for managing the student roster."""

from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from roster.api.deps import get_roster_store
from roster.components.students import (
    CreateStudentInput,
    DeleteStudentInput,
    GetStudentInput,
    RosterStore,
    StudentError,
    UpdateStudentInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from roster.components.validation import ValidateInput, run_validate
from roster.domain.entities import StudentRecord

router = APIRouter()

ERROR_STATUS = {
    "student_not_found": 404,
    "storage_unavailable": 503,
    "storage_corrupt": 500,
}


# --- Request/Response Models ---


class StudentRequest(BaseModel):
    name: str = ""
    id: str = ""
    email: str = ""
    contact: str = ""


class StudentResponse(BaseModel):
    uniqueId: str
    name: str
    id: str
    email: str
    contact: str


class StudentListResponse(BaseModel):
    items: list[StudentResponse]
    total: int


class StudentMutationResponse(BaseModel):
    student: StudentResponse
    notice: str


class DeleteResponse(BaseModel):
    deleted: bool
    notice: str


class FieldVerdictResponse(BaseModel):
    valid: bool
    reason: str | None = None
    message: str = ""


class ValidateResponse(BaseModel):
    valid: bool
    fields: dict[str, FieldVerdictResponse]


def _to_response(student: StudentRecord) -> StudentResponse:
    return StudentResponse(**student.to_storage())


def _raise_for_errors(errors: Sequence[StudentError]) -> None:
    """Map errors to an HTTP status: per-field validation errors are 400."""
    status_code = next((ERROR_STATUS[e.code] for e in errors if e.code in ERROR_STATUS), 400)
    raise HTTPException(
        status_code=status_code,
        detail=[{"code": e.code, "message": e.message, "field": e.field} for e in errors],
    )


# --- Routes ---


@router.get("", response_model=StudentListResponse)
def list_students(store: RosterStore = Depends(get_roster_store)) -> StudentListResponse:
    """List all students in insertion order."""
    result = run_list(store)
    if not result.success:
        _raise_for_errors(result.errors)

    return StudentListResponse(
        items=[_to_response(s) for s in result.students],
        total=result.total,
    )


@router.post("/validate", response_model=ValidateResponse)
def validate_student(data: StudentRequest) -> ValidateResponse:
    """Validate form input without saving it."""
    result = run_validate(
        ValidateInput(name=data.name, id=data.id, email=data.email, contact=data.contact)
    )
    return ValidateResponse(
        valid=result.success,
        fields={
            field: FieldVerdictResponse(
                valid=verdict.valid, reason=verdict.reason, message=verdict.message
            )
            for field, verdict in result.verdicts.items()
        },
    )


@router.post("", response_model=StudentMutationResponse, status_code=201)
def create_student(
    data: StudentRequest,
    store: RosterStore = Depends(get_roster_store),
) -> StudentMutationResponse:
    """Add a new student."""
    result = run_create(
        CreateStudentInput(name=data.name, id=data.id, email=data.email, contact=data.contact),
        store,
    )
    if not result.success:
        _raise_for_errors(result.errors)

    student = result.student
    assert student is not None  # Success guarantees student is not None
    return StudentMutationResponse(student=_to_response(student), notice=result.notice)


@router.get("/{unique_id}", response_model=StudentResponse)
def get_student(
    unique_id: str,
    store: RosterStore = Depends(get_roster_store),
) -> StudentResponse:
    """Get a student by uniqueId."""
    result = run_get(GetStudentInput(unique_id=unique_id), store)
    if not result.success:
        _raise_for_errors(result.errors)

    student = result.student
    assert student is not None
    return _to_response(student)


@router.put("/{unique_id}", response_model=StudentMutationResponse)
def update_student(
    unique_id: str,
    data: StudentRequest,
    store: RosterStore = Depends(get_roster_store),
) -> StudentMutationResponse:
    """Replace a student's editable fields."""
    result = run_update(
        UpdateStudentInput(
            unique_id=unique_id,
            name=data.name,
            id=data.id,
            email=data.email,
            contact=data.contact,
        ),
        store,
    )
    if not result.success:
        _raise_for_errors(result.errors)

    student = result.student
    assert student is not None
    return StudentMutationResponse(student=_to_response(student), notice=result.notice)


@router.delete("/{unique_id}", response_model=DeleteResponse)
def delete_student(
    unique_id: str,
    store: RosterStore = Depends(get_roster_store),
) -> DeleteResponse:
    """Delete a student. Unknown ids are a no-op, not a 404."""
    result = run_delete(DeleteStudentInput(unique_id=unique_id), store)
    if not result.success:
        _raise_for_errors(result.errors)

    return DeleteResponse(deleted=result.removed, notice=result.notice)
