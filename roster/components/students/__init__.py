"""
Students component - Roster store and its create/list/update/delete operations.
"""

from ._impl import STORAGE_KEY, RosterStore
from .component import (
    NOTICE_ADDED,
    NOTICE_DELETED,
    NOTICE_UPDATED,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
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
from .ports import (
    ClockPort,
    KeyValueStoragePort,
    StorageCorrupt,
    StorageError,
    StorageUnavailable,
)

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_get",
    "run_list",
    # Store
    "RosterStore",
    "STORAGE_KEY",
    # Input models
    "CreateStudentInput",
    "UpdateStudentInput",
    "DeleteStudentInput",
    "GetStudentInput",
    # Output models
    "StudentOperationOutput",
    "StudentDeleteOutput",
    "StudentListOutput",
    "StudentError",
    "NOTICE_ADDED",
    "NOTICE_UPDATED",
    "NOTICE_DELETED",
    # Ports
    "KeyValueStoragePort",
    "ClockPort",
    # Errors
    "StorageError",
    "StorageUnavailable",
    "StorageCorrupt",
]
