import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from roster.adapters.storage_factory import create_storage
from roster.components.students import (
    CreateStudentInput,
    DeleteStudentInput,
    GetStudentInput,
    RosterStore,
    StorageError,
    StudentError,
    UpdateStudentInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from roster.components.validation import ValidateInput, run_validate
from roster.config.loader import load_config
from roster.domain.entities import StudentRecord

logger = logging.getLogger("cli")

CONFIRM_DELETE_PROMPT = "Are you sure you want to delete this student?"


def get_store(config_path: Path | None = None) -> RosterStore:
    try:
        config = load_config(config_path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(config.logging.level)
    try:
        storage = create_storage(config.storage)
    except StorageError as e:
        logger.error(str(e))
        sys.exit(1)

    return RosterStore(storage, key=config.storage.key)


def format_student(student: StudentRecord) -> str:
    return f"{student.unique_id}  {student.name}  {student.id}  {student.email}  {student.contact}"


def report_errors(errors: Sequence[StudentError]) -> None:
    for err in errors:
        if err.field:
            print(f"  {err.field}: {err.message}")
        else:
            logger.error(err.message)
    sys.exit(1)


def handle_list(store: RosterStore, args: argparse.Namespace) -> None:
    result = run_list(store)
    if not result.success:
        report_errors(result.errors)

    if result.total == 0:
        print("No students registered yet.")
        return

    for student in result.students:
        print(format_student(student))
    print(f"{result.total} student(s).")


def handle_show(store: RosterStore, args: argparse.Namespace) -> None:
    result = run_get(GetStudentInput(unique_id=args.unique_id), store)
    if not result.success or result.student is None:
        report_errors(result.errors)
        return

    print(format_student(result.student))


def handle_add(store: RosterStore, args: argparse.Namespace) -> None:
    result = run_create(
        CreateStudentInput(name=args.name, id=args.id, email=args.email, contact=args.contact),
        store,
    )
    if not result.success or result.student is None:
        report_errors(result.errors)
        return

    print(result.notice)
    print(format_student(result.student))


def handle_update(store: RosterStore, args: argparse.Namespace) -> None:
    current = run_get(GetStudentInput(unique_id=args.unique_id), store)
    if not current.success or current.student is None:
        report_errors(current.errors)
        return

    # Unset options keep the stored value, like an edit form pre-filled with it
    existing = current.student
    result = run_update(
        UpdateStudentInput(
            unique_id=args.unique_id,
            name=existing.name if args.name is None else args.name,
            id=existing.id if args.id is None else args.id,
            email=existing.email if args.email is None else args.email,
            contact=existing.contact if args.contact is None else args.contact,
        ),
        store,
    )
    if not result.success or result.student is None:
        report_errors(result.errors)
        return

    print(result.notice)
    print(format_student(result.student))


def handle_delete(store: RosterStore, args: argparse.Namespace) -> None:
    if not args.yes:
        answer = input(f"{CONFIRM_DELETE_PROMPT} [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Cancelled.")
            return

    result = run_delete(DeleteStudentInput(unique_id=args.unique_id), store)
    if not result.success:
        report_errors(result.errors)

    if result.removed:
        print(result.notice)
    else:
        print(f"No student with ID {args.unique_id}; nothing deleted.")


def handle_validate(args: argparse.Namespace) -> None:
    result = run_validate(
        ValidateInput(name=args.name, id=args.id, email=args.email, contact=args.contact)
    )
    for field, verdict in result.verdicts.items():
        print(f"  {field}: {'ok' if verdict.valid else verdict.message}")

    if not result.success:
        sys.exit(1)


def add_field_arguments(parser: argparse.ArgumentParser, *, required: bool) -> None:
    default = "" if required else None
    parser.add_argument("--name", default=default, help="Student name (letters and spaces)")
    parser.add_argument("--id", default=default, help="Student ID (digits)")
    parser.add_argument("--email", default=default, help="Email address")
    parser.add_argument("--contact", default=default, help="Contact number (10+ digits)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Student Roster CLI")
    parser.add_argument("--config", type=Path, help="Path to roster.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    subparsers.add_parser("list", help="List all students")

    # show
    show_parser = subparsers.add_parser("show", help="Show one student")
    show_parser.add_argument("unique_id", help="Unique ID of the student")

    # add
    add_parser = subparsers.add_parser("add", help="Register a new student")
    add_field_arguments(add_parser, required=True)

    # update
    update_parser = subparsers.add_parser("update", help="Edit a student")
    update_parser.add_argument("unique_id", help="Unique ID of the student")
    add_field_arguments(update_parser, required=False)

    # delete
    delete_parser = subparsers.add_parser("delete", help="Delete a student")
    delete_parser.add_argument("unique_id", help="Unique ID of the student")
    delete_parser.add_argument("--yes", action="store_true", help="Skip confirmation")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Check fields without saving")
    add_field_arguments(validate_parser, required=True)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.command == "validate":
        handle_validate(args)
        return

    store = get_store(args.config)

    if args.command == "list":
        handle_list(store, args)
    elif args.command == "show":
        handle_show(store, args)
    elif args.command == "add":
        handle_add(store, args)
    elif args.command == "update":
        handle_update(store, args)
    elif args.command == "delete":
        handle_delete(store, args)


if __name__ == "__main__":
    main()
