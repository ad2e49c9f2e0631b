from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Literals ---
StudentField = Literal["name", "id", "email", "contact"]

STUDENT_FIELDS: tuple[StudentField, ...] = ("name", "id", "email", "contact")

# --- Students ---


class StudentRecord(BaseModel):
    """
    A single student on the roster, as persisted under the roster key.

    Only the stored key `uniqueId` is accepted for the identifier. Unknown
    keys on a stored entry are kept and written back unchanged.
    """

    unique_id: str = Field(alias="uniqueId", min_length=1)
    name: str
    id: str
    email: str
    contact: str

    model_config = ConfigDict(strict=True, extra="allow")

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
