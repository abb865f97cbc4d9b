"""Edit/clone request and work-unit contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


class ProjectChanges(BaseModel):
    """Scalar project properties to update. ``None`` leaves a property untouched."""

    title: str = ""
    description: str | None = None
    body: str | None = None
    public: bool | None = None

    @property
    def requested(self) -> bool:
        return bool(self.title) or any(value is not None for value in (self.description, self.body, self.public))


class EditRequest(BaseModel):
    number: int = Field(ge=1)
    changes: ProjectChanges = Field(default_factory=ProjectChanges)
    add_items: list[int] = Field(default_factory=list)
    remove_items: list[int] = Field(default_factory=list)
    fields: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_fields_need_items(self) -> EditRequest:
        if self.fields and not self.add_items:
            raise ValueError("--field requires --add-issue")
        return self


class EditResult(BaseModel):
    project_url: str
    items_added: int = 0
    items_removed: int = 0


class CloneRequest(BaseModel):
    number: int = Field(ge=1)
    changes: ProjectChanges
    include_drafts: bool = False

    @model_validator(mode="after")
    def validate_title(self) -> CloneRequest:
        if not self.changes.title:
            raise ValueError("a new title is required to clone a project")
        return self


class CloneResult(BaseModel):
    project_id: str
    project_url: str


class ProjectState(StrEnum):
    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


# ------------------------------------------------------------------
# Work units
# ------------------------------------------------------------------


class WorkUnitState(StrEnum):
    PENDING = "pending"
    REFERENCE_RESOLVED = "reference_resolved"
    ATTACHED = "attached"
    FIELDS_APPLIED = "fields_applied"
    FAILED = "failed"


_NEXT_STATE = {
    WorkUnitState.PENDING: WorkUnitState.REFERENCE_RESOLVED,
    WorkUnitState.REFERENCE_RESOLVED: WorkUnitState.ATTACHED,
    WorkUnitState.ATTACHED: WorkUnitState.FIELDS_APPLIED,
}


@dataclass
class WorkUnit:
    """One item number travelling through the add pipeline."""

    number: int
    state: WorkUnitState = WorkUnitState.PENDING
    content_id: str | None = None
    item_id: str | None = None
    error: BaseException | None = None

    @property
    def done(self) -> bool:
        return self.state in {WorkUnitState.FIELDS_APPLIED, WorkUnitState.FAILED}

    def advance(self, state: WorkUnitState) -> None:
        expected = _NEXT_STATE.get(self.state)
        if state != expected:
            raise ValueError(f"work unit #{self.number} cannot move from {self.state} to {state}")
        self.state = state

    def fail(self, error: BaseException) -> None:
        if self.done:
            raise ValueError(f"work unit #{self.number} already finished as {self.state}")
        self.state = WorkUnitState.FAILED
        self.error = error
