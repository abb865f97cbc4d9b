"""Project field contracts."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class FieldDataType(StrEnum):
    ASSIGNEES = "ASSIGNEES"
    DATE = "DATE"
    ITERATION = "ITERATION"
    LABELS = "LABELS"
    LINKED_PULL_REQUESTS = "LINKED_PULL_REQUESTS"
    MILESTONE = "MILESTONE"
    NUMBER = "NUMBER"
    REPOSITORY = "REPOSITORY"
    REVIEWERS = "REVIEWERS"
    SINGLE_SELECT = "SINGLE_SELECT"
    TEXT = "TEXT"
    TITLE = "TITLE"
    TRACKS = "TRACKS"
    TRACKED_BY = "TRACKED_BY"


class FieldOption(BaseModel):
    """A selectable option or iteration of a field."""

    model_config = {"frozen": True}

    id: str
    name: str


class ProjectField(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    data_type: str
    options: tuple[FieldOption, ...] = ()
    iterations: tuple[FieldOption, ...] = ()

    def matches(self, name: str) -> bool:
        return self.name.casefold() == name.casefold()


# ------------------------------------------------------------------
# Field values: exactly one member of ProjectV2FieldValue per kind
# ------------------------------------------------------------------


class DateFieldValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["DATE"] = "DATE"
    date: str

    def to_graphql(self) -> dict[str, Any]:
        return {"date": self.date}


class NumberFieldValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["NUMBER"] = "NUMBER"
    number: float

    def to_graphql(self) -> dict[str, Any]:
        return {"number": self.number}


class SingleSelectFieldValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["SINGLE_SELECT"] = "SINGLE_SELECT"
    option_id: str

    def to_graphql(self) -> dict[str, Any]:
        return {"singleSelectOptionId": self.option_id}


class IterationFieldValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["ITERATION"] = "ITERATION"
    iteration_id: str

    def to_graphql(self) -> dict[str, Any]:
        return {"iterationId": self.iteration_id}


class TextFieldValue(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["TEXT"] = "TEXT"
    text: str

    def to_graphql(self) -> dict[str, Any]:
        return {"text": self.text}


FieldValue = Annotated[
    DateFieldValue | NumberFieldValue | SingleSelectFieldValue | IterationFieldValue | TextFieldValue,
    Field(discriminator="kind"),
]


class ResolvedField(BaseModel):
    """A project field paired with the value to submit for it."""

    model_config = {"frozen": True}

    field: ProjectField
    value: FieldValue
