"""Exception hierarchy for ghprojects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


class GhProjectsError(Exception):
    """Base exception for all ghprojects errors."""


class ConfigError(GhProjectsError):
    """Configuration, repository or flag validation failure."""


class ProviderError(GhProjectsError):
    """Base remote API or transport failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class GraphQLError(ProviderError):
    """The GraphQL endpoint answered with one or more structured errors."""

    def __init__(
        self,
        errors: Sequence[Mapping[str, Any]],
        *,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        self.errors = [dict(error) for error in errors]
        self.data = dict(data) if data else None
        messages = ", ".join(str(error.get("message", "unknown error")) for error in self.errors)
        super().__init__(f"GraphQL: {messages}")

    @property
    def codes(self) -> set[str]:
        return {str(error["type"]) for error in self.errors if error.get("type")}

    def has_code(self, code: str) -> bool:
        return code in self.codes


class ProjectNotFoundError(ProviderError):
    """Project number does not exist for the repository or its owner."""


class ItemNotFoundError(ProviderError):
    """An issue or pull request number could not be resolved remotely.

    The message is the remote error message, surfaced verbatim.
    """

    def __init__(self, message: str, *, number: int) -> None:
        super().__init__(message)
        self.number = number


class FieldUpdateError(ProviderError):
    """Setting one field value on a project item failed."""

    def __init__(self, message: str, *, field_name: str) -> None:
        super().__init__(message)
        self.field_name = field_name


class EditError(GhProjectsError):
    """Client-side resolution failure during an edit."""


class FieldNotDefinedError(EditError):
    """A requested field does not exist on the project."""

    def __init__(self, name: str) -> None:
        super().__init__(f'field "{name}" not defined')
        self.name = name


class InvalidFieldValueError(EditError):
    """A value could not be parsed for the field's data type."""

    def __init__(self, name: str, value: str, *, data_type: str) -> None:
        super().__init__(f'invalid {data_type.lower()} value "{value}" for field "{name}"')
        self.name = name
        self.value = value
        self.data_type = data_type


class UnresolvedOptionError(EditError):
    """A value matches none of the field's options or iterations."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f'option "{value}" not found for field "{name}"')
        self.name = name
        self.value = value


class ItemNotReferencedError(EditError):
    """A removal target is not an item of the project."""

    def __init__(self, number: int) -> None:
        super().__init__(f"project does not reference #{number}")
        self.number = number
