"""Core contracts."""

from ghprojects.core.contracts.config import ProjectsConfig, Repository
from ghprojects.core.contracts.edit import (
    CloneRequest,
    CloneResult,
    EditRequest,
    EditResult,
    ProjectChanges,
    ProjectState,
    WorkUnit,
    WorkUnitState,
)
from ghprojects.core.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    EditError,
    FieldNotDefinedError,
    FieldUpdateError,
    GhProjectsError,
    GraphQLError,
    InvalidFieldValueError,
    ItemNotFoundError,
    ItemNotReferencedError,
    ProjectNotFoundError,
    ProviderError,
    UnresolvedOptionError,
)
from ghprojects.core.contracts.fields import FieldDataType, FieldOption, FieldValue, ProjectField, ResolvedField
from ghprojects.core.contracts.project import ItemContent, Project, ProjectItem, ProjectList
from ghprojects.core.contracts.transport import GraphQLExecutor

__all__ = [
    "AuthenticationError",
    "CloneRequest",
    "CloneResult",
    "ConfigError",
    "EditError",
    "EditRequest",
    "EditResult",
    "FieldDataType",
    "FieldNotDefinedError",
    "FieldOption",
    "FieldUpdateError",
    "FieldValue",
    "GhProjectsError",
    "GraphQLError",
    "GraphQLExecutor",
    "InvalidFieldValueError",
    "ItemContent",
    "ItemNotFoundError",
    "ItemNotReferencedError",
    "Project",
    "ProjectChanges",
    "ProjectField",
    "ProjectItem",
    "ProjectList",
    "ProjectNotFoundError",
    "ProjectState",
    "ProjectsConfig",
    "ProviderError",
    "Repository",
    "ResolvedField",
    "UnresolvedOptionError",
    "WorkUnit",
    "WorkUnitState",
]
