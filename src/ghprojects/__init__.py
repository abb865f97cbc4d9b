"""ghprojects: manage GitHub Projects (v2) boards from the command line."""

from ghprojects.core.auth import TokenResolver, create_token_resolver
from ghprojects.core.config import detect_repository, load_config, parse_repository
from ghprojects.core.contracts import (
    AuthenticationError,
    CloneRequest,
    CloneResult,
    ConfigError,
    EditError,
    EditRequest,
    EditResult,
    FieldNotDefinedError,
    FieldUpdateError,
    GhProjectsError,
    GraphQLError,
    InvalidFieldValueError,
    ItemContent,
    ItemNotFoundError,
    ItemNotReferencedError,
    Project,
    ProjectChanges,
    ProjectItem,
    ProjectList,
    ProjectNotFoundError,
    ProjectsConfig,
    ProjectState,
    ProviderError,
    Repository,
    UnresolvedOptionError,
)
from ghprojects.core.engine.progress import EditProgress, NullEditProgress
from ghprojects.core.utils import pluralize
from ghprojects.sdk import GhProjects

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "CloneRequest",
    "CloneResult",
    "ConfigError",
    "EditError",
    "EditProgress",
    "EditRequest",
    "EditResult",
    "FieldNotDefinedError",
    "FieldUpdateError",
    "GhProjects",
    "GhProjectsError",
    "GraphQLError",
    "InvalidFieldValueError",
    "ItemContent",
    "ItemNotFoundError",
    "ItemNotReferencedError",
    "NullEditProgress",
    "Project",
    "ProjectChanges",
    "ProjectItem",
    "ProjectList",
    "ProjectNotFoundError",
    "ProjectState",
    "ProjectsConfig",
    "ProviderError",
    "Repository",
    "TokenResolver",
    "UnresolvedOptionError",
    "__version__",
    "create_token_resolver",
    "detect_repository",
    "load_config",
    "parse_repository",
    "pluralize",
]
