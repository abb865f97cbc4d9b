"""Resolution of user-supplied ``name=value`` pairs against a project's fields."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from contextlib import aclosing
from datetime import date, datetime

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.exceptions import FieldNotDefinedError, InvalidFieldValueError, UnresolvedOptionError
from ghprojects.core.contracts.fields import (
    DateFieldValue,
    FieldDataType,
    FieldOption,
    FieldValue,
    IterationFieldValue,
    NumberFieldValue,
    ProjectField,
    ResolvedField,
    SingleSelectFieldValue,
    TextFieldValue,
)
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.github.mapper import field_from_node
from ghprojects.core.github.pagination import iter_pages
from ghprojects.core.github.queries import PROJECT_FIELDS

_LOG = logging.getLogger(__name__)

_FIELDS_PATH = ("repository", "projectV2", "fields")

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def match_option(options: Iterable[FieldOption], value: str) -> FieldOption | None:
    """Find the option or iteration whose name equals *value*, ignoring case."""
    wanted = value.casefold()
    for option in options:
        if option.name.casefold() == wanted:
            return option
    return None


def _parse_date(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        timestamp = datetime.fromisoformat(value)
    # Timestamps must carry an offset.
    if timestamp.tzinfo is None:
        raise ValueError(f"timestamp without offset: {value}")
    return timestamp.isoformat()


def convert_field_value(field: ProjectField, name: str, value: str) -> FieldValue:
    """Convert textual *value* into the value shape required by *field*'s data type.

    Raises:
        InvalidFieldValueError: Dates and numbers that do not parse.
        UnresolvedOptionError: Single-select or iteration values with no matching name.
    """
    match field.data_type:
        case FieldDataType.DATE:
            try:
                return DateFieldValue(date=_parse_date(value))
            except ValueError as exc:
                raise InvalidFieldValueError(name, value, data_type=field.data_type) from exc
        case FieldDataType.ITERATION:
            iteration = match_option(field.iterations, value)
            if iteration is None:
                raise UnresolvedOptionError(name, value)
            return IterationFieldValue(iteration_id=iteration.id)
        case FieldDataType.NUMBER:
            number = float(value) if _NUMBER_RE.fullmatch(value) else math.nan
            if not math.isfinite(number):
                raise InvalidFieldValueError(name, value, data_type=field.data_type)
            return NumberFieldValue(number=number)
        case FieldDataType.SINGLE_SELECT:
            option = match_option(field.options, value)
            if option is None:
                raise UnresolvedOptionError(name, value)
            return SingleSelectFieldValue(option_id=option.id)
        case _:
            return TextFieldValue(text=value)


class FieldResolver:
    """Resolves requested field assignments for one project.

    Pages through the project's fields only until every requested name has
    been matched; the result is keyed by the names as the user typed them.
    """

    def __init__(self, client: GraphQLExecutor, repo: Repository, number: int) -> None:
        self._client = client
        self._repo = repo
        self._number = number

    async def resolve(self, requested: Mapping[str, str]) -> dict[str, ResolvedField]:
        outstanding = dict(requested)
        resolved: dict[str, ResolvedField] = {}
        if not outstanding:
            return resolved

        variables = {"owner": self._repo.owner, "name": self._repo.name, "number": self._number}
        async with aclosing(iter_pages(self._client, PROJECT_FIELDS, variables, _FIELDS_PATH)) as pages:
            async for page in pages:
                fields = [field for node in page.nodes if (field := field_from_node(node)) is not None]
                for name, value in list(outstanding.items()):
                    field = next((candidate for candidate in fields if candidate.matches(name)), None)
                    if field is None:
                        continue
                    resolved[name] = ResolvedField(field=field, value=convert_field_value(field, name, value))
                    del outstanding[name]
                    _LOG.debug("Resolved field %r to %s (%s)", name, field.id, field.data_type)
                if not outstanding:
                    break

        if outstanding:
            raise FieldNotDefinedError(next(iter(outstanding)))
        return resolved
