from __future__ import annotations

import pytest

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.exceptions import FieldNotDefinedError, InvalidFieldValueError, UnresolvedOptionError
from ghprojects.core.contracts.fields import (
    DateFieldValue,
    FieldDataType,
    FieldOption,
    IterationFieldValue,
    NumberFieldValue,
    ProjectField,
    SingleSelectFieldValue,
    TextFieldValue,
)
from ghprojects.core.engine.fields import FieldResolver, convert_field_value
from tests.fakes.client import FakeGraphQLClient, paged, project_connection

FIELDS = "RepositoryProjectV2Fields"

TITLE = {"id": "F_TITLE", "name": "Title", "dataType": "TITLE"}
NOTES = {"id": "F_NOTES", "name": "Notes", "dataType": "TEXT"}
ESTIMATE = {"id": "F_EST", "name": "Estimate", "dataType": "NUMBER"}
STATUS = {
    "id": "F_STATUS",
    "name": "Status",
    "dataType": "SINGLE_SELECT",
    "options": [{"id": "OPT_TODO", "name": "Todo"}, {"id": "OPT_DONE", "name": "Done"}],
}


def _resolver(client: FakeGraphQLClient, repo: Repository) -> FieldResolver:
    return FieldResolver(client, repo, 1)


@pytest.mark.asyncio
async def test_resolves_field_found_on_second_page(repo: Repository) -> None:
    client = FakeGraphQLClient().on(FIELDS, paged([[TITLE, NOTES], [STATUS]], project_connection("fields")))

    resolved = await _resolver(client, repo).resolve({"Status": "Done"})

    assert resolved["Status"].field.id == "F_STATUS"
    assert resolved["Status"].value == SingleSelectFieldValue(option_id="OPT_DONE")
    assert len(client.calls_to(FIELDS)) == 2


@pytest.mark.asyncio
async def test_stops_paging_once_every_name_is_resolved(repo: Repository) -> None:
    client = FakeGraphQLClient().on(FIELDS, paged([[TITLE, NOTES], [STATUS]], project_connection("fields")))

    resolved = await _resolver(client, repo).resolve({"notes": "see thread"})

    assert resolved == {"notes": resolved["notes"]}
    assert resolved["notes"].value == TextFieldValue(text="see thread")
    assert len(client.calls_to(FIELDS)) == 1


@pytest.mark.asyncio
async def test_matching_is_case_insensitive_and_keeps_user_casing(repo: Repository) -> None:
    client = FakeGraphQLClient().on(FIELDS, paged([[STATUS, ESTIMATE]], project_connection("fields")))

    resolved = await _resolver(client, repo).resolve({"STATUS": "done", "estimate": "3"})

    assert set(resolved) == {"STATUS", "estimate"}
    assert resolved["STATUS"].value == SingleSelectFieldValue(option_id="OPT_DONE")
    assert resolved["estimate"].value == NumberFieldValue(number=3.0)


@pytest.mark.asyncio
async def test_undefined_field_fails_after_draining_all_pages(repo: Repository) -> None:
    client = FakeGraphQLClient().on(FIELDS, paged([[TITLE], [STATUS]], project_connection("fields")))

    with pytest.raises(FieldNotDefinedError, match='field "Priority" not defined'):
        await _resolver(client, repo).resolve({"Status": "Done", "Priority": "High", "Size": "L"})

    assert len(client.calls_to(FIELDS)) == 2


@pytest.mark.asyncio
async def test_does_not_mutate_requested_mapping(repo: Repository) -> None:
    client = FakeGraphQLClient().on(FIELDS, paged([[STATUS]], project_connection("fields")))
    requested = {"Status": "Done"}

    await _resolver(client, repo).resolve(requested)

    assert requested == {"Status": "Done"}


@pytest.mark.asyncio
async def test_empty_request_issues_no_calls(repo: Repository) -> None:
    client = FakeGraphQLClient()

    assert await _resolver(client, repo).resolve({}) == {}
    assert client.calls == []


# ---------------------------------------------------------------------------
# Per-type conversion
# ---------------------------------------------------------------------------


def _field(data_type: str, **kwargs: object) -> ProjectField:
    return ProjectField(id="F_1", name="Field", data_type=data_type, **kwargs)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03-01", "2024-03-01"),
        ("2024-03-01T10:30:00Z", "2024-03-01T10:30:00+00:00"),
        ("2024-03-01T10:30:00-07:00", "2024-03-01T10:30:00-07:00"),
    ],
)
def test_convert_date(value: str, expected: str) -> None:
    assert convert_field_value(_field(FieldDataType.DATE), "Due", value) == DateFieldValue(date=expected)


def test_convert_date_rejects_garbage() -> None:
    with pytest.raises(InvalidFieldValueError, match='invalid date value "tomorrow" for field "Due"'):
        convert_field_value(_field(FieldDataType.DATE), "Due", "tomorrow")


@pytest.mark.parametrize("value", ["2024-03-01T10:30", "2024-03-01T10:30:00"])
def test_convert_date_rejects_timestamp_without_offset(value: str) -> None:
    with pytest.raises(InvalidFieldValueError, match="invalid date value"):
        convert_field_value(_field(FieldDataType.DATE), "Due", value)


def test_convert_number() -> None:
    assert convert_field_value(_field(FieldDataType.NUMBER), "Estimate", "2.5") == NumberFieldValue(number=2.5)


@pytest.mark.parametrize(("value", "expected"), [("-4", -4.0), ("+.5", 0.5), ("1.", 1.0), ("2E3", 2000.0)])
def test_convert_number_accepts_plain_decimals(value: str, expected: float) -> None:
    assert convert_field_value(_field(FieldDataType.NUMBER), "Estimate", value) == NumberFieldValue(number=expected)


@pytest.mark.parametrize("value", ["lots", "nan", "inf", "1e999", "1_000", " 3 ", "\u0663", ""])
def test_convert_number_rejects_unparseable_and_non_finite(value: str) -> None:
    with pytest.raises(InvalidFieldValueError, match="invalid number value"):
        convert_field_value(_field(FieldDataType.NUMBER), "Estimate", value)


def test_convert_iteration_matches_title_case_insensitively() -> None:
    field = _field(FieldDataType.ITERATION, iterations=(FieldOption(id="IT_1", name="Iteration 1"),))

    assert convert_field_value(field, "Iteration", "iteration 1") == IterationFieldValue(iteration_id="IT_1")


def test_convert_iteration_unknown_title() -> None:
    field = _field(FieldDataType.ITERATION, iterations=(FieldOption(id="IT_1", name="Iteration 1"),))

    with pytest.raises(UnresolvedOptionError, match='option "Iteration 9" not found for field "Iteration"'):
        convert_field_value(field, "Iteration", "Iteration 9")


def test_convert_single_select_unknown_option() -> None:
    field = _field(FieldDataType.SINGLE_SELECT, options=(FieldOption(id="OPT_1", name="Todo"),))

    with pytest.raises(UnresolvedOptionError):
        convert_field_value(field, "Status", "Blocked")


@pytest.mark.parametrize("data_type", [FieldDataType.TEXT, FieldDataType.TITLE, "SOMETHING_NEW"])
def test_convert_other_types_pass_text_through(data_type: str) -> None:
    assert convert_field_value(_field(data_type), "Notes", "raw, text") == TextFieldValue(text="raw, text")
