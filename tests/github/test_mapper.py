from __future__ import annotations

from datetime import UTC, datetime

from ghprojects.core.github.mapper import content_from_node, field_from_node, item_from_node, project_from_node


def test_field_from_node_reads_options_and_iterations() -> None:
    status = field_from_node(
        {
            "id": "F_1",
            "name": "Status",
            "dataType": "SINGLE_SELECT",
            "options": [{"id": "OPT_1", "name": "Todo"}, {"id": "OPT_2", "name": "Done"}],
        }
    )
    iteration = field_from_node(
        {
            "id": "F_2",
            "name": "Iteration",
            "dataType": "ITERATION",
            "configuration": {"iterations": [{"id": "IT_1", "name": "Iteration 1"}]},
        }
    )

    assert status is not None
    assert [option.name for option in status.options] == ["Todo", "Done"]
    assert iteration is not None
    assert iteration.iterations[0].id == "IT_1"


def test_field_from_node_skips_nodes_outside_fragments() -> None:
    assert field_from_node({}) is None


def test_item_from_node_tolerates_draft_issue_content() -> None:
    item = item_from_node({"id": "PVTI_1", "type": "DRAFT_ISSUE", "content": {"id": "DI_1", "title": "Idea"}})

    assert item.content.number == 0
    assert item.content.title == "Idea"


def test_content_from_node_handles_missing_content() -> None:
    assert content_from_node(None).id == ""


def test_project_from_node_maps_scalar_properties() -> None:
    project = project_from_node(
        {
            "id": "PVT_1",
            "number": 1,
            "title": "Roadmap",
            "shortDescription": "Initial release",
            "readme": "# Ship it",
            "public": True,
            "closed": False,
            "url": "https://github.com/users/heaths/projects/1",
            "createdAt": "2024-01-02T03:04:05Z",
            "creator": {"login": "heaths"},
            "items": {"totalCount": 1, "nodes": [{"id": "PVTI_1", "type": "ISSUE", "content": {"number": 2}}]},
        }
    )

    assert project.description == "Initial release"
    assert project.body == "# Ship it"
    assert project.creator == "heaths"
    assert project.created_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert project.items is not None
    assert project.items.nodes[0].content.number == 2
