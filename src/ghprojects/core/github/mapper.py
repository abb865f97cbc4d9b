"""Mapping functions between GitHub GraphQL payloads and contracts."""

from __future__ import annotations

from typing import Any

from ghprojects.core.contracts.exceptions import ProviderError
from ghprojects.core.contracts.fields import FieldOption, ProjectField
from ghprojects.core.contracts.project import ItemContent, ItemPage, Project, ProjectItem


def require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise ProviderError(f"Missing/invalid object at key '{key}'")
    return value


def require_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ProviderError(f"Missing/invalid list at key '{key}'")
    return value


def require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ProviderError(f"Missing/invalid string at key '{key}'")
    return value


def dig(data: dict[str, Any], *path: str) -> dict[str, Any]:
    """Follow *path* through nested objects, requiring each step to be an object."""
    current = data
    for key in path:
        current = require_dict(current, key)
    return current


def _login(node: dict[str, Any]) -> str:
    creator = node.get("creator")
    if isinstance(creator, dict):
        return str(creator.get("login") or "")
    return ""


def _options(raw: Any) -> tuple[FieldOption, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(
        FieldOption(id=str(option["id"]), name=str(option.get("name", "")))
        for option in raw
        if isinstance(option, dict) and option.get("id")
    )


def field_from_node(node: dict[str, Any]) -> ProjectField | None:
    """Build a :class:`ProjectField`, or ``None`` for nodes outside the requested fragments."""
    if not node.get("id") or not node.get("name"):
        return None
    configuration = node.get("configuration")
    iterations = configuration.get("iterations") if isinstance(configuration, dict) else None
    return ProjectField(
        id=str(node["id"]),
        name=str(node["name"]),
        data_type=str(node.get("dataType") or ""),
        options=_options(node.get("options")),
        iterations=_options(iterations),
    )


def content_from_node(node: dict[str, Any] | None) -> ItemContent:
    if not isinstance(node, dict):
        return ItemContent()
    return ItemContent(
        id=str(node.get("id") or ""),
        number=int(node.get("number") or 0),
        title=str(node.get("title") or ""),
        state=str(node.get("state") or ""),
        url=str(node.get("url") or ""),
        creator=_login(node),
        created_at=node.get("createdAt"),
    )


def item_from_node(node: dict[str, Any]) -> ProjectItem:
    return ProjectItem(
        id=require_str(node, "id"),
        type=str(node.get("type") or ""),
        content=content_from_node(node.get("content")),
    )


def project_from_node(node: dict[str, Any]) -> Project:
    items: ItemPage | None = None
    raw_items = node.get("items")
    if isinstance(raw_items, dict):
        items = ItemPage(
            total_count=int(raw_items.get("totalCount") or 0),
            nodes=[item_from_node(item) for item in raw_items.get("nodes") or [] if isinstance(item, dict)],
        )
    return Project(
        id=require_str(node, "id"),
        number=int(node.get("number") or 0),
        title=str(node.get("title") or ""),
        description=str(node.get("shortDescription") or ""),
        body=str(node.get("readme") or ""),
        public=bool(node.get("public")),
        closed=bool(node.get("closed")),
        url=str(node.get("url") or ""),
        creator=_login(node),
        created_at=node.get("createdAt"),
        items=items,
    )
